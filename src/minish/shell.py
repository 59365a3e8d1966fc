""" Implement the core of the shell. """
import logging
import sys

from minish.constants import DEFAULT_PROMPT, STATUS_FAILURE, STATUS_OK
from minish.dispatcher import dispatch
from minish.exceptions import ReadError, ShellExit, ShellSyntaxError
from minish.lexer import tokenize
from minish.parser import resolve
from minish.shell_builtins import BuiltinRegistry, default_registry

logger = logging.getLogger(__name__)


def read_command(prompt=DEFAULT_PROMPT):
    """ Read one line; an unreadable stdin becomes a ReadError. """
    try:
        return input(prompt)
    except OSError as e:
        raise ReadError(str(e)) from e


class Shell:
    def __init__(self, registry: BuiltinRegistry | None = None, prompt=DEFAULT_PROMPT):
        self.registry = registry if registry is not None else default_registry()
        self.prompt = prompt

    def execute_line(self, line: str) -> int:
        tokens = tokenize(line)
        logger.debug("tokens: %r", tokens)

        try:
            cmd = resolve(tokens)
        except ShellSyntaxError as e:
            print(e, file=sys.stderr)
            return STATUS_FAILURE

        if cmd is None:
            return STATUS_OK
        logger.debug("resolved: %r", cmd)
        return dispatch(cmd, self.registry)

    def run(self) -> int:
        while True:
            try:
                line = read_command(self.prompt)
                self.execute_line(line)
            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return STATUS_OK

            except ReadError as e:
                logger.error("cannot read standard input: %s", e)
                print(f"error reading input: {e}", file=sys.stderr)
                return STATUS_FAILURE
