""" Route a parsed command to a builtin or an external program. """
import logging
import sys

from minish import runner
from minish.command import Descriptor, ParsedCommand
from minish.constants import (
    STATUS_CANNOT_EXECUTE,
    STATUS_FAILURE,
    STATUS_NOT_FOUND,
    STATUS_OK,
)
from minish.exceptions import (
    BuiltinError,
    CommandNotFound,
    ShellExit,
    SpawnError,
    WriteError,
)
from minish.shell_builtins import BuiltinRegistry, change_directory

logger = logging.getLogger(__name__)


def report(err):
    print(err, file=sys.stderr)


def run_builtin(cmd: ParsedCommand, handler, registry: BuiltinRegistry) -> int:
    output = handler(cmd.args, registry)

    redirect = cmd.redirect
    if redirect is None:
        print(output)
    elif redirect.descriptor is Descriptor.STDOUT:
        runner.write_output(redirect.path, output + "\n", redirect.append)
    else:
        # builtins have no error stream of their own: the output still goes
        # to stdout and the target is only created or truncated
        print(output)
        runner.write_output(redirect.path, "", redirect.append)
    return STATUS_OK


def dispatch(cmd: ParsedCommand, registry: BuiltinRegistry) -> int:
    """
    Execute one command and return its status.

    `exit` raises ShellExit. Every other error is reported on stderr and
    turned into a nonzero status so the loop can carry on.
    """
    if cmd.name == "exit":
        raise ShellExit(0)

    if cmd.name == "cd":
        try:
            change_directory(cmd.args)
        except BuiltinError as e:
            report(e)
            return STATUS_FAILURE
        return STATUS_OK

    handler = registry.get(cmd.name)
    if handler is not None:
        logger.debug("builtin %s %r redirect=%r", cmd.name, cmd.args, cmd.redirect)
        try:
            return run_builtin(cmd, handler, registry)
        except (BuiltinError, WriteError) as e:
            report(e)
            return STATUS_FAILURE

    logger.debug("external %s %r redirect=%r", cmd.name, cmd.args, cmd.redirect)
    descriptor = cmd.redirect.descriptor if cmd.redirect else None
    try:
        with runner.open_redirect(cmd.redirect) as sink:
            return runner.run_external(cmd.name, cmd.args, descriptor, sink)
    except CommandNotFound as e:
        report(e)
        return STATUS_NOT_FOUND
    except SpawnError as e:
        report(e)
        return STATUS_CANNOT_EXECUTE
    except WriteError as e:
        report(e)
        return STATUS_FAILURE
