""" Registry of builtin commands. """
import logging
import os
from types import MappingProxyType

from minish import runner
from minish.constants import SPECIAL_BUILTINS
from minish.exceptions import BuiltinError, HomeNotSet, NoSuchDirectory, TooManyArguments

logger = logging.getLogger(__name__)

_HANDLERS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        _HANDLERS[name] = func
        return func
    return wrapper


class BuiltinRegistry:
    """
    Read-only mapping of builtin names to handlers.

    A handler is called as ``handler(args, registry)`` and returns the text
    to print; it raises BuiltinError on failure.
    """
    def __init__(self, handlers):
        self._handlers = MappingProxyType(dict(handlers))

    def __contains__(self, name):
        return name in self._handlers

    def __iter__(self):
        return iter(self._handlers)

    def __len__(self):
        return len(self._handlers)

    def get(self, name):
        return self._handlers.get(name)

    def is_builtin(self, name) -> bool:
        return name in SPECIAL_BUILTINS or name in self._handlers


def default_registry() -> BuiltinRegistry:
    return BuiltinRegistry(_HANDLERS)


@builtin("echo")
def builtin_echo(args, registry) -> str:
    return " ".join(args)


@builtin("pwd")
def builtin_pwd(args, registry) -> str:
    try:
        return os.getcwd()
    except OSError as e:
        raise BuiltinError(f"pwd: {e.strerror}") from e


@builtin("type")
def builtin_type(args, registry) -> str:
    lines = []
    for name in args:
        if registry.is_builtin(name):
            lines.append(f"{name} is a shell builtin")
            continue

        path = runner.find_executable(name)
        if path is None:
            lines.append(f"{name}: not found")
        else:
            lines.append(f"{name} is {path}")
    return "\n".join(lines)


def change_directory(args):
    """ Implement `cd`; the working directory is left alone on failure. """
    if len(args) > 1:
        raise TooManyArguments("cd")

    if not args or args[0] == "~":
        target = os.environ.get("HOME", "")
        if not target:
            raise HomeNotSet()
    else:
        target = args[0]

    try:
        os.chdir(target)
    except (OSError, ValueError) as e:
        logger.debug("chdir to %r failed: %s", target, e)
        raise NoSuchDirectory(args[0] if args else target) from e
    logger.debug("working directory is now %s", target)
