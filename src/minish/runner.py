""" Run external programs and open redirect targets. """
import contextlib
import logging
import shutil
import subprocess
import sys

from minish.command import Descriptor, RedirectSpec
from minish.exceptions import CommandNotFound, SpawnError, WriteError

logger = logging.getLogger(__name__)


def find_executable(name: str) -> str | None:
    """ Look up name on PATH. """
    return shutil.which(name)


def run_external(name, args, descriptor=None, sink=None) -> int:
    """
    Run an executable found on PATH and wait for it.

    The sink receives the child's stderr when descriptor is STDERR and its
    stdout otherwise; the other stream is inherited. The child's exit code
    is returned as-is; only a missing executable or a failed spawn raise.
    """
    path = find_executable(name)
    if path is None:
        raise CommandNotFound(name)
    logger.debug("running %s (%s) with %r", name, path, args)

    stdout = None
    stderr = None
    if sink is not None:
        if descriptor is Descriptor.STDERR:
            stderr = sink
        else:
            stdout = sink

    # the child writes straight to fd 1, so anything we buffered goes first
    sys.stdout.flush()
    try:
        completed = subprocess.run(
            [name] + list(args),
            executable=path,
            stdout=stdout,
            stderr=stderr,
        )
    except (OSError, ValueError) as e:
        logger.warning("could not start %s: %s", path, e)
        raise SpawnError(name, getattr(e, "strerror", None) or str(e)) from e

    logger.debug("%s exited with status %d", name, completed.returncode)
    return completed.returncode


@contextlib.contextmanager
def open_redirect(spec: RedirectSpec | None):
    """ Open a redirect target for writing, or yield None without one. """
    if spec is None:
        yield None
        return

    try:
        f = open(spec.path, spec.mode)
    except (OSError, ValueError) as e:
        logger.warning("cannot open redirect target %s: %s", spec.path, e)
        raise WriteError(spec.path, getattr(e, "strerror", None) or str(e)) from e

    with f:
        yield f


def write_output(path: str, payload: str, append: bool = False):
    """ Write payload to path, truncating it first unless appending. """
    mode = "a" if append else "w"
    try:
        with open(path, mode) as f:
            f.write(payload)
    except (OSError, ValueError) as e:
        logger.warning("cannot write to %s: %s", path, e)
        raise WriteError(path, getattr(e, "strerror", None) or str(e)) from e
