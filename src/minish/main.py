""" Command-line entry point. """
import logging
import sys

from minish.config import load_config
from minish.shell import Shell
from minish.shell_builtins import default_registry

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level="WARNING", log_file=None):
    if log_file:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv=None):
    config = load_config(argv)
    configure_logging(config.log_level, config.log_file)
    logging.getLogger(__name__).debug("starting with %r", config)

    shell = Shell(default_registry(), prompt=config.prompt)
    sys.exit(shell.run())


if __name__ == "__main__":
    main()
