""" Runtime settings from the environment and the command line. """
import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional

from minish.constants import DEFAULT_PROMPT

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShellConfig:
    prompt: str = DEFAULT_PROMPT
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "ShellConfig":
        environ = os.environ if environ is None else environ
        config = cls()
        if "MINISH_PROMPT" in environ:
            config.prompt = environ["MINISH_PROMPT"]

        level = environ.get("MINISH_LOG_LEVEL", "").upper()
        if level in LOG_LEVELS:
            config.log_level = level
        elif level:
            logger.warning("ignoring unknown MINISH_LOG_LEVEL %r", level)

        if environ.get("MINISH_LOG_FILE"):
            config.log_file = environ["MINISH_LOG_FILE"]
        return config


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A small command interpreter with quoting and output redirection",
    )
    parser.add_argument(
        "--prompt",
        help="prompt printed before each line (default: $MINISH_PROMPT or '$ ')",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging threshold (default: $MINISH_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="write log records here instead of stderr",
    )
    return parser


def load_config(argv=None, environ=None) -> ShellConfig:
    """ Environment values first, then command-line options on top. """
    config = ShellConfig.from_env(environ)
    args = build_arg_parser().parse_args(argv)

    if args.prompt is not None:
        config.prompt = args.prompt
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_file is not None:
        config.log_file = args.log_file
    return config
