"""
Command-line entry point for the txkv interpreter.
"""

from typing import List, Optional
import argparse
import logging
import sys

from .commands import USAGE
from .config import LOG_LEVELS, Config
from .interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txkv",
        description="Interactive key-value store with nested transactions",
    )
    parser.add_argument("--prompt", help="Prompt written before each input line")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Level for internal log records (default: WARNING)",
    )
    parser.add_argument(
        "--banner",
        action="store_true",
        default=None,
        help="Print the list of available commands at startup",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run an interpreter session on the process's standard streams."""
    args = build_parser().parse_args(argv)

    try:
        config = Config().update_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.debug("starting session with %r", config)

    if config.banner:
        print(USAGE.strip("\n"))

    interpreter = Interpreter(prompt=config.prompt)
    return interpreter.run()
