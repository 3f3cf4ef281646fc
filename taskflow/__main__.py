#!/usr/bin/env python3
"""
TaskFlow service entry point: ``python -m taskflow server``.
"""
import argparse
import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class Command(ABC):
    """
    A subcommand of the ``taskflow`` entry point.

    Used as a context manager: init() on enter, cleanup() on exit, with
    run() in between returning the process exit code.
    """

    name: str = ""

    def __init__(self, args: argparse.Namespace):
        self.args = args

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Declare the subcommand's options."""

    def init(self) -> None:
        logger.debug(f"Starting {self.name} command")

    @abstractmethod
    def run(self) -> int:
        ...

    def cleanup(self) -> None:
        logger.debug(f"Finished {self.name} command")

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False


def _command_classes() -> dict:
    # Late import: command modules subclass Command from this module
    from taskflow.commands.server import ServerCommand
    return {cls.name: cls for cls in (ServerCommand,)}


def build_parser() -> argparse.ArgumentParser:
    """Build the parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="taskflow",
        description="TaskFlow - project and task tracking service",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for name, cmd_class in _command_classes().items():
        subparser = subparsers.add_parser(name, help=cmd_class.__doc__)
        cmd_class.add_arguments(subparser)
    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        with _command_classes()[args.command](args) as cmd:
            return cmd.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except Exception as e:
        logger.exception(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
