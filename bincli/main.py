"""Main CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from bincli import __version__
from bincli.commands.base import BaseCommand
from bincli.commands.create import CreateCommand
from bincli.commands.delete import DeleteCommand
from bincli.commands.get import GetCommand
from bincli.commands.help import HelpCommand
from bincli.commands.list import ListCommand
from bincli.commands.new import NewCommand
from bincli.commands.update import UpdateCommand
from bincli.core.api_client import BinClient
from bincli.core.config import CLIConfig, set_config
from bincli.core.errors import ConfigError
from bincli.ui.console import print_error, setup_logging

logger = logging.getLogger(__name__)

# Action flag -> command class, in the order they are checked
COMMANDS: dict[str, type[BaseCommand]] = {
    "create": CreateCommand,
    "get": GetCommand,
    "update": UpdateCommand,
    "delete": DeleteCommand,
    "list": ListCommand,
    "new": NewCommand,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Options use the single-dash spelling (-create -file=x.json); the
    double-dash form is accepted too.
    """
    parser = argparse.ArgumentParser(
        prog="bincli",
        description="bincli - command-line client for JSONBin.io",
        allow_abbrev=False,
        add_help=False,
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("-create", "--create", action="store_true", help="Create a new bin from a JSON file")
    actions.add_argument("-get", "--get", action="store_true", help="Read a bin by ID")
    actions.add_argument("-update", "--update", action="store_true", help="Update an existing bin")
    actions.add_argument("-delete", "--delete", action="store_true", help="Delete a bin by ID")
    actions.add_argument("-list", "--list", action="store_true", help="List all saved bin IDs")
    actions.add_argument("-new", "--new", action="store_true", help="Add a bin entry to a local JSON file")

    parser.add_argument("-file", "--file", default="", help="Path to JSON file (required for -create, -update and -new)")
    parser.add_argument("-id", "--id", default="", help="Bin ID (required for -get, -update, -delete)")
    parser.add_argument("-binName", "--binName", dest="bin_name", default="", help="Display name for the bin")
    parser.add_argument(
        "-save",
        "--save",
        default=None,
        help="File to save bin IDs (default: saved-bins.txt, empty to disable on -create)",
    )
    parser.add_argument("-json", "--json", action="store_true", help="Print the raw record with -get")
    parser.add_argument("-prune", "--prune", action="store_true", help="Drop the ID from the save file on -delete")
    parser.add_argument("-private", "--private", action="store_true", help="Mark the bin private with -new")

    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs")
    parser.add_argument("-h", "-help", "--help", action="store_true", dest="show_help", help="Show usage")
    parser.add_argument("--version", action="version", version=f"bincli {__version__}")
    return parser


def run(
    argv: Optional[list[str]] = None,
    config: Optional[CLIConfig] = None,
    api: Optional[BinClient] = None,
) -> int:
    """Parse flags, run one command and return the exit code."""
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    # Usage needs no settings, so a broken environment can't hide it
    if not argv or args.show_help:
        HelpCommand(config or CLIConfig(), api).execute(args)
        return 0

    if config is None:
        try:
            config = CLIConfig.from_env()
        except ConfigError as e:
            print_error(e.message, title="Invalid configuration")
            return 1
    set_config(config)

    action = next((name for name in COMMANDS if getattr(args, name)), None)
    if action is None:
        print_error("No action given. Use one of -create, -get, -update, -delete, -list, -new.")
        return 1

    command = COMMANDS[action](config, api)

    missing = command.missing_flags(args)
    if missing:
        flags = " and ".join(f"-{'binName' if flag == 'bin_name' else flag}" for flag in missing)
        print_error(f"{flags} {'is' if len(missing) == 1 else 'are'} required with -{action}")
        return 1

    if command.remote:
        try:
            config.require_key()
        except ConfigError as e:
            print_error(e.message, title="Missing master key")
            return 1

    logger.debug("Running %s", action)
    with command.api:
        success = command.execute(args)
    return 0 if success else 1


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
