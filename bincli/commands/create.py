"""Create command - upload a local JSON file as a new bin."""

from __future__ import annotations

import argparse

from bincli.commands.base import BaseCommand
from bincli.core.errors import BinError
from bincli.ui.console import console, print_success, print_warning
from bincli.ui.spinners import create_spinner


class CreateCommand(BaseCommand):
    """Create a new bin from a JSON file."""

    name = "create"
    description = "Create a new bin from a JSON file"
    usage = "-create -file=<path> [-binName=<name>] [-save=<path>]"
    required = ("file",)

    def execute(self, args: argparse.Namespace) -> bool:
        bin_name = args.bin_name or self.config.bin_name
        save_as = self.config.save_file if args.save is None else args.save

        try:
            with create_spinner(f"Creating bin {bin_name}...", style="upload"):
                result = self.api.create(args.file, bin_name, save_as)
        except BinError as e:
            return self.fail("Failed to create bin", e)

        print_success(f"Bin created! Name: {bin_name} → ID: {result.bin_id}")
        if result.saved_to:
            console.print(f"  [muted]ID saved to[/muted] [path]{result.saved_to}[/path]")
        if result.warning:
            print_warning(result.warning)
        return True
