"""Update command - replace a bin's content."""

from __future__ import annotations

import argparse

from bincli.commands.base import BaseCommand
from bincli.core.errors import BinError
from bincli.ui.console import print_success
from bincli.ui.spinners import create_spinner


class UpdateCommand(BaseCommand):
    """Replace the content of an existing bin."""

    name = "update"
    description = "Replace a bin's content with a JSON file"
    usage = "-update -file=<path> -id=<id>"
    required = ("file", "id")

    def execute(self, args: argparse.Namespace) -> bool:
        try:
            with create_spinner(f"Updating bin {args.id}...", style="upload"):
                self.api.update(args.file, args.id)
        except BinError as e:
            return self.fail("Failed to update bin", e)

        print_success(f"Bin {args.id} updated.")
        return True
