"""Get command - read a bin by ID."""

from __future__ import annotations

import argparse
import json

from bincli.commands.base import BaseCommand
from bincli.core.errors import BinError
from bincli.ui.console import console
from bincli.ui.panels import create_bins_table
from bincli.ui.spinners import create_spinner


class GetCommand(BaseCommand):
    """Read a bin by ID."""

    name = "get"
    description = "Read a bin by ID"
    usage = "-get -id=<id> [-json]"
    required = ("id",)

    def execute(self, args: argparse.Namespace) -> bool:
        try:
            with create_spinner(f"Fetching bin {args.id}...", style="loading"):
                if args.json:
                    record = self.api.get_raw(args.id)
                else:
                    bin_list = self.api.get(args.id)
        except BinError as e:
            return self.fail("Failed to read bin", e)

        if args.json:
            console.print_json(json.dumps(record))
            return True

        if not bin_list.bins:
            console.print(f"[muted]Bin {args.id} has no bins in it.[/muted]")
            return True

        console.print(create_bins_table(bin_list, f"Bin {args.id} content"))
        return True
