"""Delete command - remove a bin permanently."""

from __future__ import annotations

import argparse

from bincli.commands.base import BaseCommand
from bincli.core.errors import BinError
from bincli.ui.console import console, print_success, print_warning
from bincli.ui.spinners import create_spinner


class DeleteCommand(BaseCommand):
    """Delete a bin by ID."""

    name = "delete"
    description = "Delete a bin by ID"
    usage = "-delete -id=<id> [-prune] [-save=<path>]"
    required = ("id",)

    def execute(self, args: argparse.Namespace) -> bool:
        save_file = args.save or self.config.save_file
        prune_from = save_file if args.prune else None

        try:
            with create_spinner(f"Deleting bin {args.id}...", style="loading"):
                result = self.api.remove(args.id, prune_from=prune_from)
        except BinError as e:
            return self.fail("Failed to delete bin", e)

        print_success(f"Bin {args.id} deleted.")
        if result.warning:
            print_warning(result.warning)
        elif result.pruned:
            console.print(f"  [muted]Removed {result.pruned} entr{'y' if result.pruned == 1 else 'ies'} from[/muted] [path]{prune_from}[/path]")
        elif prune_from:
            console.print(f"  [muted]Not listed in[/muted] [path]{prune_from}[/path]")
        return True
