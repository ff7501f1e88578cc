"""List command - show the bin IDs saved locally."""

from __future__ import annotations

import argparse

from bincli.commands.base import BaseCommand
from bincli.core.errors import BinError
from bincli.ui.console import console
from bincli.ui.panels import create_saved_panel


class ListCommand(BaseCommand):
    """List saved bin IDs."""

    name = "list"
    description = "List all saved bin IDs"
    usage = "-list [-save=<path>]"
    remote = False

    def execute(self, args: argparse.Namespace) -> bool:
        save_file = args.save or self.config.save_file

        try:
            ids = self.api.list_saved(save_file)
        except BinError as e:
            return self.fail("Cannot read saved bins", e)

        if not ids:
            console.print("No saved bins yet.")
            return True

        console.print(create_saved_panel(ids, save_file))
        return True
