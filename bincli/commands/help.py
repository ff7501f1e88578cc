"""Help command - display CLI usage."""

from __future__ import annotations

import argparse

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bincli import __app_name__, __version__
from bincli.commands.base import BaseCommand
from bincli.ui.console import console

COMMANDS = [
    {
        "name": "-create",
        "description": "Create a new bin from a JSON file",
        "usage": "-create -file=data.json [-binName=\"My Data\"] [-save=saved-bins.txt]",
    },
    {
        "name": "-get",
        "description": "Read a bin by ID",
        "usage": "-get -id=67f1a2b3c4d5e6f7 [-json]",
    },
    {
        "name": "-update",
        "description": "Replace a bin's content with a JSON file",
        "usage": "-update -file=new.json -id=67f1a2b3c4d5e6f7",
    },
    {
        "name": "-delete",
        "description": "Delete a bin by ID",
        "usage": "-delete -id=67f1a2b3c4d5e6f7 [-prune] [-save=saved-bins.txt]",
    },
    {
        "name": "-list",
        "description": "Show saved bin IDs",
        "usage": "-list [-save=saved-bins.txt]",
    },
    {
        "name": "-new",
        "description": "Add a bin entry to a local JSON file",
        "usage": "-new -file=bins.json -binName=\"Class 2025\" [-private]",
    },
]


class HelpCommand(BaseCommand):
    """Display usage information."""

    name = "help"
    description = "Show usage"
    usage = "bincli"
    remote = False

    def execute(self, args: argparse.Namespace | None = None) -> bool:
        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 1),
        )
        table.add_column("Action", style="command", no_wrap=True)
        table.add_column("Description", style="text")
        table.add_column("Usage", style="muted")

        for cmd in COMMANDS:
            table.add_row(cmd["name"], cmd["description"], cmd["usage"])

        console.print(Panel(
            table,
            title=f"[primary]{__app_name__} {__version__} - JSONBin.io CLI[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        setup = Text()
        setup.append("Setup:\n", style="primary")
        setup.append("  export JSONBIN_KEY=\"your-master-key-here\"", style="command")
        setup.append("  (or put it in a .env file)\n", style="muted")
        setup.append("  Get a free key at ", style="text")
        setup.append("https://jsonbin.io", style="secondary")
        console.print(setup)

        return True
