"""Panel components for displaying bins."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bincli.core.models import BinList


def create_bins_table(bin_list: BinList, title: str) -> Panel:
    """Create a table of the bins in a bin list."""
    table = Table(show_header=True, header_style="primary", border_style="muted", padding=(0, 1))
    table.add_column("#", style="number", justify="right")
    table.add_column("ID", style="bin.id")
    table.add_column("Name", style="text")
    table.add_column("Visibility")
    table.add_column("Created", style="muted")

    for i, item in enumerate(bin_list.bins, 1):
        visibility = Text("private", style="bin.private") if item.is_private else Text("public", style="bin.public")
        created = item.created_at.isoformat() if item.created_at else "-"
        table.add_row(str(i), item.id or "-", item.name or "-", visibility, created)

    return Panel(
        table,
        title=f"[primary]{title}[/primary]",
        subtitle=f"[muted]{len(bin_list)} bin(s)[/muted]",
        border_style="primary",
        padding=(1, 2),
    )


def create_saved_panel(ids: list[str], save_file: str) -> Panel:
    """Create a numbered list of saved bin IDs."""
    text = Text()
    for i, bin_id in enumerate(ids, 1):
        if i > 1:
            text.append("\n")
        text.append(f"{i:>3}. ", style="number")
        text.append(bin_id, style="bin.id")

    return Panel(
        text,
        title="[primary]Your saved bins[/primary]",
        subtitle=f"[muted]{save_file}[/muted]",
        border_style="primary",
        padding=(1, 2),
    )
