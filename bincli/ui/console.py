"""Rich console instances, message helpers and logging setup."""

from __future__ import annotations

import logging

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from bincli.ui.theme import get_theme

# Results go to stdout, logs to stderr
console = Console(theme=get_theme().to_rich_theme(), highlight=True)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True)


def _print_panel(message: str, title: str, color: str, icon: str) -> None:
    content = Text()
    content.append(message, style=color)

    console.print(Panel(
        content,
        title=f"[{color} bold]{icon} {title}[/{color} bold]",
        border_style=color,
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message."""
    _print_panel(message, title, "#FF5252", "✖")


def print_success(message: str, title: str = "Success") -> None:
    """Print a success message."""
    _print_panel(message, title, "#00E676", "✔")


def print_warning(message: str, title: str = "Warning") -> None:
    """Print a warning message."""
    _print_panel(message, title, "#FFB347", "⚠")


def setup_logging(verbose: bool = False) -> None:
    """Route the standard logging module through rich on stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.INFO if verbose else logging.WARNING)
