"""Spinner shown while waiting on the network."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from bincli.ui.console import console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "upload": "arc",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a spinner during an operation.

    Falls back to no output when stdout is not a terminal.
    """
    if not console.is_terminal:
        yield
        return

    with console.status(
        f"[primary]{message}[/primary]",
        spinner=SPINNER_STYLES.get(style, "dots"),
        spinner_style="primary",
    ):
        yield
