"""UI components for the bin CLI."""

from bincli.ui.console import (
    console,
    err_console,
    print_error,
    print_success,
    print_warning,
    setup_logging,
)
from bincli.ui.panels import create_bins_table, create_saved_panel
from bincli.ui.spinners import create_spinner
from bincli.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
    "setup_logging",
    # Panels
    "create_bins_table",
    "create_saved_panel",
    # Spinners
    "create_spinner",
]
