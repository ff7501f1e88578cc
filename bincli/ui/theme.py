"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI - Teal & Amber palette."""

    # Primary colors
    primary: str = "#26C6DA"      # Teal - main accent
    secondary: str = "#FFB300"    # Amber - secondary accent
    tertiary: str = "#7E57C2"     # Violet - tertiary accent

    # Status colors
    success: str = "#00E676"      # Bright green
    error: str = "#FF5252"        # Red
    warning: str = "#FFB347"      # Orange-yellow
    info: str = "#80DEEA"         # Light teal

    # Text colors
    text: str = "#E8E8E8"         # Light gray
    muted: str = "#888888"        # Muted gray
    highlight: str = "#FFFFFF"    # White
    dim: str = "#555555"          # Dim gray

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            # Core styles
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),
            "tertiary": Style(color=self.tertiary),
            "primary.bold": Style(color=self.primary, bold=True),

            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),

            # Text styles
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "dim": Style(color=self.dim),
            "highlight": Style(color=self.highlight, bold=True),

            # Semantic styles
            "command": Style(color=self.primary, bold=True),
            "path": Style(color=self.secondary),
            "number": Style(color=self.warning),
            "bin.id": Style(color=self.secondary, bold=True),
            "bin.private": Style(color=self.error),
            "bin.public": Style(color=self.success),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
