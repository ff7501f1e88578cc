"""Base command class for CLI commands."""

from __future__ import annotations

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Optional

from bincli.core.api_client import BinClient
from bincli.core.config import CLIConfig
from bincli.core.errors import BinError
from bincli.ui.console import print_error

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    # Flags (argparse dest names) that must be non-empty
    required: tuple[str, ...] = ()
    # Whether the command talks to the remote service
    remote: bool = True

    def __init__(self, config: CLIConfig, api: Optional[BinClient] = None):
        self.config = config
        self.api = api or BinClient(config)

    def missing_flags(self, args: argparse.Namespace) -> list[str]:
        """Names of required flags that were not given."""
        return [flag for flag in self.required if not getattr(args, flag, None)]

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> bool:
        """
        Execute the command.

        Args:
            args: Parsed command-line flags

        Returns:
            True if successful, False otherwise
        """
        pass

    def fail(self, title: str, error: BinError) -> bool:
        """Report a failed operation."""
        logger.debug("%s: %s %s", title, type(error).__name__, error.context)
        print_error(error.message, title=title)
        return False
