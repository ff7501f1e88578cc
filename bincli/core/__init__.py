"""Core CLI components - configuration, storage, models and the API client."""

from bincli.core.api_client import BinClient, BinResult
from bincli.core.config import CLIConfig, get_config
from bincli.core.errors import APIError, BinError, LocalFileError
from bincli.core.models import Bin, BinList, new_bin
from bincli.core.storage import FileStorage, MemoryStorage, Storage

__all__ = [
    "BinClient",
    "BinResult",
    "CLIConfig",
    "get_config",
    "BinError",
    "APIError",
    "LocalFileError",
    "Bin",
    "BinList",
    "new_bin",
    "Storage",
    "FileStorage",
    "MemoryStorage",
]
