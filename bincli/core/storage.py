"""Local storage for request bodies and the saved bin IDs file."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from bincli.core.errors import LocalFileError

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Capabilities the client needs from local storage."""

    def read_json(self, path: str) -> bytes:
        """Read a `.json` file as raw bytes.

        The suffix is checked first, so a wrong path never touches the disk.
        """
        if not str(path).endswith(".json"):
            raise LocalFileError(f"{path} isn't a valid json file", path)
        return self.read_plain(path)

    @abstractmethod
    def read_plain(self, path: str) -> bytes:
        """Read a file as raw bytes."""

    @abstractmethod
    def write(self, content: bytes, path: str) -> None:
        """Create or truncate a file and write content to it."""

    @abstractmethod
    def append(self, content: bytes, path: str) -> None:
        """Append content to a file, creating it if needed."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Whether the file exists."""


class FileStorage(Storage):
    """Storage backed by the local filesystem."""

    def read_plain(self, path: str) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise LocalFileError(f"cannot read {path}: {e.strerror or e}", path) from e

    def write(self, content: bytes, path: str) -> None:
        try:
            Path(path).write_bytes(content)
        except OSError as e:
            raise LocalFileError(f"cannot write {path}: {e.strerror or e}", path) from e
        logger.debug("Wrote %d bytes to %s", len(content), path)

    def append(self, content: bytes, path: str) -> None:
        try:
            with open(path, "ab") as fh:
                fh.write(content)
        except OSError as e:
            raise LocalFileError(f"cannot append to {path}: {e.strerror or e}", path) from e
        logger.debug("Appended %d bytes to %s", len(content), path)

    def exists(self, path: str) -> bool:
        return Path(path).is_file()


class MemoryStorage(Storage):
    """In-memory storage, keyed by path. Used by tests."""

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files: dict[str, bytes] = dict(files or {})

    def read_plain(self, path: str) -> bytes:
        try:
            return self.files[str(path)]
        except KeyError:
            raise LocalFileError(f"cannot read {path}: no such file", path) from None

    def write(self, content: bytes, path: str) -> None:
        self.files[str(path)] = bytes(content)

    def append(self, content: bytes, path: str) -> None:
        self.files[str(path)] = self.files.get(str(path), b"") + bytes(content)

    def exists(self, path: str) -> bool:
        return str(path) in self.files
