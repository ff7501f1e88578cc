"""API Client for the JSONBin.io v3 REST API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from bincli.core.config import CLIConfig
from bincli.core.errors import (
    APIError,
    LocalFileError,
    RequestError,
    ResponseParseError,
)
from bincli.core.models import REMOTE_CONTEXT, BinList
from bincli.core.storage import FileStorage, Storage

logger = logging.getLogger(__name__)


@dataclass
class BinResult:
    """Outcome of a remote operation and its local follow-up."""
    bin_id: str
    # Save file the ID was appended to on create
    saved_to: Optional[str] = None
    # Lines dropped from the save file on delete
    pruned: int = 0
    # Local follow-up that failed after the remote call succeeded
    warning: Optional[str] = None


class BinClient:
    """HTTP client for JSONBin.io bins.

    Example:
        with BinClient(CLIConfig.from_env()) as client:
            bin_id = client.create_bin("data.json", "My Backup", "saved-bins.txt")
            print(client.get(bin_id).bins)
    """

    def __init__(
        self,
        config: CLIConfig,
        storage: Optional[Storage] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self.storage = storage or FileStorage()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.config.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BinClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _headers(self, **extra: str) -> dict[str, str]:
        headers = {"X-Master-Key": self.config.require_key()}
        headers.update(extra)
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        operation: str,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one request and return the response with its body already read.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: Path below the base URL
            operation: Short name used in error messages ("create bin")
            content: Raw request body
            headers: Request headers
        """
        url = f"{self.config.base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            response = self.client.request(method, url, content=content, headers=headers)
        except httpx.InvalidURL as e:
            raise RequestError(f"{operation}: failed to create request: {e}") from e
        except httpx.TimeoutException as e:
            raise RequestError(
                f"{operation}: request timed out after {self.config.timeout}s", {"url": url}
            ) from e
        except httpx.HTTPError as e:
            raise RequestError(
                f"{operation}: request failed: {type(e).__name__}: {e}", {"url": url}
            ) from e

        logger.debug("%s %s -> %d (%d bytes)", method, url, response.status_code, len(response.content))
        return response

    @staticmethod
    def _check_status(response: httpx.Response, operation: str, *accepted: int) -> None:
        if response.status_code not in accepted:
            raise APIError(f"failed to {operation}", response.status_code, response.text)

    @staticmethod
    def _parse_json(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(f"{operation}: failed to parse response: {e}") from e

    def _read_body(self, local_file: str) -> bytes:
        try:
            return self.storage.read_json(local_file)
        except LocalFileError as e:
            raise LocalFileError(f"cannot read file {local_file}: {e.message}", local_file) from e

    # Remote operations
    def create_bin(self, local_file: str, bin_name: str, save_as: str = "") -> str:
        """Create a new bin from a local JSON file.

        Returns:
            The server-assigned bin ID
        """
        return self.create(local_file, bin_name, save_as).bin_id

    def create(self, local_file: str, bin_name: str, save_as: str = "") -> BinResult:
        """Create a new bin and report whether its ID was saved.

        If save_as is non-empty the new ID is appended to that file. A failure
        there only logs a warning, since the bin already exists remotely.
        """
        data = self._read_body(local_file)

        response = self._request(
            "POST",
            "/b",
            "create bin",
            content=data,
            headers=self._headers(**{"Content-Type": "application/json", "X-Bin-Name": bin_name}),
        )
        self._check_status(response, "create bin", 200, 201)

        payload = self._parse_json(response, "create bin")
        metadata = payload.get("metadata") if isinstance(payload, dict) else None
        bin_id = metadata.get("id") if isinstance(metadata, dict) else None
        if not isinstance(bin_id, str) or not bin_id:
            raise ResponseParseError("create bin: response has no metadata.id")

        logger.info("Bin created: %s -> %s", bin_name, bin_id)
        result = BinResult(bin_id)

        if save_as:
            try:
                self.storage.append(f"{bin_id}\n".encode("utf-8"), save_as)
            except LocalFileError as e:
                result.warning = f"bin created but failed to save ID: {e.message}"
                logger.warning("Bin %s created but failed to save ID: %s", bin_id, e.message)
            else:
                result.saved_to = save_as
                logger.info("ID saved to %s", save_as)

        return result

    def get_raw(self, bin_id: str) -> Any:
        """Fetch a bin and return the raw `record` value."""
        operation = f"read bin {bin_id}"
        response = self._request("GET", f"/b/{bin_id}", operation, headers=self._headers())
        self._check_status(response, operation, 200)

        payload = self._parse_json(response, operation)
        if not isinstance(payload, dict) or "record" not in payload:
            raise ResponseParseError(f"{operation}: response has no record")
        return payload["record"]

    def get(self, bin_id: str) -> BinList:
        """Fetch a bin and parse its record into a BinList."""
        record = self.get_raw(bin_id)
        try:
            return BinList.model_validate(record, context=REMOTE_CONTEXT)
        except ValidationError as e:
            raise ResponseParseError(
                f"read bin {bin_id}: failed to unmarshal bin data: {e.error_count()} invalid field(s)",
                {"errors": e.errors()},
            ) from e

    def update(self, local_file: str, bin_id: str) -> None:
        """Replace the whole content of a bin with a local JSON file."""
        data = self._read_body(local_file)
        operation = f"update bin {bin_id}"

        response = self._request(
            "PUT",
            f"/b/{bin_id}",
            operation,
            content=data,
            headers=self._headers(**{"Content-Type": "application/json"}),
        )
        self._check_status(response, operation, 200)
        logger.info("Bin %s updated", bin_id)

    def delete(self, bin_id: str, prune_from: Optional[str] = None) -> None:
        """Delete a bin permanently.

        Args:
            bin_id: Bin to delete
            prune_from: Save file to drop bin_id from once the remote delete succeeded
        """
        self.remove(bin_id, prune_from)

    def remove(self, bin_id: str, prune_from: Optional[str] = None) -> BinResult:
        """Delete a bin and report how many saved entries were pruned.

        Pruning is best effort: the bin is already gone remotely, so a local
        failure only logs a warning.
        """
        operation = f"delete bin {bin_id}"
        response = self._request("DELETE", f"/b/{bin_id}", operation, headers=self._headers())
        self._check_status(response, operation, 200)
        logger.info("Bin %s deleted", bin_id)
        result = BinResult(bin_id)

        if prune_from:
            try:
                result.pruned = self.prune_saved(prune_from, bin_id)
            except LocalFileError as e:
                result.warning = f"bin deleted but failed to prune {prune_from}: {e.message}"
                logger.warning("Bin %s deleted but failed to prune %s: %s", bin_id, prune_from, e.message)

        return result

    # Local operations
    def list_saved(self, save_file: str) -> list[str]:
        """Return the saved bin IDs in file order.

        A missing or blank save file means no saved bins.
        """
        if not self.storage.exists(save_file):
            return []
        try:
            data = self.storage.read_plain(save_file).decode("utf-8")
        except UnicodeDecodeError as e:
            raise LocalFileError(f"cannot read saved bins {save_file}: not UTF-8 text ({e.reason})", save_file) from e
        return [line.strip() for line in data.splitlines() if line.strip()]

    def prune_saved(self, save_file: str, bin_id: str) -> int:
        """Remove every line equal to bin_id from the save file.

        Returns:
            Number of lines removed
        """
        saved = self.list_saved(save_file)
        kept = [line for line in saved if line != bin_id]
        removed = len(saved) - len(kept)
        if removed:
            content = "".join(f"{line}\n" for line in kept)
            self.storage.write(content.encode("utf-8"), save_file)
            logger.info("Pruned %d entr%s for %s from %s", removed, "y" if removed == 1 else "ies", bin_id, save_file)
        return removed
