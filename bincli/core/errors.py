"""
Exception hierarchy for the bin client.

    BinError (base)
    ├── ConfigError         master key missing
    ├── LocalFileError      missing file, wrong extension, write failure
    ├── RequestError        request could not be built or sent
    ├── APIError            non-2xx response (status code + body)
    └── ResponseParseError  response body is not the expected envelope
"""

from __future__ import annotations

from typing import Any, Optional


class BinError(Exception):
    """Base exception for all bincli errors.

    Attributes:
        message: Human-readable description, safe to print
        context: Extra details (operation, file, bin id) for debug logging
    """

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ConfigError(BinError):
    """Configuration is missing or invalid."""


class LocalFileError(BinError):
    """A local file could not be read or written."""

    def __init__(self, message: str, path: str, context: Optional[dict[str, Any]] = None):
        self.path = path
        super().__init__(message, {"path": path, **(context or {})})


class RequestError(BinError):
    """The HTTP request could not be sent (DNS, refused connection, timeout)."""


class APIError(BinError):
    """The service answered with an unexpected status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        context: Optional[dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{message} (status {status_code}): {body}" if body else f"{message} (status {status_code})",
            {"status_code": status_code, **(context or {})},
        )


class ResponseParseError(BinError):
    """The response body is not the JSON envelope we expected."""
