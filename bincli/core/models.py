"""Bin model - the records stored inside a bin document."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from bincli.core.errors import BinError

# Validation context for records that come back from the service, which is
# authoritative for their content
REMOTE_CONTEXT = {"remote": True}


class Bin(BaseModel):
    """A single bin entry.

    Bins built locally must have a name; bins parsed with REMOTE_CONTEXT
    are accepted as the server returns them.
    """

    id: str = ""
    name: str = Field(default="", validate_default=True)
    is_private: bool = False
    created_at: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str, info: ValidationInfo) -> str:
        if info.context and info.context.get("remote"):
            return value
        if not value.strip():
            raise ValueError("name can't be empty")
        return value


class BinList(BaseModel):
    """Ordered list of bins, as stored under one remote bin."""

    bins: list[Bin] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.bins)

    def to_bytes(self) -> bytes:
        return self.model_dump_json(indent=2).encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes | str, remote: bool = False) -> "BinList":
        return cls.model_validate_json(data, context=REMOTE_CONTEXT if remote else None)


def new_bin(name: str, is_private: bool = False) -> Bin:
    """Build a bin locally with a fresh id and the current time.

    Raises:
        BinError: if name is empty
    """
    if not name or not name.strip():
        raise BinError("name can't be empty")
    return Bin(
        id=str(uuid.uuid4()),
        name=name,
        is_private=is_private,
        created_at=datetime.now(timezone.utc),
    )
