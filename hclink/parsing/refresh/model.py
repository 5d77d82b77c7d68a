from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class RefreshStatus(BaseModel):
    # Only the cursor is used; the rest is informational and never validated.
    last: int
    status: Optional[Any] = None
    timestamp: Optional[Any] = None
    date: Optional[Any] = None
    logs: Optional[Any] = None


class DeviceChange(BaseModel):
    id: int = Field(strict=True)
    value: float = Field(strict=True)


class ChangesResponse(BaseModel):
    changes: List[Any]
    last: Optional[int] = None

    @field_validator("last", mode="before")
    @classmethod
    def _drop_invalid_cursor(cls, value: Any) -> Optional[int]:
        # A cursor the hub garbled is treated as absent.
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None


@dataclass
class ChangeSet:
    """
    One decoded incremental refresh.

    Attributes:
        changes: Entries that carried a valid id and numeric value.
        skipped: Number of entries dropped for being malformed.
        last: Cursor returned by the hub alongside the changes, if any.
        applied: Ids whose device actually changed state; filled in by the
            session when the change-set is dispatched.
    """
    changes: list[DeviceChange]
    skipped: int = 0
    last: Optional[int] = None
    applied: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.changes)
