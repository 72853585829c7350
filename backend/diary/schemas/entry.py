"""Entry Schemas — explicit request/response contracts for /api/entries.

Invariants:
    - EntryCreate.content is optional at the schema level: the clear command
      carries no content; blank-content rejection happens in submit_entry
    - name/sub/options accept null and are normalized downstream
    - EntryRow.created_at always serializes with a UTC offset

Design Decisions:
    - from_attributes=True: EntryRow built straight from ORM rows
    - No length caps: any non-blank content is stored as submitted
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class EntryCreate(BaseModel):
    """POST /api/entries body."""
    content: str | None = None
    options: str | None = None
    name: str | None = None
    sub: str | None = None


class EntryRow(BaseModel):
    """One stored entry as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    greentext: str
    name: str
    sub: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite drops tzinfo on read; stored values are UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class EntryListResponse(BaseModel):
    entries: list[EntryRow]


class EntryDetailResponse(BaseModel):
    entry: EntryRow | None


class ClearResponse(BaseModel):
    message: str
    changes: int


class DeleteResponse(BaseModel):
    message: str
    changes: int


class ThreadRow(BaseModel):
    """Rendered board record (see core/render_entries.py)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    no: str
    name: str
    sub: str
    date: str
    comment: str


class ThreadListResponse(BaseModel):
    threads: list[ThreadRow]
