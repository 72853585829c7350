"""Entry ORM — one persisted journal post.

Invariants:
    - id is an autoincrementing integer primary key, never reused
    - content, greentext, name and sub are non-nullable unbounded text
    - name defaults to "Anonymous", sub to ""
    - created_at set once at insert; sole listing sort key (newest first)
    - Rows are inserted or deleted, never updated

Design Decisions:
    - sqlite_autoincrement=True: SQLite AUTOINCREMENT guarantees ids of deleted
      rows are not handed out again (plain INTEGER PRIMARY KEY may reuse them)
    - created_at default generated in Python (UTC, microseconds) rather than
      CURRENT_TIMESTAMP, whose one-second resolution ties rapid posts
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from diary.core.domain_types import DEFAULT_NAME, DEFAULT_SUBJECT
from diary.db.base import Base


class Entry(Base):
    """Journal entry with its derived greentext."""
    __tablename__ = "entries"
    __table_args__ = (
        Index("ix_entries_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    greentext: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(
        Text, nullable=False, default=DEFAULT_NAME,
    )
    sub: Mapped[str] = mapped_column(
        Text, nullable=False, default=DEFAULT_SUBJECT,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
