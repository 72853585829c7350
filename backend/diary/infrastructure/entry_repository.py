"""SQL Entry Repository — EntryRepository implementation over an AsyncSession.

Invariants:
    - Each write is a single statement committed on its own (no multi-statement transactions)
    - list_newest_first orders by created_at DESC, then id DESC for equal timestamps
    - delete/delete_all return the affected row count (0 for unknown ids, never an error)
    - Ids outside the 64-bit column range are treated as missing, never sent to the driver
    - SQLAlchemy failures are rolled back and raised as DatabaseError

Design Decisions:
    - Built per request from the injected session: no process-wide handle in handlers
    - Bulk DELETE statements over ORM deletes: one round trip, rowcount is exact
"""

import logging
from contextlib import asynccontextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from diary.core.domain_types import EntryId, is_storable_entry_id
from diary.core.errors import DatabaseError, ErrorContext
from diary.models.entry import Entry

logger = logging.getLogger(__name__)


class SqlEntryRepository:
    """Persists Entry rows through SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, *, content: str, greentext: str, name: str, sub: str,
    ) -> Entry:
        async with self._guard("insert"):
            entry = Entry(
                content=content, greentext=greentext, name=name, sub=sub,
            )
            self.db.add(entry)
            await self.db.commit()
            await self.db.refresh(entry)
        logger.info("Entry stored", extra={"entry_id": entry.id})
        return entry

    async def list_newest_first(self) -> list[Entry]:
        async with self._guard("select"):
            result = await self.db.execute(
                select(Entry).order_by(
                    Entry.created_at.desc(), Entry.id.desc(),
                ),
            )
            return list(result.scalars().all())

    async def get(self, entry_id: EntryId) -> Entry | None:
        if not is_storable_entry_id(entry_id):
            return None
        async with self._guard("select", entry_id):
            result = await self.db.execute(
                select(Entry).where(Entry.id == entry_id),
            )
            return result.scalar_one_or_none()

    async def delete(self, entry_id: EntryId) -> int:
        if not is_storable_entry_id(entry_id):
            return 0
        async with self._guard("delete", entry_id):
            result = await self.db.execute(
                delete(Entry).where(Entry.id == entry_id),
            )
            await self.db.commit()
        logger.info(
            "Entry delete executed",
            extra={"entry_id": entry_id, "changes": result.rowcount},
        )
        return result.rowcount

    async def delete_all(self) -> int:
        async with self._guard("delete"):
            result = await self.db.execute(delete(Entry))
            await self.db.commit()
        return result.rowcount

    @asynccontextmanager
    async def _guard(self, operation: str, entry_id: int | None = None):
        """Roll back and map SQLAlchemy errors to DatabaseError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Entry {operation} failed: {e}",
                extra={"entry_id": entry_id, "error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(
                "Failed to save" if operation == "insert" else "Query failed",
                operation,
                ErrorContext(entry_id=entry_id),
            )
