"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Persistence and text generation are reached only through these Protocols
    - Implementations provided by shell via dependency injection (FastAPI Depends)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - No update operation on EntryRepository: entries are insert-or-delete only
"""

from datetime import datetime
from typing import Protocol

from diary.core.domain_types import EntryId


class EntryLike(Protocol):
    """Structural contract for stored entries (ORM row or test double)."""
    id: int
    content: str
    greentext: str
    name: str
    sub: str
    created_at: datetime


class EntryRepository(Protocol):
    """Contract for entry persistence — implemented by shell."""
    async def insert(
        self, *, content: str, greentext: str, name: str, sub: str,
    ) -> EntryLike: ...
    async def list_newest_first(self) -> list[EntryLike]: ...
    async def get(self, entry_id: EntryId) -> EntryLike | None: ...
    async def delete(self, entry_id: EntryId) -> int: ...
    async def delete_all(self) -> int: ...


class TextGenerator(Protocol):
    """Contract for the external text-generation service — implemented by shell.

    Raises GeneratorAPIError on any failure; returns the raw reply text otherwise.
    """
    async def generate(self, prompt: str) -> str: ...
