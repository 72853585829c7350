"""Entries — REST read/write endpoints for journal entries.

Invariants:
    - GET /api/entries lists newest first, no pagination
    - GET /api/entries/{id} returns {"entry": null} for unknown ids (not 404)
    - POST /api/entries returns the created entry, or the clear message for the
      admin command; blank content → 400 CONTENT_REQUIRED
    - DELETE /api/entries/{id} returns {"message", "changes"}; unknown id → changes 0
    - DELETE /api/entries is the admin clear operation (X-Admin-Token header)

Design Decisions:
    - POST answers 200 for both outcomes: one endpoint, two payload shapes
    - Repository and transformer injected per request (no shared DB handle)
"""

import logging

from fastapi import APIRouter, Depends, Header

from diary.api.dependencies import get_entry_repository, get_transformer
from diary.config import Settings, get_settings
from diary.core.domain_types import EntryId
from diary.core.repository_protocols import EntryRepository
from diary.schemas.entry import (
    ClearResponse, DeleteResponse, EntryCreate, EntryDetailResponse,
    EntryListResponse, EntryRow,
)
from diary.services.greentext_transformer import GreentextTransformer
from diary.services.submit_entry import (
    EntriesCleared, check_admin_token, clear_entries, submit_entry,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("", response_model=EntryListResponse)
async def list_entries(
    repository: EntryRepository = Depends(get_entry_repository),
):
    """All entries, newest first."""
    entries = await repository.list_newest_first()
    return EntryListResponse(
        entries=[EntryRow.model_validate(e) for e in entries],
    )


@router.get("/{entry_id}", response_model=EntryDetailResponse)
async def get_entry(
    entry_id: int,
    repository: EntryRepository = Depends(get_entry_repository),
):
    entry = await repository.get(EntryId(entry_id))
    return EntryDetailResponse(
        entry=EntryRow.model_validate(entry) if entry else None,
    )


@router.post("", response_model=EntryRow | ClearResponse)
async def create_entry(
    body: EntryCreate,
    repository: EntryRepository = Depends(get_entry_repository),
    transformer: GreentextTransformer = Depends(get_transformer),
    settings: Settings = Depends(get_settings),
    x_admin_token: str | None = Header(None),
):
    """Submit a journal entry (or run the admin clear command)."""
    logger.info("Entry submitted")
    result = await submit_entry(
        repository,
        transformer,
        content=body.content,
        options=body.options,
        name=body.name,
        sub=body.sub,
        admin_token=settings.admin_token,
        presented_token=x_admin_token,
    )
    if isinstance(result, EntriesCleared):
        return ClearResponse(message=result.message, changes=result.changes)
    return EntryRow.model_validate(result.entry)


@router.delete("", response_model=ClearResponse)
async def clear_all_entries(
    repository: EntryRepository = Depends(get_entry_repository),
    settings: Settings = Depends(get_settings),
    x_admin_token: str | None = Header(None),
):
    """Admin: delete every entry."""
    check_admin_token(settings.admin_token, x_admin_token)
    result = await clear_entries(repository)
    return ClearResponse(message=result.message, changes=result.changes)


@router.delete("/{entry_id}", response_model=DeleteResponse)
async def delete_entry(
    entry_id: int,
    repository: EntryRepository = Depends(get_entry_repository),
):
    changes = await repository.delete(EntryId(entry_id))
    return DeleteResponse(message="Entry deleted", changes=changes)
