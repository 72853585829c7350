"""Threads — server-rendered board records for the browser client.

Invariants:
    - Same ordering as GET /api/entries (newest first)
    - Every record comes from core/render_entries.to_thread_view
    - Dates rendered in the configured display_timezone

Design Decisions:
    - Rendering on the server keeps escaping in one tested place
"""

from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from diary.api.dependencies import get_entry_repository
from diary.config import Settings, get_settings
from diary.core.render_entries import to_thread_view
from diary.core.repository_protocols import EntryRepository
from diary.schemas.entry import ThreadListResponse, ThreadRow

router = APIRouter(prefix="/api/threads", tags=["threads"])


@router.get("", response_model=ThreadListResponse)
async def list_threads(
    repository: EntryRepository = Depends(get_entry_repository),
    settings: Settings = Depends(get_settings),
):
    """Board view of all entries."""
    tz = ZoneInfo(settings.display_timezone)
    entries = await repository.list_newest_first()
    return ThreadListResponse(
        threads=[
            ThreadRow.model_validate(to_thread_view(e, tz)) for e in entries
        ],
    )
