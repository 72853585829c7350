"""Entry Submission — admin clear, validation, greentext, persistence.

Invariants:
    - options == "clear" (strip + lower) deletes every entry and skips content checks,
      after check_admin_token has passed
    - Otherwise content must be non-blank after strip(), else ContentRequiredError
    - Stored content is the trimmed text; name/sub get their defaults when blank
    - Transformer failures never surface; persistence failures raise DatabaseError

Design Decisions:
    - Returns a tagged result (EntryCreated | EntriesCleared) so the route shapes
      the response without re-deriving which path ran
    - Admin token compared with secrets.compare_digest
"""

import logging
import secrets
from dataclasses import dataclass

from diary.core.domain_types import (
    AdminCommand, display_name, display_subject, parse_admin_command,
)
from diary.core.errors import AdminAuthorizationError, ContentRequiredError
from diary.core.repository_protocols import EntryLike, EntryRepository
from diary.services.greentext_transformer import GreentextTransformer

logger = logging.getLogger(__name__)

CLEARED_MESSAGE = "All entries deleted. Database cleared."


@dataclass(frozen=True)
class EntryCreated:
    entry: EntryLike


@dataclass(frozen=True)
class EntriesCleared:
    changes: int
    message: str = CLEARED_MESSAGE


def check_admin_token(configured: str | None, presented: str | None) -> None:
    """Raise AdminAuthorizationError unless the presented token matches.

    With no token configured the check passes (open admin, as in a fresh install).
    """
    if not configured:
        logger.warning("Admin operation allowed without token: ADMIN_TOKEN is not set")
        return
    if not presented or not secrets.compare_digest(
        configured.encode(), presented.encode(),
    ):
        raise AdminAuthorizationError()


async def clear_entries(repository: EntryRepository) -> EntriesCleared:
    """Delete every entry."""
    changes = await repository.delete_all()
    logger.warning(
        "Database cleared by admin command", extra={"changes": changes},
    )
    return EntriesCleared(changes=changes)


async def submit_entry(
    repository: EntryRepository,
    transformer: GreentextTransformer,
    *,
    content: str | None,
    options: str | None = None,
    name: str | None = None,
    sub: str | None = None,
    admin_token: str | None = None,
    presented_token: str | None = None,
) -> EntryCreated | EntriesCleared:
    """Run one POST /api/entries submission."""
    if parse_admin_command(options) is AdminCommand.CLEAR:
        logger.info("Clear command triggered")
        check_admin_token(admin_token, presented_token)
        return await clear_entries(repository)

    content = (content or "").strip()
    if not content:
        raise ContentRequiredError()

    greentext = await transformer.transform(content)
    entry = await repository.insert(
        content=content,
        greentext=greentext,
        name=display_name(name),
        sub=display_subject(sub),
    )
    return EntryCreated(entry=entry)
