"""Request Dependencies — per-request collaborators for route handlers.

Invariants:
    - Each request gets its own SqlEntryRepository bound to its own AsyncSession
    - One GreentextTransformer per app, stored on app.state
    - No API key configured → transformer without generator (fallback only)

Design Decisions:
    - Depends() over module globals: tests swap collaborators with
      app.dependency_overrides
    - Transformer built lazily on first use when lifespan did not run
      (ASGI test transports skip lifespan)
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from diary.config import Settings, get_settings
from diary.infrastructure.anthropic_client import AnthropicTextGenerator
from diary.infrastructure.database import get_db
from diary.infrastructure.entry_repository import SqlEntryRepository
from diary.services.greentext_transformer import GreentextTransformer


def build_transformer(settings: Settings) -> GreentextTransformer:
    """Wire the transformer from settings."""
    generator = None
    if settings.anthropic_api_key:
        generator = AnthropicTextGenerator(
            api_key=settings.anthropic_api_key,
            model=settings.greentext_model,
            temperature=settings.greentext_temperature,
            max_tokens=settings.greentext_max_tokens,
            timeout_seconds=settings.anthropic_timeout_seconds,
        )
    return GreentextTransformer(generator)


async def get_entry_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlEntryRepository:
    return SqlEntryRepository(db)


def get_transformer(request: Request) -> GreentextTransformer:
    transformer = getattr(request.app.state, "transformer", None)
    if transformer is None:
        transformer = build_transformer(get_settings())
        request.app.state.transformer = transformer
    return transformer
