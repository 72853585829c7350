"""/diary/ API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DiaryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and greentext transformer initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static UI mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from diary.api.dependencies import build_transformer
from diary.api.error_handlers import register_error_handlers
from diary.api.routes import entries, health, threads
from diary.config import get_settings
from diary.infrastructure.database import init_db
from diary.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_tables()
    app.state.transformer = build_transformer(settings)
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY not set: greentext uses the fallback only")
    logger.info("/diary/ API started")
    yield
    await manager.close()
    logger.info("Database connection closed")


app = FastAPI(title="/diary/ API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(entries.router)
app.include_router(threads.router)

register_error_handlers(app)

# html=True enables SPA fallback (serves index.html for unknown routes)
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run(
        "diary.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
