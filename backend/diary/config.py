"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Empty anthropic_api_key disables the generator (fallback greentext only)
    - Empty admin_token leaves admin clear unauthenticated

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with a
      local SQLite file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./diary.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_auto_create: bool = True

    # Anthropic (greentext generator)
    anthropic_api_key: str = ""
    anthropic_timeout_seconds: float = 600.0
    greentext_model: str = "claude-haiku-4-5"
    greentext_temperature: float = 0.9
    greentext_max_tokens: int = 600

    # Admin
    admin_token: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3001

    # Display
    display_timezone: str = "UTC"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
