from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    This uses pydantic-settings so that we get type validation and defaults.
    Matching weights and comparator constants live in
    ``lostfound.matching.config``; only the knobs a deployment tunes are here.
    """

    # App basics
    ENV: Literal["development", "staging", "production"] = "development"
    """Environment mode: affects logging output."""

    DEBUG: bool = True
    """Enable debug mode: verbose logging and per-candidate score logs."""

    APP_NAME: str = "Lost & Found Matcher"
    """Title reported by the HTTP API."""

    # Matching surface defaults
    MATCH_BROWSE_THRESHOLD: float = Field(default=0.4, ge=0.0, le=1.0)
    """Threshold used when a caller browses matches without supplying one.

    Lower than the search default (0.5) so the item page shows more
    potential matches.
    """

    MATCH_MAX_RESULTS: int = Field(default=50, ge=1, le=1000)
    """Upper bound on matches returned by the HTTP and CLI surfaces."""

    # Model config
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing .env repeatedly."""
    return Settings()
