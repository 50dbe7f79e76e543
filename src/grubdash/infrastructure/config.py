"""Application configuration.

All settings come from environment variables (prefixed ``GRUBDASH_``) or a
``.env`` file, via pydantic-settings.

Usage:
    from grubdash.infrastructure.config import get_settings

    settings = get_settings()
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Seed files shipped with the repo, resolved relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GRUBDASH_",
        env_file=".env",
        env_parse_none_str="none",
        extra="ignore",
    )

    APP_NAME: str = "GrubDash API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    HOST: str = "127.0.0.1"
    PORT: int = Field(5000, ge=1, le=65535)

    LOG_LEVEL: str = "INFO"

    # JSON files used to pre-populate the in-memory stores. Set to "none"
    # (or None) to start empty; a path that does not exist is skipped.
    DISHES_SEED_FILE: Path | None = DATA_DIR / "dishes.json"
    ORDERS_SEED_FILE: Path | None = DATA_DIR / "orders.json"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the root logger for the whole process."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.DEBUG else logging.getLevelName(
        settings.LOG_LEVEL.upper()
    )
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
