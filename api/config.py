"""Settings read from the environment (and a local .env file, if present)."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = "http://localhost:5173"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    log_level: str = "INFO"
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10


def load_settings() -> Settings:
    """Build Settings from DATABASE_URL, CORS_ORIGINS, LOG_LEVEL and DB_POOL_* variables."""
    load_dotenv()
    return Settings(
        database_url=os.environ.get("DATABASE_URL") or None,
        cors_origins=_split_origins(os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        db_pool_min_size=int(os.environ.get("DB_POOL_MIN_SIZE", "2")),
        db_pool_max_size=int(os.environ.get("DB_POOL_MAX_SIZE", "10")),
    )
