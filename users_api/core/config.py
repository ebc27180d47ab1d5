"""
Configuration helpers for the users API.

Settings are read from environment variables once and cached, so routers and
services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_file: Path
    host: str
    port: int
    log_level: str
    log_file: Optional[Path]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        data_file=Path(os.getenv("USERS_DATA_FILE") or "data.json"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=Path(os.environ["LOG_FILE"]) if os.getenv("LOG_FILE") else None,
    )
