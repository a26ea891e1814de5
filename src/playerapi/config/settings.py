"""Environment-driven settings for the API and CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from playerapi.cache import CacheExpiration


logger = logging.getLogger(__name__)

_DB_PATH_ENV = "PLAYERAPI_DB_PATH"
_CACHE_SLIDING_ENV = "PLAYERAPI_CACHE_SLIDING_SECONDS"
_CACHE_ABSOLUTE_ENV = "PLAYERAPI_CACHE_ABSOLUTE_SECONDS"
_CACHE_ENABLED_ENV = "PLAYERAPI_CACHE_ENABLED"
_SEED_ENV = "PLAYERAPI_SEED"

_DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "players.sqlite3"
_CACHE_SLIDING_DEFAULT = 600
_CACHE_ABSOLUTE_DEFAULT = 3600

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    logger.warning("Invalid boolean for %s: %s; using default %s", name, raw, default)
    return default


@dataclass(frozen=True)
class Settings:
    db_path: Path | str = _DEFAULT_DB_PATH
    cache_enabled: bool = True
    cache_sliding_seconds: int = _CACHE_SLIDING_DEFAULT
    cache_absolute_seconds: int = _CACHE_ABSOLUTE_DEFAULT
    seed: bool = True

    @property
    def cache_expiration(self) -> CacheExpiration:
        # Zero disables the corresponding limit.
        return CacheExpiration(
            sliding=timedelta(seconds=self.cache_sliding_seconds) if self.cache_sliding_seconds else None,
            absolute=timedelta(seconds=self.cache_absolute_seconds) if self.cache_absolute_seconds else None,
        )


def resolve_db_path(raw: str) -> Path | str:
    """Keep SQLite ``file:`` URIs as strings; anything else is a filesystem path."""
    return raw if raw.startswith("file:") else Path(raw)


def load_settings() -> Settings:
    raw_path = os.getenv(_DB_PATH_ENV)
    return Settings(
        db_path=resolve_db_path(raw_path) if raw_path else _DEFAULT_DB_PATH,
        cache_enabled=_env_bool(_CACHE_ENABLED_ENV, True),
        cache_sliding_seconds=_env_int(_CACHE_SLIDING_ENV, _CACHE_SLIDING_DEFAULT, min_value=0),
        cache_absolute_seconds=_env_int(_CACHE_ABSOLUTE_ENV, _CACHE_ABSOLUTE_DEFAULT, min_value=0),
        seed=_env_bool(_SEED_ENV, True),
    )
