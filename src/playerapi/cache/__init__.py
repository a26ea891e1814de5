"""Key/value cache contract plus in-memory and no-op backends."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

PLAYERS_CACHE_KEY = "players"


@dataclass(frozen=True)
class CacheExpiration:
    """Expiration policy for a single entry.

    ``sliding`` resets on every hit; ``absolute`` is measured from the time the
    entry was stored. ``None`` disables the respective limit.
    """

    sliding: Optional[timedelta] = timedelta(minutes=10)
    absolute: Optional[timedelta] = timedelta(hours=1)

    @classmethod
    def never(cls) -> "CacheExpiration":
        return cls(sliding=None, absolute=None)


class Cache(Protocol):
    """Three-operation cache capability the service depends on."""

    def try_get(self, key: str) -> Tuple[bool, Any]:
        ...

    def set(self, key: str, value: Any, expiration: CacheExpiration) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


@dataclass
class _Entry:
    value: Any
    expiration: CacheExpiration
    created_at: float
    last_access: float = field(default=0.0)

    def expired(self, now: float) -> bool:
        absolute = self.expiration.absolute
        if absolute is not None and now - self.created_at >= absolute.total_seconds():
            return True
        sliding = self.expiration.sliding
        if sliding is not None and now - self.last_access >= sliding.total_seconds():
            return True
        return False


class MemoryCache:
    """Process-local cache; get/set/remove are atomic per call."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def try_get(self, key: str) -> Tuple[bool, Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False, None
            now = self._clock()
            if entry.expired(now):
                del self._entries[key]
                return False, None
            entry.last_access = now
            return True, entry.value

    def set(self, key: str, value: Any, expiration: CacheExpiration) -> None:
        now = self._clock()
        with self._lock:
            self._entries[key] = _Entry(value=value, expiration=expiration, created_at=now, last_access=now)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __contains__(self, key: str) -> bool:
        found, _ = self.try_get(key)
        return found

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class NullCache:
    """Cache that never stores anything; every lookup is a miss."""

    def try_get(self, key: str) -> Tuple[bool, Any]:
        return False, None

    def set(self, key: str, value: Any, expiration: CacheExpiration) -> None:
        return None

    def remove(self, key: str) -> None:
        return None


__all__ = [
    "PLAYERS_CACHE_KEY",
    "Cache",
    "CacheExpiration",
    "MemoryCache",
    "NullCache",
]
