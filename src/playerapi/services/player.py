"""Read-through, write-invalidate access to players."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from playerapi.cache import PLAYERS_CACHE_KEY, Cache, CacheExpiration
from playerapi.models import Player


logger = logging.getLogger(__name__)


class PlayerRepository(Protocol):
    async def find_all(self) -> List[Player]: ...

    async def find_by_id(self, player_id: int) -> Optional[Player]: ...

    async def find_by_squad_number(self, squad_number: int) -> Optional[Player]: ...

    async def add(self, player: Player) -> None: ...

    async def update(self, player: Player) -> None: ...

    async def remove(self, player_id: int) -> None: ...


class PlayerService:
    """Serve the full player list from cache and drop it on every successful write.

    Only :meth:`retrieve_all` reads or fills the cache. Single-record lookups
    always go to the store. Store errors propagate untouched, and the cache is
    invalidated only after the store call returned.

    A ``retrieve_all`` miss racing a concurrent mutation may repopulate the
    cache with the pre-mutation list; the last writer wins until the next
    invalidation or expiry.
    """

    def __init__(
        self,
        store: PlayerRepository,
        cache: Cache,
        *,
        expiration: CacheExpiration | None = None,
    ):
        self._store = store
        self._cache = cache
        self._expiration = expiration or CacheExpiration()

    async def create(self, player: Player) -> None:
        await self._store.add(player)
        logger.info("Created player %s (%s)", player.id, player.full_name)
        self._invalidate()

    async def retrieve_all(self) -> List[Player]:
        found, cached = self._cache.try_get(PLAYERS_CACHE_KEY)
        if found:
            logger.info("Players served from cache")
            return [player.model_copy() for player in cached]

        players = await self._store.find_all()
        logger.info("Players cache miss; loaded %d from store", len(players))
        self._cache.set(
            PLAYERS_CACHE_KEY,
            [player.model_copy() for player in players],
            self._expiration,
        )
        return players

    async def retrieve_by_id(self, player_id: int) -> Optional[Player]:
        return await self._store.find_by_id(player_id)

    async def retrieve_by_squad_number(self, squad_number: int) -> Optional[Player]:
        return await self._store.find_by_squad_number(squad_number)

    async def update(self, player: Player) -> None:
        await self._store.update(player)
        logger.info("Updated player %s", player.id)
        self._invalidate()

    async def delete(self, player_id: int) -> None:
        await self._store.remove(player_id)
        logger.info("Deleted player %s", player_id)
        self._invalidate()

    def _invalidate(self) -> None:
        self._cache.remove(PLAYERS_CACHE_KEY)
