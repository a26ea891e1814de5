"""Error kinds raised by the persistence layer and surfaced by the API."""

from __future__ import annotations


class PlayerApiError(Exception):
    """Base class for playerapi failures."""


class NotFoundError(PlayerApiError, LookupError):
    """Raised when no player matches the requested id."""

    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} not found")
        self.player_id = player_id


class ConflictError(PlayerApiError):
    """Raised when inserting a player whose id is already taken."""

    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} already exists")
        self.player_id = player_id
