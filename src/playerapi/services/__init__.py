"""Service layer orchestrating the player store and cache."""

from .player import PlayerService

__all__ = ["PlayerService"]
