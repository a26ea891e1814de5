"""Domain models shared by the store, service and API layers."""

from .player import Player

__all__ = ["Player"]
