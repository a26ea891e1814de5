"""Pydantic models for API I/O."""

from .player import HealthResponse, PlayerPayload

__all__ = ["HealthResponse", "PlayerPayload"]
