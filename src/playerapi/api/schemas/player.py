from __future__ import annotations

from pydantic import BaseModel

from playerapi.models import Player


class PlayerPayload(Player):
    """Request body for create and update; same shape as the stored player."""

    def to_player(self) -> Player:
        return Player.model_validate(self.model_dump())


class HealthResponse(BaseModel):
    status: str
