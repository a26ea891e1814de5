"""Canonical player model used across persistence, caching and the API."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class Player(BaseModel):
    """A squad member. Identity is ``id``; every other field may change."""

    id: int = Field(..., ge=1)
    first_name: str = Field(..., min_length=1)
    middle_name: Optional[str] = None
    last_name: str = Field(..., min_length=1)
    date_of_birth: Optional[date] = None
    squad_number: int = Field(..., ge=1, le=99)
    position: str = Field(..., min_length=1)
    abbr_position: Optional[str] = None
    team: Optional[str] = None
    league: Optional[str] = None
    starting11: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)
