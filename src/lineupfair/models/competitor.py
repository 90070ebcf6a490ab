"""Canonical competitor model shared across ingestion, engine and API layers."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Team = Literal["A", "B"]


class Competitor(BaseModel):
    """A player entered for one of the two teams."""

    competitor_id: str = Field(..., min_length=1)
    name: str = ""
    team: Team
    handicap_index: float = Field(..., allow_inf_nan=False)
    matches_played: Optional[int] = Field(default=None, ge=0)
    matches_won: Optional[int] = Field(default=None, ge=0)
    matches_lost: Optional[int] = Field(default=None, ge=0)
    matches_halved: Optional[int] = Field(default=None, ge=0)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        return self.name or self.competitor_id
