from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from lineupfair.models import Competitor


class CompetitorPayload(BaseModel):
    competitor_id: str = Field(..., min_length=1)
    name: str = ""
    team: Literal["A", "B"]
    handicap_index: float = Field(..., allow_inf_nan=False)
    matches_played: int | None = Field(default=None, ge=0)
    matches_won: int | None = Field(default=None, ge=0)
    matches_lost: int | None = Field(default=None, ge=0)
    matches_halved: int | None = Field(default=None, ge=0)

    def to_competitor(self) -> Competitor:
        return Competitor(**self.model_dump())

    @classmethod
    def from_competitor(cls, competitor: Competitor) -> "CompetitorPayload":
        return cls.model_validate(competitor.model_dump(exclude={"metadata"}))
