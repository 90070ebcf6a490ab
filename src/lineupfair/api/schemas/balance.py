from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from .competitor import CompetitorPayload
from .lineup import BalanceConfigPayload, FairnessResponse, MatchSlotPayload


class SessionPayload(BaseModel):
    format_name: str | None = None
    players_per_team: int | None = Field(default=None, ge=1, le=2)
    match_count: int = Field(..., ge=1, le=64)
    name: str = ""
    points_per_match: float = Field(default=1.0, ge=0.0)


class BalanceRequest(BaseModel):
    team_a: List[CompetitorPayload]
    team_b: List[CompetitorPayload]
    session: SessionPayload
    config: BalanceConfigPayload | None = None


class UnassignedResponse(BaseModel):
    team_a: List[CompetitorPayload] = Field(default_factory=list)
    team_b: List[CompetitorPayload] = Field(default_factory=list)


class RefinementSummary(BaseModel):
    passes: int
    swaps_applied: int
    stop_reason: Literal["target_reached", "local_optimum", "max_iterations"]
    history: List[int]


class BalanceResponse(BaseModel):
    matches: List[MatchSlotPayload]
    fairness: FairnessResponse
    initial_fairness: FairnessResponse
    unassigned: UnassignedResponse
    refinement: RefinementSummary


class SessionFormatResponse(BaseModel):
    name: str
    label: str
    players_per_team: int
    description: str
