from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from lineupfair.config import BalanceConfig, BalanceWeights
from lineupfair.models import MatchSlot

from .competitor import CompetitorPayload


class WeightsPayload(BaseModel):
    handicap: float = Field(default=0.6, ge=0.0)
    experience: float = Field(default=0.25, ge=0.0)
    win_rate: float = Field(default=0.15, ge=0.0)

    def to_weights(self) -> BalanceWeights:
        return BalanceWeights(handicap=self.handicap, experience=self.experience, win_rate=self.win_rate)


class BalanceConfigPayload(BaseModel):
    weights: WeightsPayload = Field(default_factory=WeightsPayload)
    max_iterations: int = Field(default=100, ge=0, le=10_000)
    target_fairness: float = Field(default=85.0, ge=0.0, le=100.0)

    def to_config(self) -> BalanceConfig:
        return BalanceConfig(
            weights=self.weights.to_weights(),
            max_iterations=self.max_iterations,
            target_fairness=self.target_fairness,
        )


class MatchSlotPayload(BaseModel):
    match_number: int = Field(..., ge=1)
    team_a: List[CompetitorPayload] = Field(default_factory=list)
    team_b: List[CompetitorPayload] = Field(default_factory=list)

    def to_slot(self) -> MatchSlot:
        return MatchSlot(
            match_number=self.match_number,
            team_a=[player.to_competitor() for player in self.team_a],
            team_b=[player.to_competitor() for player in self.team_b],
        )

    @classmethod
    def from_slot(cls, slot: MatchSlot) -> "MatchSlotPayload":
        return cls(
            match_number=slot.match_number,
            team_a=[CompetitorPayload.from_competitor(player) for player in slot.team_a],
            team_b=[CompetitorPayload.from_competitor(player) for player in slot.team_b],
        )


class MatchBreakdownResponse(BaseModel):
    match_number: int
    team_a_handicap: float
    team_b_handicap: float
    handicap_gap: float
    team_a_experience: float
    team_b_experience: float
    experience_gap: float
    team_a_win_rate: float
    team_b_win_rate: float
    fairness: int


class FairnessResponse(BaseModel):
    overall: int
    handicap_balance: int
    experience_balance: int
    warnings: List[str]
    matches: List[MatchBreakdownResponse] = Field(default_factory=list)


class FairnessRequest(BaseModel):
    matches: List[MatchSlotPayload]
    weights: WeightsPayload | None = None


class SuggestionRequest(BaseModel):
    matches: List[MatchSlotPayload]
    config: BalanceConfigPayload | None = None


class SwapSuggestionResponse(BaseModel):
    from_match: int
    to_match: int
    side: Literal["A", "B"]
    player: CompetitorPayload
    swap_with: CompetitorPayload
    improvement: int
    reason: str
