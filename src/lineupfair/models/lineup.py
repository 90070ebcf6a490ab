"""Lineup structures produced and consumed by the balancing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Tuple

from lineupfair.models.competitor import Competitor, Team


StopReason = Literal["target_reached", "local_optimum", "max_iterations"]


@dataclass
class MatchSlot:
    """One head-to-head match; either side may be partially filled."""

    match_number: int
    team_a: List[Competitor] = field(default_factory=list)
    team_b: List[Competitor] = field(default_factory=list)

    def side(self, team: Team) -> List[Competitor]:
        return self.team_a if team == "A" else self.team_b

    def is_empty(self) -> bool:
        return not self.team_a and not self.team_b

    def copy(self) -> "MatchSlot":
        return MatchSlot(self.match_number, list(self.team_a), list(self.team_b))


@dataclass(frozen=True)
class FairnessScore:
    overall: int
    handicap_balance: int
    experience_balance: int
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MatchBreakdown:
    """Per-match aggregates for display next to a match card."""

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


@dataclass(frozen=True)
class SwapMove:
    """Exchange of two same-team players between two matches (0-based indices)."""

    side: Team
    first_match: int
    first_slot: int
    second_match: int
    second_slot: int


@dataclass(frozen=True)
class SwapSuggestion:
    from_match: int
    to_match: int
    player: Competitor
    swap_with: Competitor
    side: Team
    improvement: int
    reason: str


@dataclass(frozen=True)
class UnassignedPlayers:
    """Players left out because a pool was larger than the session capacity."""

    team_a: Tuple[Competitor, ...] = ()
    team_b: Tuple[Competitor, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.team_a or self.team_b)


@dataclass(frozen=True)
class RefinementReport:
    passes: int
    swaps: Tuple[SwapMove, ...]
    stop_reason: StopReason
    history: Tuple[int, ...]


@dataclass(frozen=True)
class BalanceResult:
    matches: List[MatchSlot]
    unassigned: UnassignedPlayers
    initial_fairness: FairnessScore
    fairness: FairnessScore
    refinement: RefinementReport
