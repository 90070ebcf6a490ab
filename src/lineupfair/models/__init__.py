"""Data models shared by the engine and its callers."""

from .competitor import Competitor, Team
from .lineup import (
    BalanceResult,
    FairnessScore,
    MatchBreakdown,
    MatchSlot,
    RefinementReport,
    SwapMove,
    SwapSuggestion,
    UnassignedPlayers,
)

__all__ = [
    "BalanceResult",
    "Competitor",
    "FairnessScore",
    "MatchBreakdown",
    "MatchSlot",
    "RefinementReport",
    "SwapMove",
    "SwapSuggestion",
    "Team",
    "UnassignedPlayers",
]
