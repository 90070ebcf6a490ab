"""Lineup balancing engine: metrics, seeding, refinement and swap advice."""

from .metrics import (
    lineup_fairness,
    match_breakdown,
    match_fairness,
    team_experience,
    team_handicap,
    team_win_rate,
)
from .service import auto_balance, balance_lineup, compute_fairness, suggest_swaps

__all__ = [
    "auto_balance",
    "balance_lineup",
    "compute_fairness",
    "lineup_fairness",
    "match_breakdown",
    "match_fairness",
    "suggest_swaps",
    "team_experience",
    "team_handicap",
    "team_win_rate",
]
