"""Read-only swap recommendations for a lineup being edited by hand."""

from __future__ import annotations

from typing import List, Sequence

from lineupfair.config import BalanceConfig
from lineupfair.engine.metrics import lineup_fairness
from lineupfair.engine.refine import iter_swap_moves, simulate_swap
from lineupfair.models import MatchSlot, SwapSuggestion


MIN_SUGGESTION_IMPROVEMENT = 3
MAX_SUGGESTIONS = 5


def suggest_swaps(matches: Sequence[MatchSlot], config: BalanceConfig) -> List[SwapSuggestion]:
    """Rank same-team swaps by the fairness gain they would bring."""

    current = lineup_fairness(matches, config.weights)
    suggestions: List[SwapSuggestion] = []

    for move in iter_swap_moves(matches):
        improvement = lineup_fairness(simulate_swap(matches, move), config.weights).overall - current.overall
        if improvement < MIN_SUGGESTION_IMPROVEMENT:
            continue
        first = matches[move.first_match]
        second = matches[move.second_match]
        suggestions.append(
            SwapSuggestion(
                from_match=first.match_number,
                to_match=second.match_number,
                player=first.side(move.side)[move.first_slot],
                swap_with=second.side(move.side)[move.second_slot],
                side=move.side,
                improvement=improvement,
                reason=f"Improves handicap balance in Match {first.match_number} and {second.match_number}",
            )
        )

    suggestions.sort(key=lambda suggestion: suggestion.improvement, reverse=True)
    return suggestions[:MAX_SUGGESTIONS]
