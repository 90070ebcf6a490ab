"""First-improvement hill climbing over same-team player swaps."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from lineupfair.config import BalanceConfig, BalanceWeights
from lineupfair.engine.metrics import lineup_fairness
from lineupfair.models import FairnessScore, MatchSlot, RefinementReport, SwapMove
from lineupfair.models.lineup import StopReason


logger = logging.getLogger(__name__)


def iter_swap_moves(matches: Sequence[MatchSlot]) -> Iterator[SwapMove]:
    """Yield every same-team swap between two different matches.

    Order: match pairs ``(i, j)`` with ``i < j``; within a pair all Team A
    slot pairs come before all Team B slot pairs.
    """

    for i in range(len(matches)):
        for j in range(i + 1, len(matches)):
            for side in ("A", "B"):
                first_side = matches[i].side(side)
                second_side = matches[j].side(side)
                for first_slot in range(len(first_side)):
                    for second_slot in range(len(second_side)):
                        yield SwapMove(side, i, first_slot, j, second_slot)


def apply_swap(matches: List[MatchSlot], move: SwapMove) -> None:
    first = matches[move.first_match].side(move.side)
    second = matches[move.second_match].side(move.side)
    first[move.first_slot], second[move.second_slot] = second[move.second_slot], first[move.first_slot]


def simulate_swap(matches: Sequence[MatchSlot], move: SwapMove) -> List[MatchSlot]:
    """Return a new lineup with ``move`` applied; ``matches`` is left untouched."""

    simulated = list(matches)
    simulated[move.first_match] = matches[move.first_match].copy()
    simulated[move.second_match] = matches[move.second_match].copy()
    apply_swap(simulated, move)
    return simulated


def _first_improvement(
    matches: Sequence[MatchSlot],
    current: FairnessScore,
    weights: BalanceWeights,
) -> Optional[Tuple[SwapMove, FairnessScore]]:
    for move in iter_swap_moves(matches):
        score = lineup_fairness(simulate_swap(matches, move), weights)
        if score.overall > current.overall:
            return move, score
    return None


def refine_lineup(matches: List[MatchSlot], config: BalanceConfig) -> RefinementReport:
    """Improve ``matches`` in place until the target, a local optimum or the pass limit."""

    current = lineup_fairness(matches, config.weights)
    history = [current.overall]
    swaps: List[SwapMove] = []
    stop_reason: StopReason = "max_iterations"
    passes = 0

    while passes < config.max_iterations:
        passes += 1
        if current.overall >= config.target_fairness:
            stop_reason = "target_reached"
            break

        found = _first_improvement(matches, current, config.weights)
        if found is None:
            stop_reason = "local_optimum"
            break

        move, current = found
        apply_swap(matches, move)
        swaps.append(move)
        history.append(current.overall)
        logger.debug(
            "Swapped team %s players between matches %s and %s; overall now %s",
            move.side,
            matches[move.first_match].match_number,
            matches[move.second_match].match_number,
            current.overall,
        )

    if stop_reason == "max_iterations" and current.overall >= config.target_fairness:
        stop_reason = "target_reached"

    return RefinementReport(
        passes=passes,
        swaps=tuple(swaps),
        stop_reason=stop_reason,
        history=tuple(history),
    )
