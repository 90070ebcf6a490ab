"""Entry points for evaluating, balancing and advising on lineups."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from lineupfair.config import BalanceConfig, BalanceWeights, SessionConfig, default_balance_config
from lineupfair.engine import advisor
from lineupfair.engine.metrics import lineup_fairness
from lineupfair.engine.refine import refine_lineup
from lineupfair.engine.seeding import seed_lineup
from lineupfair.models import BalanceResult, Competitor, FairnessScore, MatchSlot, SwapSuggestion


logger = logging.getLogger(__name__)


def _copy_lineup(matches: Sequence[MatchSlot]) -> List[MatchSlot]:
    return [match.copy() for match in matches]


def compute_fairness(
    matches: Sequence[MatchSlot],
    weights: Optional[BalanceWeights] = None,
) -> FairnessScore:
    """Score a lineup as it currently stands."""

    if weights is None:
        weights = default_balance_config().weights
    return lineup_fairness(matches, weights)


def balance_lineup(
    team_a: Sequence[Competitor],
    team_b: Sequence[Competitor],
    session: SessionConfig,
    config: Optional[BalanceConfig] = None,
) -> BalanceResult:
    """Seed a lineup from both pools and refine it with same-team swaps."""

    config = config or default_balance_config()
    run_start = time.perf_counter()

    seeded, unassigned = seed_lineup(team_a, team_b, session)
    initial = lineup_fairness(seeded, config.weights)

    working = _copy_lineup(seeded)
    report = refine_lineup(working, config)
    final = lineup_fairness(working, config.weights)

    logger.info(
        "Balanced %s v %s players into %s matches: fairness %s -> %s (%s swaps, %s) in %.3fs",
        len(team_a),
        len(team_b),
        len(working),
        initial.overall,
        final.overall,
        len(report.swaps),
        report.stop_reason,
        time.perf_counter() - run_start,
    )

    return BalanceResult(
        matches=working,
        unassigned=unassigned,
        initial_fairness=initial,
        fairness=final,
        refinement=report,
    )


def auto_balance(
    team_a: Sequence[Competitor],
    team_b: Sequence[Competitor],
    session: SessionConfig,
    config: Optional[BalanceConfig] = None,
) -> List[MatchSlot]:
    return balance_lineup(team_a, team_b, session, config).matches


def suggest_swaps(
    matches: Sequence[MatchSlot],
    config: Optional[BalanceConfig] = None,
) -> List[SwapSuggestion]:
    return advisor.suggest_swaps(matches, config or default_balance_config())
