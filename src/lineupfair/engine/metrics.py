"""Fairness metrics for groups of competitors, matches and whole lineups."""

from __future__ import annotations

import math
from typing import List, Sequence

from lineupfair.config import DEFAULT_BALANCE_CONFIG, BalanceWeights
from lineupfair.models import Competitor, FairnessScore, MatchBreakdown, MatchSlot


NEUTRAL_WIN_RATE = 50.0
HANDICAP_PENALTY_PER_STROKE = 5
HANDICAP_WARNING_GAP = 10
EXPERIENCE_WARNING_GAP = 5
NO_PLAYERS_WARNING = "No players assigned yet"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 always going up."""

    return int(math.floor(value + 0.5))


def team_handicap(players: Sequence[Competitor]) -> float:
    """Sum (not average) of handicap indexes; 0 for an empty group."""

    return sum(player.handicap_index for player in players)


def _player_win_rate(player: Competitor) -> float:
    won = player.matches_won or 0
    lost = player.matches_lost or 0
    halved = player.matches_halved or 0
    total = won + lost + halved
    if total == 0:
        return NEUTRAL_WIN_RATE
    return (won + halved * 0.5) / total * 100


def team_win_rate(players: Sequence[Competitor]) -> float:
    """Average win rate of players with history; neutral 50 when nobody has any."""

    rates = [_player_win_rate(player) for player in players if (player.matches_played or 0) > 0]
    if not rates:
        return NEUTRAL_WIN_RATE
    return sum(rates) / len(rates)


def team_experience(players: Sequence[Competitor]) -> float:
    if not players:
        return 0.0
    return sum(player.matches_played or 0 for player in players) / len(players)


def _handicap_gap(team_a: Sequence[Competitor], team_b: Sequence[Competitor]) -> float:
    return abs(team_handicap(team_a) - team_handicap(team_b))


def _experience_gap(team_a: Sequence[Competitor], team_b: Sequence[Competitor]) -> float:
    return abs(team_experience(team_a) - team_experience(team_b))


def match_fairness(
    team_a: Sequence[Competitor],
    team_b: Sequence[Competitor],
    weights: BalanceWeights = DEFAULT_BALANCE_CONFIG.weights,
) -> int:
    """Weighted 0-100 balance score for one match."""

    hcp_score = max(0.0, 100 - _handicap_gap(team_a, team_b) * HANDICAP_PENALTY_PER_STROKE)

    exp_a = team_experience(team_a)
    exp_b = team_experience(team_b)
    max_exp = max(exp_a, exp_b, 1)
    exp_score = max(0.0, 100 - (abs(exp_a - exp_b) / max_exp) * 50)

    wr_score = max(0.0, 100 - abs(team_win_rate(team_a) - team_win_rate(team_b)))

    return round_half_up(
        hcp_score * weights.handicap
        + exp_score * weights.experience
        + wr_score * weights.win_rate
    )


def lineup_fairness(
    matches: Sequence[MatchSlot],
    weights: BalanceWeights = DEFAULT_BALANCE_CONFIG.weights,
) -> FairnessScore:
    """Aggregate fairness over every match with at least one player assigned."""

    populated = [match for match in matches if not match.is_empty()]
    if not populated:
        return FairnessScore(
            overall=0,
            handicap_balance=0,
            experience_balance=0,
            warnings=(NO_PLAYERS_WARNING,),
        )

    fairness_values = [match_fairness(match.team_a, match.team_b, weights) for match in populated]
    hcp_gaps = [_handicap_gap(match.team_a, match.team_b) for match in populated]
    exp_gaps = [_experience_gap(match.team_a, match.team_b) for match in populated]

    count = len(populated)
    avg_fairness = sum(fairness_values) / count
    avg_hcp_gap = sum(hcp_gaps) / count
    avg_exp_gap = sum(exp_gaps) / count

    warnings: List[str] = []
    unbalanced = sum(1 for gap in hcp_gaps if gap > HANDICAP_WARNING_GAP)
    if unbalanced:
        warnings.append(f"{unbalanced} match(es) have handicap difference > {HANDICAP_WARNING_GAP}")
    inexperienced = sum(1 for gap in exp_gaps if gap > EXPERIENCE_WARNING_GAP)
    if inexperienced:
        warnings.append(f"{inexperienced} match(es) have large experience gap")

    return FairnessScore(
        overall=round_half_up(avg_fairness),
        handicap_balance=max(0, round_half_up(100 - avg_hcp_gap * HANDICAP_PENALTY_PER_STROKE)),
        experience_balance=max(0, round_half_up(100 - avg_exp_gap * 10)),
        warnings=tuple(warnings),
    )


def match_breakdown(
    match: MatchSlot,
    weights: BalanceWeights = DEFAULT_BALANCE_CONFIG.weights,
) -> MatchBreakdown:
    hcp_a = team_handicap(match.team_a)
    hcp_b = team_handicap(match.team_b)
    exp_a = team_experience(match.team_a)
    exp_b = team_experience(match.team_b)
    return MatchBreakdown(
        match_number=match.match_number,
        team_a_handicap=hcp_a,
        team_b_handicap=hcp_b,
        handicap_gap=abs(hcp_a - hcp_b),
        team_a_experience=exp_a,
        team_b_experience=exp_b,
        experience_gap=abs(exp_a - exp_b),
        team_a_win_rate=team_win_rate(match.team_a),
        team_b_win_rate=team_win_rate(match.team_b),
        fairness=match_fairness(match.team_a, match.team_b, weights),
    )
