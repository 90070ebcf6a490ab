"""Constructive seeding: serpentine Team A draft, greedy Team B matching."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from lineupfair.config import SessionConfig
from lineupfair.engine.metrics import team_handicap
from lineupfair.models import Competitor, MatchSlot, UnassignedPlayers


logger = logging.getLogger(__name__)


def sort_pool(players: Sequence[Competitor]) -> List[Competitor]:
    """Strongest (lowest handicap) first; ties keep their input order."""

    return sorted(players, key=lambda player: player.handicap_index)


def empty_matches(match_count: int) -> List[MatchSlot]:
    return [MatchSlot(match_number=index + 1) for index in range(max(0, match_count))]


def serpentine_seed(
    matches: List[MatchSlot],
    players: Sequence[Competitor],
    players_per_team: int,
) -> List[Competitor]:
    """Snake-draft ``players`` into the Team A sides; returns those that did not fit."""

    match_count = len(matches)
    capacity = match_count * max(0, players_per_team)
    leftover: List[Competitor] = []
    placed = sum(len(match.team_a) for match in matches)
    direction = 1
    index = 0

    for player in players:
        if placed >= capacity:
            leftover.append(player)
            continue

        while len(matches[index].team_a) >= players_per_team:
            index += direction
            if index >= match_count:
                direction = -1
                index = match_count - 1
            elif index < 0:
                direction = 1
                index = 0

        matches[index].team_a.append(player)
        placed += 1

        index += direction
        if index >= match_count or index < 0:
            direction *= -1
            index = max(0, min(match_count - 1, index + direction))

    return leftover


def greedy_fill(
    matches: List[MatchSlot],
    players: Sequence[Competitor],
    players_per_team: int,
) -> List[Competitor]:
    """Give each match in order the Team B players closest to its Team A total.

    Earlier matches get first pick, so the result depends on match order.
    Returns the players left in the pool.
    """

    remaining = list(players)
    for match in matches:
        team_a_total = team_handicap(match.team_a)
        for slot in range(players_per_team):
            if not remaining:
                break
            current_total = team_handicap(match.team_b)
            target = (team_a_total - current_total) / (players_per_team - slot)

            best_index = 0
            best_diff = float("inf")
            for candidate_index, candidate in enumerate(remaining):
                diff = abs(candidate.handicap_index - target)
                if diff < best_diff:
                    best_diff = diff
                    best_index = candidate_index

            match.team_b.append(remaining.pop(best_index))
    return remaining


def seed_lineup(
    team_a: Sequence[Competitor],
    team_b: Sequence[Competitor],
    session: SessionConfig,
) -> Tuple[List[MatchSlot], UnassignedPlayers]:
    """Build a fresh seeded lineup for ``session`` from the two pools."""

    matches = empty_matches(session.match_count)
    leftover_a = serpentine_seed(matches, sort_pool(team_a), session.players_per_team)
    leftover_b = greedy_fill(matches, sort_pool(team_b), session.players_per_team)

    unassigned = UnassignedPlayers(team_a=tuple(leftover_a), team_b=tuple(leftover_b))
    if unassigned:
        logger.warning(
            "Pools exceed session capacity of %s per team; unassigned A=%s B=%s",
            session.capacity,
            len(leftover_a),
            len(leftover_b),
        )
    return matches, unassigned
