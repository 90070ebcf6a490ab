from lineupfair.config import SessionConfig
from lineupfair.engine.seeding import empty_matches, greedy_fill, seed_lineup, serpentine_seed, sort_pool
from lineupfair.models import Competitor


def _player(cid: str, team: str, hcp: float) -> Competitor:
    return Competitor(competitor_id=cid, team=team, handicap_index=hcp)


def _ids(players) -> list[str]:
    return [player.competitor_id for player in players]


def test_sort_pool_strongest_first_and_stable():
    pool = [_player("x", "A", 12), _player("y", "A", 3), _player("z", "A", 12)]
    assert _ids(sort_pool(pool)) == ["y", "x", "z"]
    assert _ids(pool) == ["x", "y", "z"]


def test_worked_example_seed():
    team_a = [_player("A1", "A", 20), _player("A2", "A", 10)]
    team_b = [_player("B1", "B", 8), _player("B2", "B", 18)]

    matches, unassigned = seed_lineup(team_a, team_b, SessionConfig(players_per_team=1, match_count=2))

    assert [match.match_number for match in matches] == [1, 2]
    assert _ids(matches[0].team_a) == ["A2"]
    assert _ids(matches[1].team_a) == ["A1"]
    assert _ids(matches[0].team_b) == ["B1"]
    assert _ids(matches[1].team_b) == ["B2"]
    assert not unassigned


def test_serpentine_spreads_strength_across_matches():
    players = [_player(f"a{hcp}", "A", hcp) for hcp in range(1, 9)]
    matches = empty_matches(4)

    leftover = serpentine_seed(matches, players, players_per_team=2)

    assert leftover == []
    assert [_ids(match.team_a) for match in matches] == [
        ["a1", "a8"],
        ["a2", "a7"],
        ["a3", "a6"],
        ["a4", "a5"],
    ]


def test_serpentine_single_match_fills_in_order():
    players = [_player("a1", "A", 1), _player("a2", "A", 2)]
    matches = empty_matches(1)

    assert serpentine_seed(matches, players, players_per_team=2) == []
    assert _ids(matches[0].team_a) == ["a1", "a2"]


def test_greedy_fill_targets_remaining_handicap():
    matches = empty_matches(1)
    matches[0].team_a.extend([_player("a1", "A", 4), _player("a2", "A", 6)])
    pool = [_player(f"b{hcp}", "B", hcp) for hcp in (1, 3, 6, 9)]

    leftover = greedy_fill(matches, pool, players_per_team=2)

    assert _ids(matches[0].team_b) == ["b6", "b3"]
    assert _ids(leftover) == ["b1", "b9"]


def test_greedy_fill_first_match_gets_first_pick():
    matches = empty_matches(2)
    matches[0].team_a.append(_player("a1", "A", 10))
    matches[1].team_a.append(_player("a2", "A", 10.5))
    pool = [_player("b1", "B", 10.4), _player("b2", "B", 30)]

    greedy_fill(matches, pool, players_per_team=1)

    assert _ids(matches[0].team_b) == ["b1"]
    assert _ids(matches[1].team_b) == ["b2"]


def test_greedy_fill_ties_go_to_the_stronger_player():
    matches = empty_matches(1)
    matches[0].team_a.append(_player("a1", "A", 10))

    greedy_fill(matches, [_player("b8", "B", 8), _player("b12", "B", 12)], players_per_team=1)

    assert _ids(matches[0].team_b) == ["b8"]


def test_surplus_players_are_reported_unassigned():
    team_a = [_player("a1", "A", 1), _player("a2", "A", 2), _player("a3", "A", 3)]
    team_b = [_player("b1", "B", 1), _player("b2", "B", 2), _player("b3", "B", 30)]

    matches, unassigned = seed_lineup(team_a, team_b, SessionConfig(players_per_team=1, match_count=2))

    assert all(len(match.team_a) == 1 and len(match.team_b) == 1 for match in matches)
    assert _ids(unassigned.team_a) == ["a3"]
    assert _ids(unassigned.team_b) == ["b3"]


def test_short_pools_leave_slots_open():
    matches, unassigned = seed_lineup(
        [_player("a1", "A", 5)],
        [],
        SessionConfig(players_per_team=2, match_count=2),
    )

    assert _ids(matches[0].team_a) == ["a1"]
    assert matches[1].team_a == []
    assert all(match.team_b == [] for match in matches)
    assert not unassigned


def test_zero_capacity_configs_degrade_without_error():
    team_a = [_player("a1", "A", 1)]
    team_b = [_player("b1", "B", 1)]

    matches, unassigned = seed_lineup(team_a, team_b, SessionConfig(players_per_team=0, match_count=2))
    assert [match.is_empty() for match in matches] == [True, True]
    assert _ids(unassigned.team_a) == ["a1"]
    assert _ids(unassigned.team_b) == ["b1"]

    matches, unassigned = seed_lineup(team_a, team_b, SessionConfig(players_per_team=1, match_count=0))
    assert matches == []
    assert _ids(unassigned.team_a) == ["a1"]
    assert _ids(unassigned.team_b) == ["b1"]
