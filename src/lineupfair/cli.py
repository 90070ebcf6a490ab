"""Command-line interface for balancing a session lineup from a roster CSV."""

from __future__ import annotations

import argparse
import csv
import logging
from collections import Counter
from pathlib import Path
from typing import Sequence

from lineupfair.config import (
    BalanceConfig,
    BalanceWeights,
    SessionConfig,
    default_balance_config,
    get_format,
    iter_formats,
)
from lineupfair.config_loader import BalanceProfile
from lineupfair.engine import balance_lineup, match_breakdown, suggest_swaps
from lineupfair.engine.advisor import MIN_SUGGESTION_IMPROVEMENT
from lineupfair.ingest import load_competitors_from_csv, split_by_team
from lineupfair.models import Competitor, MatchSlot


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a balanced two-team match play lineup")
    parser.add_argument("roster", type=Path, help="Path to roster CSV (id, name, team, handicap, ...)")
    parser.add_argument(
        "--format",
        dest="format_name",
        default="singles",
        choices=[session_format.name for session_format in iter_formats()],
        help="Session format",
    )
    parser.add_argument("--matches", type=int, required=True, help="Number of matches in the session")
    parser.add_argument(
        "--players-per-team",
        type=int,
        default=None,
        help="Players per side; must match the format (defaults to the format's value)",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., handicap_index=HCP, name=First|Last)",
    )
    parser.add_argument("--weight-handicap", type=float, default=None, help="Weight of handicap balance")
    parser.add_argument("--weight-experience", type=float, default=None, help="Weight of experience balance")
    parser.add_argument("--weight-win-rate", type=float, default=None, help="Weight of win-rate balance")
    parser.add_argument("--max-iterations", type=int, default=None, help="Maximum refinement passes")
    parser.add_argument("--target", type=float, default=None, help="Fairness (0-100) at which refinement stops")
    parser.add_argument("--load-profile", type=Path, help="Load balance settings JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save balance settings JSON", default=None)
    parser.add_argument("--output", type=Path, default=Path("lineup.csv"), help="Output CSV path")
    parser.add_argument("--suggest", action="store_true", help="Print remaining swap suggestions")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _resolve_config(args: argparse.Namespace) -> BalanceConfig:
    base = default_balance_config()
    if args.load_profile:
        base = BalanceProfile.load(args.load_profile, defaults=base).to_config()

    weights = BalanceWeights(
        handicap=base.weights.handicap if args.weight_handicap is None else max(0.0, args.weight_handicap),
        experience=base.weights.experience if args.weight_experience is None else max(0.0, args.weight_experience),
        win_rate=base.weights.win_rate if args.weight_win_rate is None else max(0.0, args.weight_win_rate),
    )
    return BalanceConfig(
        weights=weights,
        max_iterations=base.max_iterations if args.max_iterations is None else max(0, args.max_iterations),
        target_fairness=base.target_fairness if args.target is None else max(0.0, min(100.0, args.target)),
    )


def _resolve_session(args: argparse.Namespace) -> SessionConfig:
    session_format = get_format(args.format_name)
    players_per_team = args.players_per_team
    if players_per_team is None:
        players_per_team = session_format.players_per_team
    elif players_per_team != session_format.players_per_team:
        raise SystemExit(
            f"{session_format.label} uses {session_format.players_per_team} player(s) per team, "
            f"got --players-per-team {players_per_team}"
        )
    if args.matches < 1:
        raise SystemExit(f"--matches must be at least 1, got {args.matches}")
    return SessionConfig(
        players_per_team=players_per_team,
        match_count=args.matches,
        name=session_format.label,
        format_name=session_format.name,
    )


def _names(players: Sequence[Competitor]) -> str:
    return ", ".join(player.display_name for player in players) or "-"


def _write_lineup(path: Path, matches: Sequence[MatchSlot], config: BalanceConfig) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([
            "match_number",
            "team_a_ids",
            "team_a_names",
            "team_a_handicap",
            "team_b_ids",
            "team_b_names",
            "team_b_handicap",
            "fairness",
        ])
        for match in matches:
            breakdown = match_breakdown(match, config.weights)
            writer.writerow([
                match.match_number,
                " ".join(player.competitor_id for player in match.team_a),
                " | ".join(player.display_name for player in match.team_a),
                f"{breakdown.team_a_handicap:.1f}",
                " ".join(player.competitor_id for player in match.team_b),
                " | ".join(player.display_name for player in match.team_b),
                f"{breakdown.team_b_handicap:.1f}",
                breakdown.fairness,
            ])


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        mapping = _parse_mapping(args.column)
        competitors = load_competitors_from_csv(args.roster, mapping=mapping or None)
    except ValueError as exc:
        raise SystemExit(f"Could not read roster {args.roster}: {exc}") from exc

    id_counts = Counter(competitor.competitor_id for competitor in competitors)
    duplicate_ids = sorted(competitor_id for competitor_id, count in id_counts.items() if count > 1)
    if duplicate_ids:
        raise SystemExit(f"Duplicate competitor ids in roster: {', '.join(duplicate_ids)}")

    session = _resolve_session(args)
    config = _resolve_config(args)
    if args.save_profile:
        BalanceProfile.from_config(config).save(args.save_profile)
        print(f"Saved balance profile to {args.save_profile}")

    team_a, team_b = split_by_team(competitors)
    print(f"Loaded {len(team_a)} team A and {len(team_b)} team B players ({session.capacity} slots per team)")

    result = balance_lineup(team_a, team_b, session, config)
    for match in result.matches:
        print(f"Match {match.match_number}: {_names(match.team_a)} vs {_names(match.team_b)}")

    fairness = result.fairness
    print(
        "Fairness: overall={} handicap={} experience={} (seed {}, {} swaps, {})".format(
            fairness.overall,
            fairness.handicap_balance,
            fairness.experience_balance,
            result.initial_fairness.overall,
            len(result.refinement.swaps),
            result.refinement.stop_reason,
        )
    )
    for warning in fairness.warnings:
        print(f"Warning: {warning}")
    if result.unassigned.team_a:
        print(f"Unassigned team A players: {_names(result.unassigned.team_a)}")
    if result.unassigned.team_b:
        print(f"Unassigned team B players: {_names(result.unassigned.team_b)}")

    if args.suggest:
        suggestions = suggest_swaps(result.matches, config)
        if not suggestions:
            print(f"No swap would improve fairness by {MIN_SUGGESTION_IMPROVEMENT} or more points")
        for suggestion in suggestions:
            print(
                f"Suggest: swap {suggestion.player.display_name} (match {suggestion.from_match}) "
                f"with {suggestion.swap_with.display_name} (match {suggestion.to_match}): "
                f"+{suggestion.improvement}"
            )

    _write_lineup(args.output, result.matches, config)
    print(f"Wrote lineup to {args.output}")


if __name__ == "__main__":
    main()
