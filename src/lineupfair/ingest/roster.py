"""Helpers to load roster CSVs and emit canonical competitors."""

from __future__ import annotations

import csv
import logging
import math
import re
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel

from lineupfair.models import Competitor, Team


logger = logging.getLogger(__name__)

DEFAULT_ROSTER_MAPPING = {
    "competitor_id": "id",
    "name": "name",
    "team": "team",
    "handicap_index": "handicap",
    "matches_played": "played",
    "matches_won": "won",
    "matches_lost": "lost",
    "matches_halved": "halved",
}

_TEAM_ALIASES: dict[str, Team] = {
    "A": "A",
    "TEAMA": "A",
    "1": "A",
    "B": "B",
    "TEAMB": "B",
    "2": "B",
}


class CompetitorRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str
    raw_team: str
    raw_handicap: str
    raw_played: Optional[str] = None
    raw_won: Optional[str] = None
    raw_lost: Optional[str] = None
    raw_halved: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "CompetitorRow":
        def extract(spec: Optional[str | Sequence[str]], *, default: Optional[str] = None) -> Optional[str]:
            if spec is None:
                return default
            if isinstance(spec, str):
                value = row.get(spec)
                return value.strip() if value is not None else default
            parts = [row.get(col, "").strip() for col in spec if row.get(col)]
            return " ".join(parts) if parts else default

        def parse_spec(key: str, default_key: Optional[str] = None) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key)
            if spec is None and default_key:
                spec = default_key
            if spec is None:
                return None
            if isinstance(spec, str) and "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        data = {
            "raw_id": extract(parse_spec("competitor_id")),
            "raw_name": extract(parse_spec("name", "name"), default=""),
            "raw_team": extract(parse_spec("team", "team"), default=""),
            "raw_handicap": extract(parse_spec("handicap_index", "handicap"), default=""),
            "raw_played": extract(parse_spec("matches_played")),
            "raw_won": extract(parse_spec("matches_won")),
            "raw_lost": extract(parse_spec("matches_lost")),
            "raw_halved": extract(parse_spec("matches_halved")),
        }
        return cls(**data)


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[CompetitorRow]:
    mapping = {**DEFAULT_ROSTER_MAPPING, **(mapping or {})}
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [CompetitorRow.from_mapping(row, mapping) for row in reader]
    return rows


def _parse_team(raw_team: str) -> Team:
    token = re.sub(r"[^A-Z0-9]", "", raw_team.upper())
    if token not in _TEAM_ALIASES:
        raise ValueError(f"team '{raw_team}' is not A or B")
    return _TEAM_ALIASES[token]


def _parse_handicap(raw_handicap: str) -> float:
    text = raw_handicap.strip()
    # Plus handicaps ("+2.1") are better than scratch and stored as negatives.
    negate = text.startswith("+")
    try:
        value = float(text.lstrip("+"))
    except ValueError:
        raise ValueError(f"handicap '{raw_handicap}' is not numeric") from None
    if not math.isfinite(value):
        raise ValueError(f"handicap '{raw_handicap}' is not a finite number")
    return -value if negate else value


def _parse_count(raw_count: Optional[str], *, field: str) -> Optional[int]:
    if raw_count is None:
        return None
    text = raw_count.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"{field} '{raw_count}' is not a whole number") from None
    if not number.is_integer():
        raise ValueError(f"{field} '{raw_count}' is not a whole number")
    value = int(number)
    if value < 0:
        raise ValueError(f"{field} '{raw_count}' is negative")
    return value


def rows_to_competitors(rows: Sequence[CompetitorRow]) -> List[Competitor]:
    competitors: List[Competitor] = []
    for row in rows:
        if not (row.raw_id or row.raw_name):
            logger.debug("Skipping roster row without id or name: %s", row)
            continue
        competitors.append(
            Competitor(
                competitor_id=row.raw_id or row.raw_name,
                name=row.raw_name,
                team=_parse_team(row.raw_team),
                handicap_index=_parse_handicap(row.raw_handicap),
                matches_played=_parse_count(row.raw_played, field="matches_played"),
                matches_won=_parse_count(row.raw_won, field="matches_won"),
                matches_lost=_parse_count(row.raw_lost, field="matches_lost"),
                matches_halved=_parse_count(row.raw_halved, field="matches_halved"),
            )
        )
    return competitors


def load_competitors_from_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[Competitor]:
    return rows_to_competitors(load_roster_csv(path, mapping=mapping))


def split_by_team(competitors: Sequence[Competitor]) -> Tuple[List[Competitor], List[Competitor]]:
    team_a = [competitor for competitor in competitors if competitor.team == "A"]
    team_b = [competitor for competitor in competitors if competitor.team == "B"]
    return team_a, team_b
