"""Input adapters that normalize raw roster data."""

from .roster import (
    CompetitorRow,
    load_competitors_from_csv,
    load_roster_csv,
    rows_to_competitors,
    split_by_team,
)

__all__ = [
    "CompetitorRow",
    "load_competitors_from_csv",
    "load_roster_csv",
    "rows_to_competitors",
    "split_by_team",
]
