"""Session configuration for the supported match play formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable


@dataclass(frozen=True)
class SessionFormat:
    name: str
    label: str
    players_per_team: int
    description: str


@dataclass(frozen=True)
class SessionConfig:
    players_per_team: int
    match_count: int
    name: str = ""
    format_name: str = ""
    points_per_match: float = 1.0

    @property
    def capacity(self) -> int:
        """Number of players each team can field in this session."""

        return self.match_count * self.players_per_team


_SESSION_FORMATS: Dict[str, SessionFormat] = {
    "singles": SessionFormat(
        name="singles",
        label="Singles",
        players_per_team=1,
        description="One player per side, own ball.",
    ),
    "fourball": SessionFormat(
        name="fourball",
        label="Four-Ball",
        players_per_team=2,
        description="Two players per side, best ball counts.",
    ),
    "foursomes": SessionFormat(
        name="foursomes",
        label="Foursomes",
        players_per_team=2,
        description="Two players per side, alternate shot.",
    ),
}


def iter_formats() -> Iterable[SessionFormat]:
    """Return an iterator of all registered session formats."""

    return _SESSION_FORMATS.values()


def get_format(name: str) -> SessionFormat:
    """Fetch a session format by name, raising KeyError if missing."""

    key = name.strip().lower().replace("-", "").replace(" ", "")
    if key not in _SESSION_FORMATS:
        raise KeyError(f"No session format configured for {name!r}")
    return _SESSION_FORMATS[key]


def session_for_format(
    format_name: str,
    match_count: int,
    *,
    name: str = "",
    points_per_match: float = 1.0,
) -> SessionConfig:
    session_format = get_format(format_name)
    return SessionConfig(
        players_per_team=session_format.players_per_team,
        match_count=match_count,
        name=name or session_format.label,
        format_name=session_format.name,
        points_per_match=points_per_match,
    )
