"""REST API for the lineup balancing engine."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Iterable, Sequence

from fastapi import FastAPI, HTTPException

from lineupfair import __version__
from lineupfair.api.schemas import (
    BalanceRequest,
    BalanceResponse,
    CompetitorPayload,
    FairnessRequest,
    FairnessResponse,
    MatchBreakdownResponse,
    MatchSlotPayload,
    RefinementSummary,
    SessionFormatResponse,
    SessionPayload,
    SuggestionRequest,
    SwapSuggestionResponse,
    UnassignedResponse,
)
from lineupfair.config import BalanceWeights, SessionConfig, default_balance_config, get_format, iter_formats
from lineupfair.engine import balance_lineup, compute_fairness, match_breakdown, suggest_swaps
from lineupfair.models import Competitor, FairnessScore, MatchSlot


logger = logging.getLogger(__name__)


def _check_unique_ids(competitors: Iterable[CompetitorPayload]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for competitor in competitors:
        if competitor.competitor_id in seen:
            duplicates.append(competitor.competitor_id)
        seen.add(competitor.competitor_id)
    if duplicates:
        raise HTTPException(status_code=400, detail=f"Duplicate competitor ids: {', '.join(sorted(set(duplicates)))}")


def _check_team(competitors: Iterable[CompetitorPayload], team: str, where: str) -> None:
    misplaced = [competitor.competitor_id for competitor in competitors if competitor.team != team]
    if misplaced:
        raise HTTPException(
            status_code=400,
            detail=f"Competitors {', '.join(misplaced)} are not on team {team} but were listed in {where}",
        )


def _lineup_from_payload(slots: Sequence[MatchSlotPayload]) -> list[MatchSlot]:
    for slot in slots:
        _check_team(slot.team_a, "A", f"match {slot.match_number} team_a")
        _check_team(slot.team_b, "B", f"match {slot.match_number} team_b")
    _check_unique_ids(player for slot in slots for player in (*slot.team_a, *slot.team_b))
    return [slot.to_slot() for slot in slots]


def _resolve_session(payload: SessionPayload) -> SessionConfig:
    players_per_team = payload.players_per_team
    format_name = payload.format_name or ""
    if payload.format_name:
        try:
            session_format = get_format(payload.format_name)
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc.args[0])) from exc
        if players_per_team is not None and players_per_team != session_format.players_per_team:
            raise HTTPException(
                status_code=400,
                detail=f"{session_format.label} uses {session_format.players_per_team} player(s) per team, got {players_per_team}",
            )
        players_per_team = session_format.players_per_team
        format_name = session_format.name
    if players_per_team is None:
        raise HTTPException(status_code=400, detail="Either format_name or players_per_team is required")
    return SessionConfig(
        players_per_team=players_per_team,
        match_count=payload.match_count,
        name=payload.name,
        format_name=format_name,
        points_per_match=payload.points_per_match,
    )


def _fairness_response(
    score: FairnessScore,
    matches: Sequence[MatchSlot],
    weights: BalanceWeights,
) -> FairnessResponse:
    return FairnessResponse(
        overall=score.overall,
        handicap_balance=score.handicap_balance,
        experience_balance=score.experience_balance,
        warnings=list(score.warnings),
        matches=[
            MatchBreakdownResponse(**asdict(match_breakdown(match, weights)))
            for match in matches
        ],
    )


def _competitor_payloads(competitors: Iterable[Competitor]) -> list[CompetitorPayload]:
    return [CompetitorPayload.from_competitor(competitor) for competitor in competitors]


def create_app() -> FastAPI:
    app = FastAPI(title="lineupfair", version=__version__)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/formats", response_model=list[SessionFormatResponse])
    async def formats() -> list[SessionFormatResponse]:
        return [SessionFormatResponse(**asdict(session_format)) for session_format in iter_formats()]

    @app.post("/fairness", response_model=FairnessResponse)
    async def fairness(request: FairnessRequest) -> FairnessResponse:
        matches = _lineup_from_payload(request.matches)
        weights = request.weights.to_weights() if request.weights else default_balance_config().weights
        score = compute_fairness(matches, weights)
        return _fairness_response(score, matches, weights)

    @app.post("/balance", response_model=BalanceResponse)
    async def balance(request: BalanceRequest) -> BalanceResponse:
        _check_team(request.team_a, "A", "team_a")
        _check_team(request.team_b, "B", "team_b")
        _check_unique_ids([*request.team_a, *request.team_b])
        session = _resolve_session(request.session)
        config = request.config.to_config() if request.config else default_balance_config()

        result = balance_lineup(
            [player.to_competitor() for player in request.team_a],
            [player.to_competitor() for player in request.team_b],
            session,
            config,
        )
        if result.unassigned:
            logger.info(
                "Balance request left %s team A and %s team B players unassigned",
                len(result.unassigned.team_a),
                len(result.unassigned.team_b),
            )

        return BalanceResponse(
            matches=[MatchSlotPayload.from_slot(slot) for slot in result.matches],
            fairness=_fairness_response(result.fairness, result.matches, config.weights),
            initial_fairness=FairnessResponse(
                overall=result.initial_fairness.overall,
                handicap_balance=result.initial_fairness.handicap_balance,
                experience_balance=result.initial_fairness.experience_balance,
                warnings=list(result.initial_fairness.warnings),
            ),
            unassigned=UnassignedResponse(
                team_a=_competitor_payloads(result.unassigned.team_a),
                team_b=_competitor_payloads(result.unassigned.team_b),
            ),
            refinement=RefinementSummary(
                passes=result.refinement.passes,
                swaps_applied=len(result.refinement.swaps),
                stop_reason=result.refinement.stop_reason,
                history=list(result.refinement.history),
            ),
        )

    @app.post("/suggestions", response_model=list[SwapSuggestionResponse])
    async def suggestions(request: SuggestionRequest) -> list[SwapSuggestionResponse]:
        matches = _lineup_from_payload(request.matches)
        config = request.config.to_config() if request.config else default_balance_config()
        return [
            SwapSuggestionResponse(
                from_match=suggestion.from_match,
                to_match=suggestion.to_match,
                side=suggestion.side,
                player=CompetitorPayload.from_competitor(suggestion.player),
                swap_with=CompetitorPayload.from_competitor(suggestion.swap_with),
                improvement=suggestion.improvement,
                reason=suggestion.reason,
            )
            for suggestion in suggest_swaps(matches, config)
        ]

    return app
