"""Pydantic models for API I/O."""

from .competitor import CompetitorPayload
from .lineup import (
    BalanceConfigPayload,
    FairnessRequest,
    FairnessResponse,
    MatchBreakdownResponse,
    MatchSlotPayload,
    SuggestionRequest,
    SwapSuggestionResponse,
    WeightsPayload,
)
from .balance import (
    BalanceRequest,
    BalanceResponse,
    RefinementSummary,
    SessionFormatResponse,
    SessionPayload,
    UnassignedResponse,
)

__all__ = [
    "BalanceConfigPayload",
    "BalanceRequest",
    "BalanceResponse",
    "CompetitorPayload",
    "FairnessRequest",
    "FairnessResponse",
    "MatchBreakdownResponse",
    "MatchSlotPayload",
    "RefinementSummary",
    "SessionFormatResponse",
    "SessionPayload",
    "SuggestionRequest",
    "SwapSuggestionResponse",
    "UnassignedResponse",
    "WeightsPayload",
]
