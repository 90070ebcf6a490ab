"""Balancing weights and refinement limits, with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

_WEIGHT_HANDICAP_ENV = "LINEUPFAIR_WEIGHT_HANDICAP"
_WEIGHT_EXPERIENCE_ENV = "LINEUPFAIR_WEIGHT_EXPERIENCE"
_WEIGHT_WIN_RATE_ENV = "LINEUPFAIR_WEIGHT_WIN_RATE"
_MAX_ITERATIONS_ENV = "LINEUPFAIR_MAX_ITERATIONS"
_TARGET_FAIRNESS_ENV = "LINEUPFAIR_TARGET_FAIRNESS"


@dataclass(frozen=True)
class BalanceWeights:
    """Linear weights for the fairness components; not required to sum to 1."""

    handicap: float = 0.6
    experience: float = 0.25
    win_rate: float = 0.15


@dataclass(frozen=True)
class BalanceConfig:
    weights: BalanceWeights = field(default_factory=BalanceWeights)
    max_iterations: int = 100
    target_fairness: float = 85.0


DEFAULT_BALANCE_CONFIG = BalanceConfig()


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def default_balance_config() -> BalanceConfig:
    """Return the default config with any ``LINEUPFAIR_*`` overrides applied."""

    base = DEFAULT_BALANCE_CONFIG
    weights = BalanceWeights(
        handicap=_env_float(_WEIGHT_HANDICAP_ENV, base.weights.handicap, clamp_min=0.0),
        experience=_env_float(_WEIGHT_EXPERIENCE_ENV, base.weights.experience, clamp_min=0.0),
        win_rate=_env_float(_WEIGHT_WIN_RATE_ENV, base.weights.win_rate, clamp_min=0.0),
    )
    return BalanceConfig(
        weights=weights,
        max_iterations=_env_int(_MAX_ITERATIONS_ENV, base.max_iterations, min_value=0),
        target_fairness=_env_float(_TARGET_FAIRNESS_ENV, base.target_fairness, clamp_min=0.0, clamp_max=100.0),
    )
