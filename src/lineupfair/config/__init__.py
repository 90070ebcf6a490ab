"""Configuration helpers for sessions and balancing."""

from .balance import DEFAULT_BALANCE_CONFIG, BalanceConfig, BalanceWeights, default_balance_config
from .session import SessionConfig, SessionFormat, get_format, iter_formats, session_for_format

__all__ = [
    "BalanceConfig",
    "BalanceWeights",
    "DEFAULT_BALANCE_CONFIG",
    "SessionConfig",
    "SessionFormat",
    "default_balance_config",
    "get_format",
    "iter_formats",
    "session_for_format",
]
