"""Lineup fairness optimization for two-team match play sessions."""

__version__ = "0.1.0"
