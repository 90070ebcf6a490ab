"""Persist and load balance profiles for the CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from lineupfair.config import BalanceConfig, BalanceWeights


@dataclass
class BalanceProfile:
    weight_handicap: float
    weight_experience: float
    weight_win_rate: float
    max_iterations: int
    target_fairness: float

    @classmethod
    def from_config(cls, config: BalanceConfig) -> "BalanceProfile":
        return cls(
            weight_handicap=config.weights.handicap,
            weight_experience=config.weights.experience,
            weight_win_rate=config.weights.win_rate,
            max_iterations=config.max_iterations,
            target_fairness=config.target_fairness,
        )

    def to_config(self) -> BalanceConfig:
        return BalanceConfig(
            weights=BalanceWeights(
                handicap=self.weight_handicap,
                experience=self.weight_experience,
                win_rate=self.weight_win_rate,
            ),
            max_iterations=self.max_iterations,
            target_fairness=self.target_fairness,
        )

    @classmethod
    def load(cls, path: Path, *, defaults: BalanceConfig | None = None) -> "BalanceProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        base = cls.from_config(defaults or BalanceConfig())
        weights = data.get("weights", {})
        return cls(
            weight_handicap=float(weights.get("handicap", base.weight_handicap)),
            weight_experience=float(weights.get("experience", base.weight_experience)),
            weight_win_rate=float(weights.get("win_rate", base.weight_win_rate)),
            max_iterations=int(data.get("max_iterations", base.max_iterations)),
            target_fairness=float(data.get("target_fairness", base.target_fairness)),
        )

    def save(self, path: Path) -> None:
        payload = {
            "weights": {
                "handicap": self.weight_handicap,
                "experience": self.weight_experience,
                "win_rate": self.weight_win_rate,
            },
            "max_iterations": self.max_iterations,
            "target_fairness": self.target_fairness,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
