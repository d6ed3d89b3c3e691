"""Configuration models for input bounds and defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

PARAMETER_FIELDS = (
    "start_balance",
    "risk_per_trade",
    "reward_risk_ratio",
    "trade_count",
    "win_rate",
)


@dataclass(frozen=True)
class FieldLimit:
    min: float
    max: float
    step: float
    label: str
    unit: str = ""


@dataclass(frozen=True)
class FieldLimits:
    start_balance: FieldLimit = FieldLimit(10, 10000, 100, "Starting Balance", "$")
    risk_per_trade: FieldLimit = FieldLimit(0.5, 45, 0.1, "Risk Per Trade", "%")
    reward_risk_ratio: FieldLimit = FieldLimit(0.5, 20, 0.1, "Reward-to-Risk Ratio")
    trade_count: FieldLimit = FieldLimit(10, 1000, 10, "Number of Trades")
    win_rate: FieldLimit = FieldLimit(1, 99, 0.5, "Win Rate", "%")

    def get(self, name: str) -> FieldLimit:
        if name not in PARAMETER_FIELDS:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> list[tuple[str, FieldLimit]]:
        return [(name, self.get(name)) for name in PARAMETER_FIELDS]


@dataclass(frozen=True)
class DefaultInputs:
    start_balance: float = 100.0
    risk_per_trade: float = 10.0
    reward_risk_ratio: float = 4.0
    trade_count: int = 100
    win_rate: float = 50.0

    def as_values(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in PARAMETER_FIELDS}


@dataclass(frozen=True)
class ReportConfig:
    seed: Optional[int] = None
    output_dir: str = "reports"


@dataclass(frozen=True)
class SimulatorConfig:
    name: str
    version: str
    limits: FieldLimits = field(default_factory=FieldLimits)
    defaults: DefaultInputs = field(default_factory=DefaultInputs)
    report: ReportConfig = field(default_factory=ReportConfig)
