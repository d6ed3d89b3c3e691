"""Data models for the simulation engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Optional

RUIN_THRESHOLD = 0.01
WIN_RATE_SWEEP: tuple[int, ...] = (10, 20, 30, 40, 50, 60, 70, 80, 90)


class PreconditionViolation(ValueError):
    """Raised when the engine is called with inputs outside its domain."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(f"{field}={value!r}: {message}")
        self.field = field
        self.value = value


def _require_finite(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PreconditionViolation(field, value, "must be a real number")
    if not math.isfinite(value):
        raise PreconditionViolation(field, value, "must be finite")
    return float(value)


def check_start_balance(value: Any) -> float:
    value = _require_finite("start_balance", value)
    if value <= 0:
        raise PreconditionViolation("start_balance", value, "must be positive")
    return value


def check_risk_per_trade(value: Any) -> float:
    value = _require_finite("risk_per_trade", value)
    if not 0 < value <= 100:
        raise PreconditionViolation("risk_per_trade", value, "must be in (0, 100]")
    return value


def check_reward_risk_ratio(value: Any) -> float:
    value = _require_finite("reward_risk_ratio", value)
    if value < 0:
        raise PreconditionViolation("reward_risk_ratio", value, "must be non-negative")
    return value


def check_trade_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionViolation("trade_count", value, "must be an integer")
    if value <= 0:
        raise PreconditionViolation("trade_count", value, "must be positive")
    return value


def check_win_rate(value: Any) -> float:
    value = _require_finite("win_rate", value)
    if not 0 <= value <= 100:
        raise PreconditionViolation("win_rate", value, "must be in [0, 100]")
    return value


@dataclass(frozen=True)
class SimulationParameters:
    start_balance: float
    risk_per_trade: float  # percent of balance risked per trade
    reward_risk_ratio: float
    trade_count: int
    win_rate: float  # percent, randomized simulation only

    def check(self) -> None:
        check_start_balance(self.start_balance)
        check_risk_per_trade(self.risk_per_trade)
        check_reward_risk_ratio(self.reward_risk_ratio)
        check_trade_count(self.trade_count)
        check_win_rate(self.win_rate)


@dataclass(frozen=True)
class TradeRecord:
    trade_index: int
    balance: float
    outcome: Optional[bool] = None  # None for the initial record

    @property
    def is_win(self) -> bool:
        return self.outcome is True


@dataclass(frozen=True)
class Trajectory:
    records: tuple[TradeRecord, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> TradeRecord:
        return self.records[index]

    @property
    def start_balance(self) -> float:
        return self.records[0].balance

    @property
    def final_balance(self) -> float:
        return self.records[-1].balance

    @property
    def ruined_at(self) -> Optional[int]:
        for record in self.records[1:]:
            if record.balance == 0:
                return record.trade_index
        return None

    @property
    def ruined(self) -> bool:
        return self.ruined_at is not None

    def balances(self) -> list[float]:
        return [record.balance for record in self.records]


@dataclass(frozen=True)
class OutcomeRow:
    win_rate: int
    expected_final_balance: float
    is_above_break_even: bool


OutcomeTable = tuple[OutcomeRow, ...]
