"""Currency formatting and P&L helpers for presentation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from fx_risk_sim.engine.models import PreconditionViolation


@dataclass(frozen=True)
class PnLSummary:
    absolute_change: float
    percentage_change: float
    is_positive: bool


def format_currency(amount: Any) -> str:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or math.isnan(amount):
        return "0.00"
    if math.isinf(amount):
        return "∞" if amount > 0 else "-∞"
    return f"{amount:,.2f}"


def format_signed_currency(amount: float) -> str:
    text = format_currency(abs(amount))
    if amount < 0:
        return f"-${text}"
    return f"${text}"


def format_percent(value: float, digits: int = 1) -> str:
    return f"{value:.{digits}f}%"


def summarize_pnl(start_balance: float, final_balance: float) -> PnLSummary:
    if start_balance <= 0:
        raise PreconditionViolation("start_balance", start_balance, "must be positive")
    change = final_balance - start_balance
    return PnLSummary(
        absolute_change=change,
        percentage_change=change / start_balance * 100,
        is_positive=final_balance >= start_balance,
    )


def format_pnl_percent(summary: PnLSummary) -> str:
    sign = "+" if summary.is_positive else ""
    return f"({sign}{summary.percentage_change:.2f}%)"
