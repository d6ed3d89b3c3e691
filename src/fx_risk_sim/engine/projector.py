"""Deterministic expected-value outcomes across a win-rate sweep."""

from __future__ import annotations

import math

from fx_risk_sim.engine.models import (
    WIN_RATE_SWEEP,
    OutcomeRow,
    OutcomeTable,
    PreconditionViolation,
    SimulationParameters,
    check_reward_risk_ratio,
    check_risk_per_trade,
    check_start_balance,
    check_trade_count,
)
from fx_risk_sim.engine.trajectory import loss_multiplier, win_multiplier


def break_even_win_rate(reward_risk_ratio: float) -> float:
    """Win rate (percent) at which the expected per-trade multiplier is 1."""
    if isinstance(reward_risk_ratio, bool) or not isinstance(reward_risk_ratio, (int, float)):
        raise PreconditionViolation("reward_risk_ratio", reward_risk_ratio, "must be a real number")
    if not math.isfinite(reward_risk_ratio):
        raise PreconditionViolation("reward_risk_ratio", reward_risk_ratio, "must be finite")
    if reward_risk_ratio <= 0:
        return 100.0
    return 100 / (reward_risk_ratio + 1)


def _compound(start_balance: float, multiplier: float, trade_count: int) -> float:
    try:
        return start_balance * multiplier**trade_count
    except OverflowError:
        return math.inf


def project_outcomes(
    start_balance: float,
    risk_per_trade: float,
    reward_risk_ratio: float,
    trade_count: int,
) -> OutcomeTable:
    """Balance expected after ``trade_count`` trades for each sweep win rate.

    The expected per-trade multiplier is raised to the number of trades.
    Trades are independent, so this is the expectation of the compounded
    product, not of any single path.
    """
    start_balance = check_start_balance(start_balance)
    risk_per_trade = check_risk_per_trade(risk_per_trade)
    reward_risk_ratio = check_reward_risk_ratio(reward_risk_ratio)
    trade_count = check_trade_count(trade_count)

    on_win = win_multiplier(risk_per_trade, reward_risk_ratio)
    on_loss = loss_multiplier(risk_per_trade)
    break_even = break_even_win_rate(reward_risk_ratio)

    rows = []
    for win_rate in WIN_RATE_SWEEP:
        probability = win_rate / 100
        average = probability * on_win + (1 - probability) * on_loss
        rows.append(
            OutcomeRow(
                win_rate=win_rate,
                expected_final_balance=_compound(start_balance, average, trade_count),
                is_above_break_even=win_rate >= break_even,
            )
        )
    return tuple(rows)


def project_outcomes_for(params: SimulationParameters) -> OutcomeTable:
    return project_outcomes(
        params.start_balance,
        params.risk_per_trade,
        params.reward_risk_ratio,
        params.trade_count,
    )
