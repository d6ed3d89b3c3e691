"""Randomized balance trajectory for a fixed-fractional account."""

from __future__ import annotations

import math
from typing import Callable

from fx_risk_sim.engine.models import (
    RUIN_THRESHOLD,
    PreconditionViolation,
    SimulationParameters,
    TradeRecord,
    Trajectory,
)

RandomSource = Callable[[], float]


def win_multiplier(risk_per_trade: float, reward_risk_ratio: float) -> float:
    return 1 + (risk_per_trade / 100) * reward_risk_ratio


def loss_multiplier(risk_per_trade: float) -> float:
    return 1 - risk_per_trade / 100


def _draw(random_source: RandomSource) -> float:
    value = random_source()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PreconditionViolation("random_source", value, "must return a real number")
    if not math.isfinite(value) or not 0 <= value < 1:
        raise PreconditionViolation("random_source", value, "must return a value in [0, 1)")
    return float(value)


def simulate_trajectory(params: SimulationParameters, random_source: RandomSource) -> Trajectory:
    """Run one sequence of ``trade_count`` Bernoulli trades.

    Each trade risks ``risk_per_trade`` percent of the current balance. A win
    grows the balance by ``risk * reward_risk_ratio``, a loss shrinks it by
    ``risk``. Once the balance falls to ``RUIN_THRESHOLD`` or below it is set
    to zero and the remaining trades are recorded as losses without drawing
    from ``random_source``, so the result always has ``trade_count + 1``
    records.
    """
    params.check()

    win_rate = params.win_rate / 100
    on_win = win_multiplier(params.risk_per_trade, params.reward_risk_ratio)
    on_loss = loss_multiplier(params.risk_per_trade)

    balance = params.start_balance
    records = [TradeRecord(trade_index=0, balance=balance)]

    for trade_index in range(1, params.trade_count + 1):
        is_win = _draw(random_source) < win_rate
        balance *= on_win if is_win else on_loss

        if balance <= RUIN_THRESHOLD:
            records.append(TradeRecord(trade_index=trade_index, balance=0.0, outcome=is_win))
            records.extend(
                TradeRecord(trade_index=index, balance=0.0, outcome=False)
                for index in range(trade_index + 1, params.trade_count + 1)
            )
            break

        records.append(TradeRecord(trade_index=trade_index, balance=balance, outcome=is_win))

    return Trajectory(records=tuple(records))
