"""Pure simulation engine."""

from fx_risk_sim.engine.formatting import (
    PnLSummary,
    format_currency,
    format_percent,
    format_pnl_percent,
    format_signed_currency,
    summarize_pnl,
)
from fx_risk_sim.engine.models import (
    RUIN_THRESHOLD,
    WIN_RATE_SWEEP,
    OutcomeRow,
    OutcomeTable,
    PreconditionViolation,
    SimulationParameters,
    TradeRecord,
    Trajectory,
)
from fx_risk_sim.engine.projector import break_even_win_rate, project_outcomes, project_outcomes_for
from fx_risk_sim.engine.trajectory import (
    RandomSource,
    loss_multiplier,
    simulate_trajectory,
    win_multiplier,
)

__all__ = [
    "OutcomeRow",
    "OutcomeTable",
    "PnLSummary",
    "PreconditionViolation",
    "RUIN_THRESHOLD",
    "RandomSource",
    "SimulationParameters",
    "TradeRecord",
    "Trajectory",
    "WIN_RATE_SWEEP",
    "break_even_win_rate",
    "format_currency",
    "format_percent",
    "format_pnl_percent",
    "format_signed_currency",
    "loss_multiplier",
    "project_outcomes",
    "project_outcomes_for",
    "simulate_trajectory",
    "summarize_pnl",
    "win_multiplier",
]
