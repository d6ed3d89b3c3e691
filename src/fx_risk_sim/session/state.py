"""Interactive simulation session state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from fx_risk_sim.config.models import PARAMETER_FIELDS, SimulatorConfig
from fx_risk_sim.engine.formatting import PnLSummary, summarize_pnl
from fx_risk_sim.engine.models import OutcomeRow, OutcomeTable, SimulationParameters, TradeRecord, Trajectory
from fx_risk_sim.engine.projector import break_even_win_rate, project_outcomes_for
from fx_risk_sim.engine.trajectory import RandomSource, simulate_trajectory
from fx_risk_sim.monitoring.monitor import Monitor
from fx_risk_sim.session.validation import coerce_inputs, validate_inputs


def _placeholder_trajectory(balance: float) -> Trajectory:
    return Trajectory(records=(TradeRecord(trade_index=0, balance=balance),))


@dataclass(frozen=True)
class SessionResults:
    final_balance: float
    trajectory: Trajectory
    outcomes: OutcomeTable = ()

    @classmethod
    def empty(cls, balance: float = 0.0) -> "SessionResults":
        return cls(final_balance=0.0, trajectory=_placeholder_trajectory(balance))


@dataclass(frozen=True)
class SessionSummary:
    pnl: PnLSummary
    break_even_rate: float


@dataclass
class SimulationSession:
    """Holds the latest inputs and results for one interactive user.

    Inputs arrive as raw values (numbers or text). Each ``update`` validates
    them and, when valid, reruns both the randomized trajectory and the
    deterministic outcome table. ``randomize`` draws a fresh trajectory and
    keeps the table.
    """

    config: SimulatorConfig
    random_source: Optional[RandomSource] = None
    monitor: Optional[Monitor] = None
    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    active: bool = False
    results: SessionResults = field(default_factory=SessionResults.empty)

    def __post_init__(self) -> None:
        if self.random_source is None:
            self.random_source = random.Random().random
        if not self.values:
            self.update(self.config.defaults.as_values())

    @property
    def valid(self) -> bool:
        return not self.errors

    def parameters(self) -> Optional[SimulationParameters]:
        if not self.valid:
            return None
        return SimulationParameters(**coerce_inputs(self.values))

    def update(self, values: Mapping[str, Any]) -> SessionResults:
        self.values = {name: values.get(name) for name in PARAMETER_FIELDS}
        self.errors = validate_inputs(self.values, self.config.limits)

        params = self.parameters()
        if params is not None:
            self.active = True
            trajectory = self._simulate(params)
            self.results = SessionResults(
                final_balance=trajectory.final_balance,
                trajectory=trajectory,
                outcomes=project_outcomes_for(params),
            )
            return self.results

        if self.monitor is not None:
            self.monitor.invalid_inputs(self.errors)
        if self.active:
            self.results = SessionResults.empty(self._raw_start_balance())
        return self.results

    def randomize(self) -> SessionResults:
        params = self.parameters()
        if params is None:
            return self.results
        trajectory = self._simulate(params)
        self.results = replace(self.results, final_balance=trajectory.final_balance, trajectory=trajectory)
        return self.results

    def clear(self) -> SessionResults:
        self.values = {name: "" for name in PARAMETER_FIELDS}
        self.errors = validate_inputs(self.values, self.config.limits)
        self.active = False
        self.results = SessionResults.empty()
        return self.results

    def summary(self) -> Optional[SessionSummary]:
        params = self.parameters()
        if params is None:
            return None
        return SessionSummary(
            pnl=summarize_pnl(params.start_balance, self.results.final_balance),
            break_even_rate=break_even_win_rate(params.reward_risk_ratio),
        )

    def is_current_row(self, row: OutcomeRow) -> bool:
        params = self.parameters()
        return params is not None and row.win_rate == params.win_rate

    def _simulate(self, params: SimulationParameters) -> Trajectory:
        trajectory = simulate_trajectory(params, self.random_source)
        if trajectory.ruined and self.monitor is not None:
            self.monitor.ruin(trajectory.ruined_at, params.trade_count)
        return trajectory

    def _raw_start_balance(self) -> float:
        try:
            return float(self.values.get("start_balance") or 0.0)
        except (TypeError, ValueError):
            return 0.0
