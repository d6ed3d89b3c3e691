"""Monitoring and event routing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from fx_risk_sim.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def ruin(self, trade_index: int, trade_count: int) -> None:
        self.notifier.notify("RUIN", f"account ruined at trade {trade_index} of {trade_count}")

    def invalid_inputs(self, errors: Mapping[str, str]) -> None:
        details = ", ".join(f"{name}: {message}" for name, message in sorted(errors.items()))
        self.notifier.notify("INVALID_INPUTS", details)

    def report_written(self, path: str | Path) -> None:
        self.notifier.notify("REPORT", f"wrote {path}")
