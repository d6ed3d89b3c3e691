"""JSON report generation for a single simulation run."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from fx_risk_sim.engine.formatting import summarize_pnl
from fx_risk_sim.engine.models import OutcomeTable, SimulationParameters, Trajectory
from fx_risk_sim.engine.projector import break_even_win_rate


def _serialize_trajectory(trajectory: Trajectory) -> list[dict[str, Any]]:
    return [
        {"trade": record.trade_index, "balance": record.balance, "is_win": record.outcome}
        for record in trajectory
    ]


def _serialize_outcomes(outcomes: OutcomeTable) -> list[dict[str, Any]]:
    return [
        {
            "win_rate": row.win_rate,
            "expected_final_balance": row.expected_final_balance,
            "is_above_break_even": row.is_above_break_even,
        }
        for row in outcomes
    ]


def build_report(
    params: SimulationParameters,
    trajectory: Trajectory,
    outcomes: OutcomeTable,
    config_path: Optional[str | Path] = None,
    config_hash: Optional[str] = None,
    seed: Optional[int] = None,
) -> dict[str, Any]:
    pnl = summarize_pnl(params.start_balance, trajectory.final_balance)
    return {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "config_path": None if config_path is None else str(config_path),
        "config_hash": config_hash,
        "seed": seed,
        "parameters": asdict(params),
        "summary": {
            "final_balance": trajectory.final_balance,
            "absolute_change": pnl.absolute_change,
            "percentage_change": pnl.percentage_change,
            "is_positive": pnl.is_positive,
            "break_even_win_rate": break_even_win_rate(params.reward_risk_ratio),
            "ruined_at": trajectory.ruined_at,
            "wins": sum(1 for record in trajectory if record.is_win),
        },
        "trajectory": _serialize_trajectory(trajectory),
        "outcomes": _serialize_outcomes(outcomes),
    }


def write_report(report: dict[str, Any], output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    return output_path
