from __future__ import annotations

import math
import os
from pathlib import Path

import pandas as pd
import streamlit as st

from fx_risk_sim.config import FieldLimit, SimulatorConfig, default_config, load_config
from fx_risk_sim.engine import format_currency, format_percent, format_pnl_percent, format_signed_currency
from fx_risk_sim.monitoring import LogNotifier, Monitor
from fx_risk_sim.session import SimulationSession


def _load_simulator_config(path: Path) -> SimulatorConfig:
    if not path.exists():
        return default_config()
    return load_config(path)


def _get_session(config: SimulatorConfig) -> SimulationSession:
    if "session" not in st.session_state:
        st.session_state.session = SimulationSession(config, monitor=Monitor(LogNotifier()))
    return st.session_state.session


def _slider_value(current: object, limit: FieldLimit) -> float:
    try:
        value = float(current)
    except (TypeError, ValueError):
        return float(limit.min)
    if math.isnan(value):
        return float(limit.min)
    return min(max(value, limit.min), limit.max)


def _read_inputs(session: SimulationSession, mode: str) -> dict:
    values = {}
    for name, limit in session.config.limits.items():
        current = session.values.get(name)
        is_integer = name == "trade_count"
        label = f"{limit.label} ({limit.unit})" if limit.unit else limit.label
        if mode == "Sliders":
            fallback = _slider_value(current, limit)
            if is_integer:
                values[name] = st.sidebar.slider(
                    label,
                    min_value=int(limit.min),
                    max_value=int(limit.max),
                    value=int(fallback),
                    step=int(limit.step),
                    key=f"slider_{name}",
                )
            else:
                values[name] = st.sidebar.slider(
                    label,
                    min_value=float(limit.min),
                    max_value=float(limit.max),
                    value=fallback,
                    step=float(limit.step),
                    key=f"slider_{name}",
                )
        else:
            text = st.sidebar.text_input(
                f"{label} [{limit.min:g} - {limit.max:g}]",
                value="" if current is None else str(current),
                key=f"number_{name}",
            )
            values[name] = text
            error = session.errors.get(name)
            if error:
                st.sidebar.caption(f":red[{error}]")
    return values


def _trajectory_frame(session: SimulationSession) -> pd.DataFrame:
    trajectory = session.results.trajectory
    start_balance = trajectory.start_balance
    return pd.DataFrame(
        {
            "Account Balance": trajectory.balances(),
            "Starting Balance": [start_balance] * len(trajectory),
        },
        index=pd.Index([record.trade_index for record in trajectory], name="Trade Number"),
    )


def _outcome_frame(session: SimulationSession) -> pd.DataFrame:
    rows = []
    for row in session.results.outcomes:
        win_rate = f"{row.win_rate}%"
        if session.is_current_row(row):
            win_rate += " (Current)"
        rows.append(
            {
                "Win Rate": win_rate,
                "Final Balance (Expected)": f"${format_currency(row.expected_final_balance)}",
                "Above Break-Even": row.is_above_break_even,
            }
        )
    return pd.DataFrame(rows)


def main() -> None:
    st.set_page_config(page_title="Forex Risk Simulator", layout="wide")
    st.title("Forex Risk Simulator")

    config_path = Path(os.getenv("FXSIM_CONFIG_PATH", "configs/default.yaml"))
    session = _get_session(_load_simulator_config(config_path))

    st.sidebar.header("Simulation Settings")
    mode = st.sidebar.radio("Input mode", ["Sliders", "Number Inputs"], horizontal=True)
    values = _read_inputs(session, mode)
    if values != session.values:
        session.update(values)

    col_randomize, col_clear = st.sidebar.columns(2)
    if col_randomize.button("Randomize Sequence", disabled=not session.valid):
        session.randomize()
    if col_clear.button("Clear"):
        session.clear()
        for key in [key for key in st.session_state if key.startswith(("slider_", "number_"))]:
            del st.session_state[key]
        st.rerun()

    summary = session.summary()
    if summary is None or not session.active:
        st.warning("Please ensure all inputs are valid and filled to run the simulation.")
        return

    col_a, col_b, col_c = st.columns(3)
    col_a.metric("Final Account Balance", f"${format_currency(session.results.final_balance)}")
    col_b.metric(
        "P&L (Profit/Loss)",
        format_signed_currency(summary.pnl.absolute_change),
        format_pnl_percent(summary.pnl),
    )
    col_c.metric("Break-Even Win Rate", format_percent(summary.break_even_rate))

    params = session.parameters()
    st.subheader(f"Balance Progression ({params.trade_count} Trades)")
    st.line_chart(_trajectory_frame(session))
    if session.results.trajectory.ruined:
        st.error(f"Account ruined at trade {session.results.trajectory.ruined_at}")

    st.subheader("Deterministic Outcome Analysis")
    st.dataframe(_outcome_frame(session), hide_index=True, width="stretch")


if __name__ == "__main__":
    main()
