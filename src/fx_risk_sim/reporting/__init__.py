"""Run reports."""

from fx_risk_sim.reporting.report import build_report, write_report

__all__ = ["build_report", "write_report"]
