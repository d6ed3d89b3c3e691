"""Monitoring exports."""

from fx_risk_sim.monitoring.monitor import Monitor
from fx_risk_sim.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
