"""Interactive session state and input validation."""

from fx_risk_sim.session.state import SessionResults, SessionSummary, SimulationSession
from fx_risk_sim.session.validation import InvalidInputs, build_parameters, coerce_inputs, validate_inputs

__all__ = [
    "InvalidInputs",
    "SessionResults",
    "SessionSummary",
    "SimulationSession",
    "build_parameters",
    "coerce_inputs",
    "validate_inputs",
]
