"""Field-level validation of raw simulator inputs."""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from fx_risk_sim.config.models import PARAMETER_FIELDS, FieldLimit, FieldLimits
from fx_risk_sim.engine.models import SimulationParameters

REQUIRED = "Required"
NOT_A_NUMBER = "Must be a number"
NOT_AN_INTEGER = "Must be an integer"


class InvalidInputs(ValueError):
    def __init__(self, errors: Mapping[str, str]) -> None:
        details = "; ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid inputs: {details}")
        self.errors = dict(errors)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _format_bound(value: float) -> str:
    return f"{value:g}"


def _validate_field(name: str, value: Any, limit: FieldLimit) -> Optional[str]:
    if _is_blank(value):
        return REQUIRED
    number = _to_number(value)
    type_error = NOT_AN_INTEGER if name == "trade_count" else NOT_A_NUMBER
    if number is None or not math.isfinite(number):
        return type_error
    if number < limit.min:
        return f"{limit.label} must be greater than or equal to {_format_bound(limit.min)}"
    if number > limit.max:
        return f"{limit.label} must be less than or equal to {_format_bound(limit.max)}"
    if name == "trade_count" and not number.is_integer():
        return NOT_AN_INTEGER
    return None


def validate_inputs(values: Mapping[str, Any], limits: Optional[FieldLimits] = None) -> dict[str, str]:
    """Return a mapping of field name to error message; empty when valid."""
    limits = limits or FieldLimits()
    errors: dict[str, str] = {}
    for name, limit in limits.items():
        message = _validate_field(name, values.get(name), limit)
        if message is not None:
            errors[name] = message
    return errors


def coerce_inputs(values: Mapping[str, Any]) -> dict[str, float | int]:
    coerced: dict[str, float | int] = {name: float(values[name]) for name in PARAMETER_FIELDS}
    coerced["trade_count"] = int(coerced["trade_count"])
    return coerced


def build_parameters(values: Mapping[str, Any], limits: Optional[FieldLimits] = None) -> SimulationParameters:
    errors = validate_inputs(values, limits)
    if errors:
        raise InvalidInputs(errors)
    return SimulationParameters(**coerce_inputs(values))
