"""Config loading."""

from fx_risk_sim.config.loader import compute_config_hash, default_config, load_config, serialize_config
from fx_risk_sim.config.models import (
    PARAMETER_FIELDS,
    DefaultInputs,
    FieldLimit,
    FieldLimits,
    ReportConfig,
    SimulatorConfig,
)

__all__ = [
    "DefaultInputs",
    "FieldLimit",
    "FieldLimits",
    "PARAMETER_FIELDS",
    "ReportConfig",
    "SimulatorConfig",
    "compute_config_hash",
    "default_config",
    "load_config",
    "serialize_config",
]
