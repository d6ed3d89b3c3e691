"""Load simulator configuration files."""

from __future__ import annotations

import hashlib
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from fx_risk_sim.config.models import (
    PARAMETER_FIELDS,
    DefaultInputs,
    FieldLimit,
    FieldLimits,
    ReportConfig,
    SimulatorConfig,
)


def load_config(path: str | Path) -> SimulatorConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = _require(data, "name")
    version = str(_require(data, "version"))
    limits = _parse_limits(data.get("limits") or {})
    defaults = _parse_defaults(data.get("defaults") or {})
    report = _parse_report(data.get("report") or {})

    return SimulatorConfig(
        name=name,
        version=version,
        limits=limits,
        defaults=defaults,
        report=report,
    )


def default_config() -> SimulatorConfig:
    return SimulatorConfig(name="fx-risk-sim", version="1")


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def serialize_config(config: SimulatorConfig) -> dict[str, Any]:
    return asdict(config)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_limit(name: str, data: dict[str, Any], fallback: FieldLimit) -> FieldLimit:
    limit = FieldLimit(
        min=float(data.get("min", fallback.min)),
        max=float(data.get("max", fallback.max)),
        step=float(data.get("step", fallback.step)),
        label=str(data.get("label", fallback.label)),
        unit=str(data.get("unit", fallback.unit)),
    )
    if limit.min > limit.max:
        raise ValueError(f"Invalid limits for {name}: min {limit.min} > max {limit.max}")
    if limit.step <= 0:
        raise ValueError(f"Invalid step for {name}: {limit.step}")
    _check_engine_domain(name, limit)
    return limit


# (lowest allowed min, whether min may equal it, highest allowed max)
_ENGINE_DOMAIN: dict[str, tuple[float, bool, float]] = {
    "start_balance": (0.0, False, math.inf),
    "risk_per_trade": (0.0, False, 100.0),
    "reward_risk_ratio": (0.0, True, math.inf),
    "trade_count": (1.0, True, math.inf),
    "win_rate": (0.0, True, 100.0),
}


def _check_engine_domain(name: str, limit: FieldLimit) -> None:
    lowest, inclusive, highest = _ENGINE_DOMAIN[name]
    if math.isnan(limit.min) or math.isnan(limit.max):
        raise ValueError(f"Invalid limits for {name}: bounds must be numbers")
    if limit.min < lowest or (limit.min == lowest and not inclusive):
        raise ValueError(f"Invalid limits for {name}: min {limit.min} is outside the simulator domain")
    if limit.max > highest:
        raise ValueError(f"Invalid limits for {name}: max {limit.max} is outside the simulator domain")


def _parse_limits(data: dict[str, Any]) -> FieldLimits:
    unknown = set(data) - set(PARAMETER_FIELDS)
    if unknown:
        raise ValueError(f"Unknown limit fields: {', '.join(sorted(unknown))}")
    base = FieldLimits()
    return FieldLimits(
        **{name: _parse_limit(name, data.get(name) or {}, base.get(name)) for name in PARAMETER_FIELDS}
    )


def _parse_defaults(data: dict[str, Any]) -> DefaultInputs:
    base = DefaultInputs()
    return DefaultInputs(
        start_balance=float(data.get("start_balance", base.start_balance)),
        risk_per_trade=float(data.get("risk_per_trade", base.risk_per_trade)),
        reward_risk_ratio=float(data.get("reward_risk_ratio", base.reward_risk_ratio)),
        trade_count=int(data.get("trade_count", base.trade_count)),
        win_rate=float(data.get("win_rate", base.win_rate)),
    )


def _parse_report(data: dict[str, Any]) -> ReportConfig:
    seed = data.get("seed")
    return ReportConfig(
        seed=None if seed is None else int(seed),
        output_dir=str(data.get("output_dir", "reports")),
    )
