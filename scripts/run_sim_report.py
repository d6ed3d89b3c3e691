from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from fx_risk_sim.config import PARAMETER_FIELDS, compute_config_hash, default_config, load_config
from fx_risk_sim.engine import project_outcomes_for, simulate_trajectory
from fx_risk_sim.monitoring import LogNotifier, Monitor
from fx_risk_sim.reporting import build_report, write_report
from fx_risk_sim.session import InvalidInputs, build_parameters


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", help="YAML config; built-in limits and defaults when omitted")
    parser.add_argument("--output", required=True)
    parser.add_argument("--seed", type=int, default=None)
    for name in PARAMETER_FIELDS:
        parser.add_argument(f"--{name.replace('_', '-')}", dest=name, default=None)
    args = parser.parse_args()

    monitor = Monitor(LogNotifier())
    if args.config:
        config_path = Path(args.config)
        config = load_config(config_path)
        config_hash = compute_config_hash(config_path)
    else:
        config_path = None
        config = default_config()
        config_hash = None

    values = config.defaults.as_values()
    for name in PARAMETER_FIELDS:
        override = getattr(args, name)
        if override is not None:
            values[name] = override

    try:
        params = build_parameters(values, config.limits)
    except InvalidInputs as exc:
        monitor.invalid_inputs(exc.errors)
        for name, message in exc.errors.items():
            print(f"{name}: {message}", file=sys.stderr)
        sys.exit(2)

    seed = args.seed if args.seed is not None else config.report.seed
    rng = random.Random(seed)
    trajectory = simulate_trajectory(params, rng.random)
    if trajectory.ruined:
        monitor.ruin(trajectory.ruined_at, params.trade_count)
    outcomes = project_outcomes_for(params)

    report = build_report(
        params,
        trajectory,
        outcomes,
        config_path=config_path,
        config_hash=config_hash,
        seed=seed,
    )
    output_path = write_report(report, args.output)
    monitor.report_written(output_path)


if __name__ == "__main__":
    main()
