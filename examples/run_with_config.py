from pathlib import Path

from fx_risk_sim.config import compute_config_hash, load_config
from fx_risk_sim.monitoring import LogNotifier, Monitor
from fx_risk_sim.session import SimulationSession


config_path = Path("configs") / "default.yaml"
config = load_config(config_path)
print("Config hash:", compute_config_hash(config_path)[:12])

session = SimulationSession(config, monitor=Monitor(LogNotifier()))
print("Initial final balance:", session.results.final_balance)

session.update({**config.defaults.as_values(), "risk_per_trade": 40, "win_rate": 20})
print("Aggressive final balance:", session.results.final_balance)

session.update({**session.values, "trade_count": 5})
print("Errors:", session.errors)

session.clear()
print("Active after clear:", session.active)
