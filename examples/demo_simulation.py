import random

from fx_risk_sim.engine import (
    SimulationParameters,
    break_even_win_rate,
    format_currency,
    format_percent,
    project_outcomes_for,
    simulate_trajectory,
    summarize_pnl,
)


params = SimulationParameters(
    start_balance=100,
    risk_per_trade=10,
    reward_risk_ratio=4,
    trade_count=100,
    win_rate=50,
)

rng = random.Random(7)
trajectory = simulate_trajectory(params, rng.random)
pnl = summarize_pnl(params.start_balance, trajectory.final_balance)

print("Final balance:", format_currency(trajectory.final_balance))
print("P&L:", format_currency(pnl.absolute_change), f"({pnl.percentage_change:.2f}%)")
print("Ruined at:", trajectory.ruined_at)
print("Break-even win rate:", format_percent(break_even_win_rate(params.reward_risk_ratio)))

for row in project_outcomes_for(params):
    marker = "+" if row.is_above_break_even else "-"
    print(f"{marker} {row.win_rate:>2}%  {format_currency(row.expected_final_balance)}")
