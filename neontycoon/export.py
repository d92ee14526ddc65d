from __future__ import annotations

import csv
import json
from pathlib import Path

from neontycoon.report import SimulationReport


def export_csv(report: SimulationReport, path: str | Path) -> None:
    """Export simulation data as CSV files.

    Creates two files:
      - {path}_economy.csv
      - {path}_purchases.csv
    """
    base = str(path)

    with open(f"{base}_economy.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "money", "income_per_sec", "neural_data", "total_earnings"])
        for s in report.snapshots:
            writer.writerow([s.time, s.money, s.income_per_sec, s.neural_data, s.total_earnings])

    with open(f"{base}_purchases.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "building_id", "cost_paid", "money_after"])
        for p in report.purchases:
            writer.writerow([p.time, p.building_id, p.cost_paid, p.money_after])


def export_json(report: SimulationReport, path: str | Path) -> None:
    """Export full simulation report as JSON."""
    data = {
        "strategy": report.strategy_description,
        "terminal": report.terminal_description,
        "outcome": report.outcome,
        "total_time": report.total_time,
        "final_money": report.final_money,
        "final_income_per_sec": report.final_income_per_sec,
        "final_neural_data": report.final_neural_data,
        "final_building_counts": report.final_building_counts,
        "total_clicks": report.total_clicks,
        "purchase_count": len(report.purchases),
        "purchases_per_minute": report.purchases_per_minute,
        "max_purchase_gap": report.max_purchase_gap,
        "mean_purchase_gap": report.mean_purchase_gap,
        "skills": [
            {"time": s.time, "skill_id": s.skill_id, "cost_paid": s.cost_paid}
            for s in report.skills
        ],
        "prestiges": [
            {
                "time": p.time,
                "reward_amount": p.reward_amount,
                "money_spent": p.money_spent,
                "run_duration": p.run_duration,
            }
            for p in report.prestiges
        ],
        "purchases": [
            {"time": p.time, "building_id": p.building_id, "cost_paid": p.cost_paid}
            for p in report.purchases
        ],
    }
    with open(str(path), "w") as f:
        json.dump(data, f, indent=2)
