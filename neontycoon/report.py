from __future__ import annotations

from dataclasses import dataclass, field

from neontycoon.metrics import (
    EconomySnapshot,
    MetricsCollector,
    PrestigeEvent,
    PurchaseEvent,
    SkillEvent,
)


@dataclass
class SimulationReport:
    """Container for simulation results and derived metrics."""

    strategy_description: str = ""
    terminal_description: str = ""
    outcome: str = ""
    total_time: float = 0.0

    # Raw metrics
    snapshots: list[EconomySnapshot] = field(default_factory=list)
    purchases: list[PurchaseEvent] = field(default_factory=list)
    skills: list[SkillEvent] = field(default_factory=list)
    prestiges: list[PrestigeEvent] = field(default_factory=list)

    # Final state
    final_money: float = 0.0
    final_income_per_sec: float = 0.0
    final_neural_data: int = 0
    final_building_counts: list[int] = field(default_factory=list)
    total_clicks: int = 0

    # Derived metrics
    purchase_gaps: list[float] = field(default_factory=list)
    max_purchase_gap: float = 0.0
    mean_purchase_gap: float = 0.0
    purchases_per_minute: float = 0.0

    def money_series(self) -> list[tuple[float, float]]:
        """Return (time, money) series."""
        return [(s.time, s.money) for s in self.snapshots]

    def income_series(self) -> list[tuple[float, float]]:
        """Return (time, income_per_sec) series."""
        return [(s.time, s.income_per_sec) for s in self.snapshots]


def build_report(
    collector: MetricsCollector,
    strategy_description: str,
    terminal_description: str,
    outcome: str,
    total_time: float,
    final_money: float = 0.0,
    final_income_per_sec: float = 0.0,
    final_neural_data: int = 0,
    final_building_counts: list[int] | None = None,
    total_clicks: int = 0,
) -> SimulationReport:
    """Build a SimulationReport from collected metrics."""
    # Purchase gaps
    purchase_gaps: list[float] = []
    purchase_times = sorted(p.time for p in collector.purchases)
    if purchase_times:
        purchase_gaps.append(purchase_times[0])  # gap from t=0 to first purchase
        for i in range(1, len(purchase_times)):
            purchase_gaps.append(purchase_times[i] - purchase_times[i - 1])

    max_gap = max(purchase_gaps) if purchase_gaps else 0.0
    mean_gap = (sum(purchase_gaps) / len(purchase_gaps)) if purchase_gaps else 0.0

    ppm = (len(collector.purchases) / total_time * 60.0) if total_time > 0 else 0.0

    return SimulationReport(
        strategy_description=strategy_description,
        terminal_description=terminal_description,
        outcome=outcome,
        total_time=total_time,
        snapshots=collector.snapshots,
        purchases=collector.purchases,
        skills=collector.skills,
        prestiges=collector.prestiges,
        final_money=final_money,
        final_income_per_sec=final_income_per_sec,
        final_neural_data=final_neural_data,
        final_building_counts=list(final_building_counts or []),
        total_clicks=total_clicks,
        purchase_gaps=purchase_gaps,
        max_purchase_gap=max_gap,
        mean_purchase_gap=mean_gap,
        purchases_per_minute=ppm,
    )
