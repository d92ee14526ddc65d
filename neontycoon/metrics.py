from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neontycoon.engine import GameEngine


@dataclass
class EconomySnapshot:
    time: float
    money: float
    income_per_sec: float
    neural_data: int
    total_earnings: float


@dataclass
class PurchaseEvent:
    time: float
    building_id: int
    cost_paid: float
    money_after: float


@dataclass
class SkillEvent:
    time: float
    skill_id: str
    cost_paid: int


@dataclass
class PrestigeEvent:
    time: float
    reward_amount: int
    money_spent: float
    run_duration: float


class MetricsCollector:
    """Collects simulation metrics at configurable intervals."""

    def __init__(self, snapshot_interval: float = 1.0) -> None:
        self.snapshot_interval = snapshot_interval
        self._last_snapshot_time: float = -1.0

        self.snapshots: list[EconomySnapshot] = []
        self.purchases: list[PurchaseEvent] = []
        self.skills: list[SkillEvent] = []
        self.prestiges: list[PrestigeEvent] = []

    def record_tick(self, engine: GameEngine, time: float) -> None:
        """Record a snapshot if enough time has passed."""
        if time - self._last_snapshot_time >= self.snapshot_interval:
            self.snapshots.append(
                EconomySnapshot(
                    time=time,
                    money=engine.get_money(),
                    income_per_sec=engine.get_income_per_sec(),
                    neural_data=engine.get_neural_data(),
                    total_earnings=engine.state.total_earnings,
                )
            )
            self._last_snapshot_time = time

    def record_purchase(
        self, engine: GameEngine, time: float, building_id: int, cost_paid: float
    ) -> None:
        self.purchases.append(
            PurchaseEvent(
                time=time,
                building_id=building_id,
                cost_paid=cost_paid,
                money_after=engine.get_money(),
            )
        )

    def record_skill(self, time: float, skill_id: str, cost_paid: int) -> None:
        self.skills.append(SkillEvent(time=time, skill_id=skill_id, cost_paid=cost_paid))

    def record_prestige(
        self, time: float, reward_amount: int, money_spent: float, run_duration: float
    ) -> None:
        self.prestiges.append(
            PrestigeEvent(
                time=time,
                reward_amount=reward_amount,
                money_spent=money_spent,
                run_duration=run_duration,
            )
        )
