from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from neontycoon.purchase import BuildingStatus

if TYPE_CHECKING:
    from neontycoon.engine import GameEngine

PRESTIGE_MODES = ("never", "first_opportunity")


@dataclass
class ClickProfile:
    """Configures click behavior for strategies."""

    clicks_per_second: float = 0.0

    def get_clicks(self, duration: float) -> int:
        """Return number of clicks for the given duration."""
        return max(0, int(self.clicks_per_second * duration))


class Strategy(ABC):
    """Base class for simulation strategies."""

    def __init__(
        self,
        click_profile: ClickProfile | None = None,
        prestige_mode: str = "never",
    ) -> None:
        if prestige_mode not in PRESTIGE_MODES:
            raise ValueError(
                f"Unknown prestige mode: {prestige_mode!r}. Expected one of {list(PRESTIGE_MODES)}"
            )
        self.click_profile = click_profile
        self.prestige_mode = prestige_mode

    @abstractmethod
    def decide_purchases(
        self, engine: GameEngine, affordable: list[BuildingStatus]
    ) -> list[int]:
        """Return ordered list of building ids to buy."""
        ...

    def decide_skills(self, engine: GameEngine) -> list[str]:
        """Return skill ids to unlock, in catalog order by default."""
        return [
            s.id
            for s in engine.catalog.get_skills()
            if not engine.has_skill(s.id) and s.cost <= engine.get_neural_data()
        ]

    def get_clicks(self, duration: float) -> int:
        if self.click_profile:
            return self.click_profile.get_clicks(duration)
        return 0

    def should_prestige(self, engine: GameEngine) -> bool:
        """Whether to prestige now."""
        if self.prestige_mode == "first_opportunity":
            return engine.calculate_prestige_potential() > 0
        return False

    @abstractmethod
    def describe(self) -> str: ...

    def _describe_extras(self) -> str:
        parts = []
        if self.click_profile and self.click_profile.clicks_per_second > 0:
            parts.append(f"({self.click_profile.clicks_per_second} CPS)")
        if self.prestige_mode != "never":
            parts.append(f"[prestige: {self.prestige_mode}]")
        return " ".join(parts)


class GreedyCheapest(Strategy):
    """Buy the cheapest affordable building first."""

    def decide_purchases(
        self, engine: GameEngine, affordable: list[BuildingStatus]
    ) -> list[int]:
        return [b.id for b in sorted(affordable, key=lambda b: b.cost)]

    def describe(self) -> str:
        return " ".join(filter(None, ["GreedyCheapest", self._describe_extras()]))


class GreedyROI(Strategy):
    """Buy the building with the best income per unit of cost."""

    def decide_purchases(
        self, engine: GameEngine, affordable: list[BuildingStatus]
    ) -> list[int]:
        def roi(b: BuildingStatus) -> float:
            if b.cost <= 0:
                return float("inf")
            return b.income_each / b.cost

        best_first = sorted(affordable, key=roi, reverse=True)
        return [b.id for b in best_first if b.income_each > 0]

    def describe(self) -> str:
        return " ".join(filter(None, ["GreedyROI", self._describe_extras()]))
