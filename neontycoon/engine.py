from __future__ import annotations

import logging
import math

from neontycoon.catalog import Catalog, default_catalog
from neontycoon.config import EngineConfig
from neontycoon.prestige import PrestigeResult, prestige_potential
from neontycoon.purchase import BuildingStatus, DeclineReason, PurchaseResult
from neontycoon.state import PlayerSnapshot, PlayerState

logger = logging.getLogger(__name__)


class GameEngine:
    """Authoritative economy processor for a single player."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        catalog = catalog if catalog is not None else default_catalog()
        config = config if config is not None else EngineConfig()

        errors = catalog.validate() + config.validate()
        if errors:
            raise ValueError(
                "Invalid catalog or config:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.catalog = catalog
        self.config = config
        self.state = PlayerState(catalog)

    # ── Core loop ────────────────────────────────────────────────────

    def advance(self, delta: float) -> None:
        """Advance the economy by *delta* seconds.

        Raises ValueError for a negative or non-finite delta, and
        OverflowError if the accrual would push money past the float range.
        """
        if not math.isfinite(delta) or delta < 0:
            raise ValueError(f"delta must be finite and non-negative, got {delta}")

        income = self.calculate_income_per_sec()
        if income > 0:
            self._add_money(income * delta)

    def calculate_income_per_sec(self) -> float:
        """Recompute the income rate from buildings, skills and multiplier."""
        base_income = 0.0
        for bdef in self.catalog.get_buildings():
            base_income += bdef.base_income * self.state.building_counts[bdef.id]

        if self.state.has_skill(self.config.auto_click_skill):
            base_income *= 1.0 + self.config.auto_click_bonus

        self.state.income_per_sec = base_income * self.state.income_multiplier
        return self.state.income_per_sec

    # ── Player actions ───────────────────────────────────────────────

    def click(self) -> float:
        """Process one click. Returns the amount added."""
        self.state.total_clicks += 1
        value = self.click_value()
        self._add_money(value)
        return value

    def purchase_building(self, building_id: int) -> PurchaseResult:
        """Attempt to buy one unit of a building, with the decline reason."""
        if self.catalog.get_building(building_id) is None:
            return PurchaseResult(success=False, reason=DeclineReason.UNKNOWN_BUILDING)

        cost = self.get_building_cost(building_id)
        if self.state.money < cost:
            return PurchaseResult(
                success=False, cost=cost, reason=DeclineReason.INSUFFICIENT_FUNDS
            )

        self.state.money -= cost
        self.state.building_counts[building_id] += 1
        logger.debug(
            "bought building %d for %.0f (now %d)",
            building_id,
            cost,
            self.state.building_counts[building_id],
        )
        return PurchaseResult(success=True, cost=cost)

    def buy_building(self, building_id: int) -> bool:
        """Attempt to buy one unit of a building. Returns True on success."""
        return self.purchase_building(building_id).success

    def purchase_skill(self, skill_id: str) -> PurchaseResult:
        """Attempt to unlock a skill, with the decline reason."""
        if self.state.has_skill(skill_id):
            return PurchaseResult(success=False, reason=DeclineReason.ALREADY_OWNED)

        skill = self.catalog.find_skill(skill_id)
        if skill is None:
            return PurchaseResult(success=False, reason=DeclineReason.UNKNOWN_SKILL)

        if self.state.neural_data < skill.cost:
            return PurchaseResult(
                success=False,
                cost=skill.cost,
                reason=DeclineReason.INSUFFICIENT_NEURAL_DATA,
            )

        self.state.neural_data -= skill.cost
        self.state.owned_skills.add(skill_id)
        logger.debug("unlocked skill %r for %d neural data", skill_id, skill.cost)
        return PurchaseResult(success=True, cost=skill.cost)

    def buy_skill(self, skill_id: str) -> bool:
        """Attempt to unlock a skill. Returns True on success."""
        return self.purchase_skill(skill_id).success

    def do_prestige(self) -> PrestigeResult:
        """Trade all money for Neural Data and reset buildings."""
        potential = self.calculate_prestige_potential()
        if potential <= 0:
            return PrestigeResult(
                success=False,
                reason=f"Money {self.state.money:.0f} below prestige threshold "
                f"{self.config.prestige_threshold:.0f}",
            )

        money_spent = self.state.money
        self.state.neural_data += potential

        # Reset economy; skills and neural data are kept
        self.state.money = 0.0
        self.state.building_counts = [0] * len(self.state.building_counts)
        self.state.income_multiplier = 1.0

        logger.debug("prestige: %.0f money -> %d neural data", money_spent, potential)
        return PrestigeResult(
            success=True, reward_amount=potential, money_spent=money_spent
        )

    # ── Queries ──────────────────────────────────────────────────────

    def get_money(self) -> float:
        return self.state.money

    def get_income_per_sec(self) -> float:
        """Income rate as of the last recompute."""
        return self.state.income_per_sec

    def get_neural_data(self) -> int:
        return self.state.neural_data

    def has_skill(self, skill_id: str) -> bool:
        return self.state.has_skill(skill_id)

    def get_building_count(self, building_id: int) -> int:
        return self.state.building_count(building_id)

    def get_building_cost(self, building_id: int) -> float:
        """Whole-unit price of the next unit of a building."""
        bdef = self.catalog.get_building(building_id)
        if bdef is None:
            raise IndexError(f"Unknown building id: {building_id}")

        count = self.state.building_counts[building_id]
        cost = self.config.cost_scaling.compute(bdef.base_cost, count)
        discount = (
            self.config.discount_rate
            if self.state.has_skill(self.config.discount_skill)
            else 1.0
        )
        return float(math.floor(cost * discount))

    def click_value(self) -> float:
        """Value of the next click.

        Reads the cached income rate; a purchase made since the last
        advance() is not reflected until the next recompute.
        """
        return (
            self.config.base_click_value
            + self.state.income_per_sec * self.config.click_income_fraction
        )

    def calculate_prestige_potential(self) -> int:
        return prestige_potential(self.state.money, self.config.prestige_threshold)

    def get_building_statuses(self) -> list[BuildingStatus]:
        result: list[BuildingStatus] = []
        for bdef in self.catalog.get_buildings():
            cost = self.get_building_cost(bdef.id)
            result.append(
                BuildingStatus(
                    id=bdef.id,
                    name=bdef.name,
                    icon=bdef.icon,
                    count=self.state.building_counts[bdef.id],
                    cost=cost,
                    income_each=bdef.base_income,
                    affordable=self.state.money >= cost,
                )
            )
        return result

    def get_affordable_buildings(self) -> list[BuildingStatus]:
        return [b for b in self.get_building_statuses() if b.affordable]

    def compute_time_to_afford(self, building_id: int) -> float | None:
        """Seconds until affordable at the cached rate. None if impossible."""
        if self.catalog.get_building(building_id) is None:
            return None
        cost = self.get_building_cost(building_id)
        if self.state.money >= cost:
            return 0.0
        rate = self.state.income_per_sec
        if rate <= 0:
            return None  # will never afford
        return (cost - self.state.money) / rate

    # ── Snapshot ─────────────────────────────────────────────────────

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot.from_state(self.state)

    def restore(self, snapshot: PlayerSnapshot) -> None:
        """Replace the player state with *snapshot*."""
        errors: list[str] = []
        expected = len(self.catalog.get_buildings())
        if len(snapshot.building_counts) != expected:
            errors.append(
                f"building_counts has {len(snapshot.building_counts)} entries, "
                f"catalog has {expected} buildings"
            )
        if any(c < 0 for c in snapshot.building_counts):
            errors.append("building_counts contains a negative count")
        for name in ("money", "neural_data", "income_multiplier", "total_clicks", "total_earnings"):
            value = getattr(snapshot, name)
            if not math.isfinite(value):
                errors.append(f"{name} is not finite")
            elif value < 0:
                errors.append(f"{name} is negative")
        unknown = sorted(s for s in snapshot.owned_skills if self.catalog.find_skill(s) is None)
        if unknown:
            errors.append(f"owned_skills contains unknown skills: {', '.join(unknown)}")
        if errors:
            raise ValueError(
                "Invalid snapshot:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        state = PlayerState(self.catalog)
        state.money = snapshot.money
        state.neural_data = snapshot.neural_data
        state.building_counts = list(snapshot.building_counts)
        state.owned_skills = set(snapshot.owned_skills)
        state.income_multiplier = snapshot.income_multiplier
        state.total_clicks = snapshot.total_clicks
        state.total_earnings = snapshot.total_earnings
        self.state = state
        self.calculate_income_per_sec()

    # ── Private helpers ──────────────────────────────────────────────

    def _add_money(self, amount: float) -> None:
        money = self.state.money + amount
        if not math.isfinite(money):
            raise OverflowError(f"crediting {amount} would leave money at {money}")
        self.state.money = money
        self.state.total_earnings += amount
