from __future__ import annotations

import warnings
from dataclasses import dataclass, field

from neontycoon.cost_scaling import CostScaling

AUTO_CLICK_SKILL = "auto_click"
CHEAPER_SKILL = "cheaper"


@dataclass(frozen=True)
class EngineConfig:
    """Tuning constants for the economy formulas.

    A custom cost_scaling replaces price_growth_rate, which validate()
    then ignores.
    """

    name: str = "Neon Tycoon"
    price_growth_rate: float = 1.15
    discount_rate: float = 0.9
    auto_click_bonus: float = 0.05
    base_click_value: float = 1.0
    click_income_fraction: float = 0.05
    prestige_threshold: float = 1_000_000
    auto_click_skill: str = AUTO_CLICK_SKILL
    discount_skill: str = CHEAPER_SKILL
    cost_scaling: CostScaling | None = field(default=None, repr=False)
    _scaling_from_rate: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.cost_scaling is None:
            object.__setattr__(
                self, "cost_scaling", CostScaling.exponential(self.price_growth_rate)
            )
            object.__setattr__(self, "_scaling_from_rate", True)

    def validate(self) -> list[str]:
        """Check for configuration errors. Returns list of error messages."""
        errors: list[str] = []

        if self._scaling_from_rate:
            if self.price_growth_rate <= 0:
                errors.append(f"price_growth_rate must be positive, got {self.price_growth_rate}")
            elif self.price_growth_rate <= 1:
                warnings.warn(
                    f"price_growth_rate={self.price_growth_rate} does not make each "
                    f"purchase more expensive than the last.",
                    stacklevel=2,
                )
        if not 0 < self.discount_rate <= 1:
            errors.append(f"discount_rate must be in (0, 1], got {self.discount_rate}")
        if self.auto_click_bonus < 0:
            errors.append(f"auto_click_bonus must be non-negative, got {self.auto_click_bonus}")
        if self.base_click_value < 0:
            errors.append(f"base_click_value must be non-negative, got {self.base_click_value}")
        if self.click_income_fraction < 0:
            errors.append(
                f"click_income_fraction must be non-negative, got {self.click_income_fraction}"
            )
        if self.prestige_threshold <= 0:
            errors.append(f"prestige_threshold must be positive, got {self.prestige_threshold}")

        return errors
