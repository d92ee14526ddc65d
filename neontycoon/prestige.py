from __future__ import annotations

import math
from dataclasses import dataclass


def prestige_potential(money: float, threshold: float = 1_000_000) -> int:
    """Neural Data a prestige would award for *money*.

    Zero below *threshold*, then floor(sqrt(money / threshold)).
    Raises ValueError if *money* is NaN or infinite.
    """
    if not math.isfinite(money):
        raise ValueError(f"money must be finite, got {money}")
    if money < threshold:
        return 0
    return int(math.floor(math.sqrt(money / threshold)))


@dataclass(frozen=True)
class PrestigeResult:
    """Outcome of a prestige attempt."""

    success: bool
    reward_amount: int = 0
    money_spent: float = 0.0
    reason: str = ""
