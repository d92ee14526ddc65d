from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DeclineReason(Enum):
    UNKNOWN_BUILDING = auto()
    INSUFFICIENT_FUNDS = auto()
    UNKNOWN_SKILL = auto()
    ALREADY_OWNED = auto()
    INSUFFICIENT_NEURAL_DATA = auto()


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a building or skill purchase attempt."""

    success: bool
    cost: float = 0.0
    reason: DeclineReason | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class BuildingStatus:
    """Read-only snapshot of a building for query results."""

    id: int
    name: str
    icon: str
    count: int
    cost: float
    income_each: float
    affordable: bool
