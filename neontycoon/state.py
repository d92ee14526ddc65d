from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from neontycoon.catalog import Catalog


class PlayerState:
    """Mutable runtime container holding a player's economy."""

    def __init__(self, catalog: Catalog) -> None:
        self.money: float = 0.0
        self.neural_data: int = 0
        self.building_counts: list[int] = [0] * len(catalog.get_buildings())
        self.owned_skills: set[str] = set()
        self.income_multiplier: float = 1.0

        # Statistics
        self.total_clicks: int = 0
        self.total_earnings: float = 0.0

        # Cached, recomputed from the fields above
        self.income_per_sec: float = 0.0

    def building_count(self, id: int) -> int:
        if 0 <= id < len(self.building_counts):
            return self.building_counts[id]
        return 0

    def has_skill(self, skill_id: str) -> bool:
        return skill_id in self.owned_skills


_SNAPSHOT_KEYS = (
    "money",
    "neural_data",
    "building_counts",
    "owned_skills",
    "income_multiplier",
    "total_clicks",
    "total_earnings",
)


@dataclass(frozen=True)
class PlayerSnapshot:
    """Everything a save layer needs to persist and restore a player."""

    money: float = 0.0
    neural_data: int = 0
    building_counts: tuple[int, ...] = ()
    owned_skills: frozenset[str] = field(default_factory=frozenset)
    income_multiplier: float = 1.0
    total_clicks: int = 0
    total_earnings: float = 0.0

    @classmethod
    def from_state(cls, state: PlayerState) -> PlayerSnapshot:
        return cls(
            money=state.money,
            neural_data=state.neural_data,
            building_counts=tuple(state.building_counts),
            owned_skills=frozenset(state.owned_skills),
            income_multiplier=state.income_multiplier,
            total_clicks=state.total_clicks,
            total_earnings=state.total_earnings,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "money": self.money,
            "neural_data": self.neural_data,
            "building_counts": list(self.building_counts),
            "owned_skills": sorted(self.owned_skills),
            "income_multiplier": self.income_multiplier,
            "total_clicks": self.total_clicks,
            "total_earnings": self.total_earnings,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerSnapshot:
        """Build a snapshot from a to_dict()-shaped mapping.

        Raises ValueError for missing keys or values of the wrong shape.
        Range checks against a catalog happen in GameEngine.restore().
        """
        missing = [k for k in _SNAPSHOT_KEYS if k not in data]
        if missing:
            raise ValueError(f"Snapshot is missing keys: {', '.join(missing)}")

        counts = data["building_counts"]
        if not isinstance(counts, (list, tuple)):
            raise ValueError(f"building_counts must be a list, got {counts!r}")
        skills = data["owned_skills"]
        if not isinstance(skills, (list, tuple)) or not all(isinstance(s, str) for s in skills):
            raise ValueError(f"owned_skills must be a list of skill ids, got {skills!r}")

        return cls(
            money=_number("money", data["money"]),
            neural_data=_whole("neural_data", data["neural_data"]),
            building_counts=tuple(_whole("building_counts", c) for c in counts),
            owned_skills=frozenset(skills),
            income_multiplier=_number("income_multiplier", data["income_multiplier"]),
            total_clicks=_whole("total_clicks", data["total_clicks"]),
            total_earnings=_number("total_earnings", data["total_earnings"]),
        )


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _whole(name: str, value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return value
