from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildingDef:
    """Static definition of a production building."""

    id: int
    name: str
    base_cost: float
    base_income: float = 0.0
    icon: str = ""


@dataclass(frozen=True)
class SkillDef:
    """Static definition of a skill bought with Neural Data."""

    id: str
    cost: int = 0
    description: str = ""
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)


@dataclass(frozen=True)
class Catalog:
    """Read-only table of buildings and skills supplied to the engine.

    Building ids must equal their position in ``buildings``; the engine
    indexes counts by id.
    """

    buildings: tuple[BuildingDef, ...] = ()
    skills: tuple[SkillDef, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "buildings", tuple(self.buildings))
        object.__setattr__(self, "skills", tuple(self.skills))

    def get_buildings(self) -> tuple[BuildingDef, ...]:
        return self.buildings

    def get_skills(self) -> tuple[SkillDef, ...]:
        return self.skills

    def get_building(self, id: int) -> BuildingDef | None:
        if 0 <= id < len(self.buildings):
            return self.buildings[id]
        return None

    def find_skill(self, skill_id: str) -> SkillDef | None:
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None

    def validate(self) -> list[str]:
        """Check for common catalog errors. Returns list of error messages."""
        errors: list[str] = []

        for index, b in enumerate(self.buildings):
            if b.id != index:
                errors.append(
                    f"Building {b.name!r} has id {b.id} but sits at position {index}"
                )
            if b.base_cost <= 0:
                errors.append(f"Building {b.name!r} has non-positive base_cost {b.base_cost}")
            if b.base_income < 0:
                errors.append(f"Building {b.name!r} has negative base_income {b.base_income}")

        seen: set[str] = set()
        for s in self.skills:
            if s.id in seen:
                errors.append(f"Duplicate skill ID: {s.id!r}")
            seen.add(s.id)
            if not isinstance(s.cost, int) or s.cost < 0:
                errors.append(f"Skill {s.id!r} cost must be a non-negative integer, got {s.cost!r}")

        return errors


def default_catalog() -> Catalog:
    """The Neon Tycoon buildings and skills."""
    return Catalog(
        buildings=(
            BuildingDef(0, "Data Miner", 15, 1, "💾"),
            BuildingDef(1, "Bot Network", 100, 5, "🤖"),
            BuildingDef(2, "Server Rack", 1100, 22, "🔋"),
            BuildingDef(3, "AI Cluster", 12000, 85, "🧠"),
            BuildingDef(4, "Quantum Core", 130000, 350, "⚛️"),
            BuildingDef(5, "Dyson Swarm", 1500000, 1500, "☀️"),
            BuildingDef(6, "Reality Engine", 25000000, 8000, "🌀"),
        ),
        skills=(
            SkillDef("auto_click", 5, "Automatic clicks 1x/sec", name="Auto-Clicker"),
            SkillDef("cheaper", 10, "Buildings are 10% cheaper", name="Optimization"),
            SkillDef("offline", 15, "Offline earnings x2", name="Deep Sleep"),
            SkillDef("hack_freq", 25, "Hacks appear more frequently", name="Backdoor"),
        ),
    )
