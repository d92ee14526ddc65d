"""A two-building catalog for quick balance experiments.

    neontycoon simulate --catalog examples.tiny_catalog --cps 5
"""
from __future__ import annotations

from neontycoon.catalog import BuildingDef, Catalog, SkillDef


def define_catalog() -> Catalog:
    return Catalog(
        buildings=(
            BuildingDef(0, "Script Kiddie", 10, 0.5, "⌨️"),
            BuildingDef(1, "Botnet", 250, 8, "🤖"),
        ),
        skills=(
            SkillDef("auto_click", 1, "+5% income", name="Auto-Clicker"),
            SkillDef("cheaper", 2, "Buildings are 10% cheaper", name="Optimization"),
        ),
    )
