"""Tests for state module."""
import pytest

from neontycoon.catalog import BuildingDef, Catalog
from neontycoon.state import PlayerSnapshot, PlayerState


def _make_catalog() -> Catalog:
    return Catalog(
        buildings=(
            BuildingDef(0, "Farm", base_cost=10, base_income=1),
            BuildingDef(1, "Mine", base_cost=50, base_income=4),
            BuildingDef(2, "Lab", base_cost=200, base_income=12),
        ),
    )


def test_initialization():
    state = PlayerState(_make_catalog())
    assert state.money == 0.0
    assert state.neural_data == 0
    assert state.building_counts == [0, 0, 0]
    assert state.owned_skills == set()
    assert state.income_multiplier == 1.0
    assert state.total_clicks == 0
    assert state.total_earnings == 0.0
    assert state.income_per_sec == 0.0


def test_building_count():
    state = PlayerState(_make_catalog())
    state.building_counts[1] = 5
    assert state.building_count(1) == 5


def test_building_count_unknown():
    state = PlayerState(_make_catalog())
    assert state.building_count(-1) == 0
    assert state.building_count(3) == 0


def test_has_skill():
    state = PlayerState(_make_catalog())
    assert not state.has_skill("cheaper")
    state.owned_skills.add("cheaper")
    assert state.has_skill("cheaper")


def test_snapshot_from_state():
    state = PlayerState(_make_catalog())
    state.money = 123.5
    state.neural_data = 4
    state.building_counts = [1, 2, 3]
    state.owned_skills = {"offline", "auto_click"}
    state.total_clicks = 9

    snap = PlayerSnapshot.from_state(state)
    assert snap.building_counts == (1, 2, 3)
    assert snap.owned_skills == frozenset({"offline", "auto_click"})

    # Snapshot is detached from later mutation
    state.building_counts[0] = 99
    state.owned_skills.add("cheaper")
    assert snap.building_counts == (1, 2, 3)
    assert "cheaper" not in snap.owned_skills


def test_snapshot_dict_is_json_friendly():
    snap = PlayerSnapshot(
        money=10.0,
        neural_data=2,
        building_counts=(1, 0),
        owned_skills=frozenset({"cheaper", "auto_click"}),
    )
    data = snap.to_dict()
    assert data["owned_skills"] == ["auto_click", "cheaper"]
    assert data["building_counts"] == [1, 0]
    assert PlayerSnapshot.from_dict(data) == snap


def test_snapshot_from_dict_missing_keys():
    with pytest.raises(ValueError, match="missing keys: neural_data"):
        PlayerSnapshot.from_dict({
            "money": 1.0,
            "building_counts": [],
            "owned_skills": [],
            "income_multiplier": 1.0,
            "total_clicks": 0,
            "total_earnings": 0.0,
        })
