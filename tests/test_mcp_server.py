"""Tests for MCP server tool functions."""

import pytest

from neontycoon.catalog import BuildingDef, Catalog, SkillDef
from neontycoon.config import EngineConfig
from neontycoon.mcp.server import (
    _make_holder,
    _tool_buy_building,
    _tool_buy_skill,
    _tool_click,
    _tool_get_buildings,
    _tool_get_game_info,
    _tool_get_game_state,
    _tool_load_state,
    _tool_new_game,
    _tool_prestige,
    _tool_save_state,
    _tool_wait,
    create_server,
)


def _make_test_catalog() -> Catalog:
    """A small but complete catalog for testing."""
    return Catalog(
        buildings=(
            BuildingDef(0, "Miner", base_cost=10, base_income=1),
            BuildingDef(1, "Rig", base_cost=500, base_income=20),
        ),
        skills=(
            SkillDef("auto_click", 1, "+5% income", name="Auto-Clicker"),
        ),
    )


def _holder():
    return _make_holder(_make_test_catalog(), EngineConfig(name="Test Game", prestige_threshold=1000))


# ── get_game_info ────────────────────────────────────────────────────


class TestGetGameInfo:
    def test_returns_expected_structure(self):
        result = _tool_get_game_info(_holder())
        assert result["name"] == "Test Game"
        assert len(result["buildings"]) == 2
        assert len(result["skills"]) == 1
        assert result["prestige_threshold"] == 1000

    def test_skill_fields(self):
        result = _tool_get_game_info(_holder())
        assert result["skills"][0] == {
            "id": "auto_click",
            "name": "Auto-Clicker",
            "cost": 1,
            "description": "+5% income",
        }


# ── get_game_state ───────────────────────────────────────────────────


class TestGetGameState:
    def test_initial_state(self):
        result = _tool_get_game_state(_holder())
        assert result["money"] == 0
        assert result["building_counts"] == [0, 0]
        assert result["owned_skills"] == []
        assert result["click_value"] == 1.0
        assert result["prestige_potential"] == 0


# ── buildings ────────────────────────────────────────────────────────


class TestBuildings:
    def test_list(self):
        result = _tool_get_buildings(_holder())
        assert [b["id"] for b in result["buildings"]] == [0, 1]
        assert result["buildings"][0]["cost"] == 10
        assert result["buildings"][0]["time_to_afford"] is None

    def test_buy_success(self):
        holder = _holder()
        _tool_click(holder, 10)
        result = _tool_buy_building(holder, 0)
        assert result["success"] is True
        assert result["new_count"] == 1
        assert result["money"] == 0

    def test_buy_insufficient_funds(self):
        result = _tool_buy_building(_holder(), 0)
        assert result == {"success": False, "reason": "insufficient_funds"}

    def test_buy_unknown(self):
        result = _tool_buy_building(_holder(), 9)
        assert result == {"success": False, "reason": "unknown_building"}


# ── skills ───────────────────────────────────────────────────────────


class TestSkills:
    def test_buy_without_neural_data(self):
        result = _tool_buy_skill(_holder(), "auto_click")
        assert result == {"success": False, "reason": "insufficient_neural_data"}

    def test_buy_unknown(self):
        result = _tool_buy_skill(_holder(), "warp")
        assert result["reason"] == "unknown_skill"

    def test_buy_after_prestige(self):
        holder = _holder()
        _tool_click(holder, 1000)
        assert _tool_prestige(holder)["success"]
        result = _tool_buy_skill(holder, "auto_click")
        assert result == {"success": True, "skill_id": "auto_click", "neural_data": 0}


# ── click ────────────────────────────────────────────────────────────


class TestClick:
    def test_single(self):
        holder = _holder()
        result = _tool_click(holder)
        assert result["clicks"] == 1
        assert result["total_earned"] == 1.0
        assert result["new_balance"] == 1.0

    def test_count_bounds(self):
        holder = _holder()
        assert "error" in _tool_click(holder, 0)
        assert "error" in _tool_click(holder, 1001)
        assert holder.engine.get_money() == 0


# ── wait ─────────────────────────────────────────────────────────────


class TestWait:
    def test_accrues_income(self):
        holder = _holder()
        _tool_click(holder, 10)
        _tool_buy_building(holder, 0)
        result = _tool_wait(holder, 30)
        assert result["earned"] == pytest.approx(30.0)
        assert result["income_per_sec"] == 1.0

    def test_fractional(self):
        holder = _holder()
        holder.engine.state.building_counts = [2, 0]
        result = _tool_wait(holder, 2.5)
        assert result["money"] == pytest.approx(5.0)

    def test_bounds(self):
        holder = _holder()
        assert "error" in _tool_wait(holder, 0)
        assert "error" in _tool_wait(holder, -3)
        assert "error" in _tool_wait(holder, 86401)
        assert "error" in _tool_wait(holder, float("nan"))

    def test_overflow_reports_error(self):
        holder = _holder()
        holder.engine.state.building_counts = [0, 10]
        holder.engine.state.income_multiplier = 1e307
        result = _tool_wait(holder, 5)
        assert "error" in result
        assert result["waited"] == 0
        assert holder.engine.get_money() == 0
        assert _tool_get_game_state(holder)["prestige_potential"] == 0


# ── prestige ─────────────────────────────────────────────────────────


class TestPrestige:
    def test_below_threshold(self):
        result = _tool_prestige(_holder())
        assert result["success"] is False
        assert "threshold" in result["reason"]

    def test_success(self):
        holder = _holder()
        holder.engine.state.money = 4000
        result = _tool_prestige(holder)
        assert result == {"success": True, "reward_amount": 2, "neural_data": 2}
        assert holder.engine.get_money() == 0


# ── save / load / new game ───────────────────────────────────────────


class TestPersistence:
    def test_save_and_load(self):
        holder = _holder()
        _tool_click(holder, 25)
        _tool_buy_building(holder, 0)
        saved = _tool_save_state(holder)["snapshot"]

        _tool_new_game(holder)
        assert holder.engine.get_money() == 0

        result = _tool_load_state(holder, saved)
        assert result["success"] is True
        assert holder.engine.state.building_counts == [1, 0]
        assert holder.engine.get_money() == pytest.approx(15.0)

    def test_load_bad_snapshot(self):
        holder = _holder()
        assert "error" in _tool_load_state(holder, {"money": 5})
        bad = _tool_save_state(holder)["snapshot"]
        bad["building_counts"] = [1]
        assert "error" in _tool_load_state(holder, bad)

    def test_load_rejects_malformed_values(self):
        holder = _holder()
        _tool_click(holder, 25)
        saved = _tool_save_state(holder)["snapshot"]

        letters = dict(saved, owned_skills="auto_click")
        assert "owned_skills" in _tool_load_state(holder, letters)["error"]
        fractional = dict(saved, neural_data=2.9)
        assert "whole number" in _tool_load_state(holder, fractional)["error"]
        not_a_number = dict(saved, money="nan")
        assert "money" in _tool_load_state(holder, not_a_number)["error"]
        nan_money = dict(saved, money=float("nan"))
        assert "not finite" in _tool_load_state(holder, nan_money)["error"]
        unknown = dict(saved, owned_skills=["cheaper"])
        assert "unknown skills" in _tool_load_state(holder, unknown)["error"]

        assert holder.engine.get_money() == pytest.approx(25.0)
        assert holder.engine.get_neural_data() == 0

    def test_new_game(self):
        holder = _holder()
        _tool_click(holder, 5)
        result = _tool_new_game(holder)
        assert result["success"] is True
        assert holder.engine.state.total_clicks == 0


def test_create_server():
    server = create_server(_make_test_catalog())
    assert server.name == "Neon Tycoon: Neon Tycoon"
