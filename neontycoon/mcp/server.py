"""MCP server wrapping GameEngine for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from neontycoon.catalog import Catalog, default_catalog
from neontycoon.config import EngineConfig
from neontycoon.engine import GameEngine
from neontycoon.state import PlayerSnapshot

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum clicks per click() call
_MAX_CLICKS = 1000


@dataclass
class _GameHolder:
    """Holds the catalog, config and the active engine."""

    catalog: Catalog
    config: EngineConfig
    engine: GameEngine


def _make_holder(
    catalog: Catalog | None = None, config: EngineConfig | None = None
) -> _GameHolder:
    catalog = catalog if catalog is not None else default_catalog()
    config = config if config is not None else EngineConfig()
    return _GameHolder(catalog=catalog, config=config, engine=GameEngine(catalog, config))


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    cfg = holder.config
    return {
        "name": cfg.name,
        "buildings": [
            {
                "id": b.id,
                "name": b.name,
                "icon": b.icon,
                "base_cost": b.base_cost,
                "base_income": b.base_income,
            }
            for b in holder.catalog.get_buildings()
        ],
        "skills": [
            {"id": s.id, "name": s.name, "cost": s.cost, "description": s.description}
            for s in holder.catalog.get_skills()
        ],
        "prestige_threshold": cfg.prestige_threshold,
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    engine = holder.engine
    state = engine.state
    return {
        "money": round(state.money, 2),
        "income_per_sec": round(state.income_per_sec, 4),
        "click_value": round(engine.click_value(), 4),
        "neural_data": state.neural_data,
        "building_counts": list(state.building_counts),
        "owned_skills": sorted(state.owned_skills),
        "income_multiplier": state.income_multiplier,
        "prestige_potential": engine.calculate_prestige_potential(),
        "total_clicks": state.total_clicks,
        "total_earnings": round(state.total_earnings, 2),
    }


def _tool_get_buildings(holder: _GameHolder) -> dict[str, Any]:
    engine = holder.engine
    result = []
    for b in engine.get_building_statuses():
        time_to_afford = engine.compute_time_to_afford(b.id)
        result.append({
            "id": b.id,
            "name": b.name,
            "count": b.count,
            "cost": b.cost,
            "affordable": b.affordable,
            "time_to_afford": round(time_to_afford, 2) if time_to_afford is not None else None,
        })
    return {"buildings": result}


def _tool_buy_building(holder: _GameHolder, building_id: int) -> dict[str, Any]:
    result = holder.engine.purchase_building(building_id)
    if result:
        return {
            "success": True,
            "building_id": building_id,
            "cost": result.cost,
            "new_count": holder.engine.get_building_count(building_id),
            "money": round(holder.engine.get_money(), 2),
        }
    return {"success": False, "reason": result.reason.name.lower()}


def _tool_buy_skill(holder: _GameHolder, skill_id: str) -> dict[str, Any]:
    result = holder.engine.purchase_skill(skill_id)
    if result:
        return {
            "success": True,
            "skill_id": skill_id,
            "neural_data": holder.engine.get_neural_data(),
        }
    return {"success": False, "reason": result.reason.name.lower()}


def _tool_click(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    total = 0.0
    for _ in range(count):
        total += holder.engine.click()
    return {
        "clicks": count,
        "total_earned": round(total, 2),
        "new_balance": round(holder.engine.get_money(), 2),
    }


def _tool_wait(holder: _GameHolder, seconds: float) -> dict[str, Any]:
    if not seconds > 0:  # also rejects NaN
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    money_before = holder.engine.get_money()

    # Subdivide into 1-second ticks
    remaining = seconds
    try:
        while remaining > 0:
            dt = min(1.0, remaining)
            holder.engine.advance(dt)
            remaining -= dt
    except OverflowError as exc:
        return {"error": str(exc), "waited": seconds - remaining}

    return {
        "waited": seconds,
        "earned": round(holder.engine.get_money() - money_before, 2),
        "money": round(holder.engine.get_money(), 2),
        "income_per_sec": round(holder.engine.get_income_per_sec(), 4),
    }


def _tool_prestige(holder: _GameHolder) -> dict[str, Any]:
    result = holder.engine.do_prestige()
    if result.success:
        return {
            "success": True,
            "reward_amount": result.reward_amount,
            "neural_data": holder.engine.get_neural_data(),
        }
    return {"success": False, "reason": result.reason}


def _tool_save_state(holder: _GameHolder) -> dict[str, Any]:
    return {"snapshot": holder.engine.snapshot().to_dict()}


def _tool_load_state(holder: _GameHolder, snapshot: dict[str, Any]) -> dict[str, Any]:
    try:
        holder.engine.restore(PlayerSnapshot.from_dict(snapshot))
    except (TypeError, ValueError) as exc:
        return {"error": str(exc)}
    return {"success": True, "money": round(holder.engine.get_money(), 2)}


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.engine = GameEngine(holder.catalog, holder.config)
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(
    catalog: Catalog | None = None, config: EngineConfig | None = None
) -> FastMCP:
    """Create an MCP server wrapping a GameEngine for the given catalog."""
    holder = _make_holder(catalog, config)

    mcp = FastMCP(name=f"Neon Tycoon: {holder.config.name}")

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static game overview: buildings, skills and the prestige threshold."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current state: money, income, neural data, building counts, skills."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def get_buildings() -> dict[str, Any]:
        """Get every building with its count, next cost and time-to-afford."""
        return _tool_get_buildings(holder)

    @mcp.tool()
    def buy_building(building_id: int) -> dict[str, Any]:
        """Buy one unit of a building. Returns success/failure with reason."""
        return _tool_buy_building(holder, building_id)

    @mcp.tool()
    def buy_skill(skill_id: str) -> dict[str, Any]:
        """Unlock a skill with Neural Data. Returns success/failure with reason."""
        return _tool_buy_skill(holder, skill_id)

    @mcp.tool()
    def click(count: int = 1) -> dict[str, Any]:
        """Click N times (max 1000). Returns total earned."""
        return _tool_click(holder, count)

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance game time by the given seconds (max 86400). Time is subdivided into 1s ticks."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def prestige() -> dict[str, Any]:
        """Reset money and buildings in exchange for Neural Data."""
        return _tool_prestige(holder)

    @mcp.tool()
    def save_state() -> dict[str, Any]:
        """Return the current player snapshot as a JSON-safe dict."""
        return _tool_save_state(holder)

    @mcp.tool()
    def load_state(snapshot: dict[str, Any]) -> dict[str, Any]:
        """Replace the current player with a snapshot from save_state()."""
        return _tool_load_state(holder, snapshot)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
