# neontycoon — Idle Game Economy Engine & Balance Simulation

from neontycoon.catalog import BuildingDef, SkillDef, Catalog, default_catalog
from neontycoon.cost_scaling import CostScaling
from neontycoon.config import EngineConfig
from neontycoon.state import PlayerState, PlayerSnapshot
from neontycoon.purchase import DeclineReason, PurchaseResult, BuildingStatus
from neontycoon.prestige import PrestigeResult, prestige_potential
from neontycoon.engine import GameEngine
from neontycoon.terminal import TerminalCondition, Terminal, SimulationContext
from neontycoon.strategy import Strategy, ClickProfile, GreedyCheapest, GreedyROI
from neontycoon.metrics import MetricsCollector
from neontycoon.simulation import Simulation
from neontycoon.report import SimulationReport, build_report
from neontycoon.formatting import format_text_report

__all__ = [
    # Catalog
    "BuildingDef",
    "SkillDef",
    "Catalog",
    "default_catalog",
    # Cost
    "CostScaling",
    # Config
    "EngineConfig",
    # State
    "PlayerState",
    "PlayerSnapshot",
    # Results
    "DeclineReason",
    "PurchaseResult",
    "BuildingStatus",
    "PrestigeResult",
    "prestige_potential",
    # Engine
    "GameEngine",
    # Terminal
    "TerminalCondition",
    "Terminal",
    "SimulationContext",
    # Strategy
    "Strategy",
    "ClickProfile",
    "GreedyCheapest",
    "GreedyROI",
    # Simulation
    "MetricsCollector",
    "Simulation",
    "SimulationReport",
    "build_report",
    # Formatting
    "format_text_report",
]
