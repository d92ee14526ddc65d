from __future__ import annotations

import logging

from neontycoon.catalog import Catalog
from neontycoon.config import EngineConfig
from neontycoon.engine import GameEngine
from neontycoon.metrics import MetricsCollector
from neontycoon.report import SimulationReport, build_report
from neontycoon.strategy import Strategy
from neontycoon.terminal import SimulationContext, TerminalCondition

logger = logging.getLogger(__name__)

MAX_TICKS = 10_000_000


class Simulation:
    """Orchestrates a headless run of the economy under a strategy."""

    def __init__(
        self,
        strategy: Strategy,
        terminal: TerminalCondition,
        catalog: Catalog | None = None,
        config: EngineConfig | None = None,
        tick_resolution: float = 1.0,
    ) -> None:
        if tick_resolution <= 0:
            raise ValueError(f"tick_resolution must be positive, got {tick_resolution}")

        self.strategy = strategy
        self.terminal = terminal
        self.tick_resolution = tick_resolution

        self.engine = GameEngine(catalog, config)
        self.collector = MetricsCollector(snapshot_interval=tick_resolution)
        self.context = SimulationContext()
        self._run_started = 0.0

    def run(self) -> SimulationReport:
        engine = self.engine
        ctx = self.context
        tick_count = 0

        logger.info(
            "simulating %s until %s",
            self.strategy.describe(),
            self.terminal.describe(),
        )

        while not self.terminal.is_met(engine, ctx):
            tick_count += 1
            if tick_count > MAX_TICKS:
                break

            # 1. Advance time, 2. Process clicks
            try:
                engine.advance(self.tick_resolution)
                ctx.time_elapsed += self.tick_resolution
                for _ in range(self.strategy.get_clicks(self.tick_resolution)):
                    engine.click()
            except OverflowError as exc:
                logger.warning("aborting simulation at %.1fs: %s", ctx.time_elapsed, exc)
                return self._build_report("Aborted: money overflow")

            # 3. Unlock skills
            for skill_id in self.strategy.decide_skills(engine):
                result = engine.purchase_skill(skill_id)
                if result:
                    self.collector.record_skill(ctx.time_elapsed, skill_id, int(result.cost))

            # 4. Buy buildings
            affordable = engine.get_affordable_buildings()
            for building_id in self.strategy.decide_purchases(engine, affordable):
                result = engine.purchase_building(building_id)
                if result:
                    self.collector.record_purchase(
                        engine, ctx.time_elapsed, building_id, result.cost
                    )
                    ctx.last_purchase_time = ctx.time_elapsed
                    ctx.total_purchases += 1

            # 5. Prestige
            if self.strategy.should_prestige(engine):
                result = engine.do_prestige()
                if result.success:
                    self.collector.record_prestige(
                        ctx.time_elapsed,
                        result.reward_amount,
                        result.money_spent,
                        ctx.time_elapsed - self._run_started,
                    )
                    self._run_started = ctx.time_elapsed
                    ctx.prestige_count += 1

            # 6. Record metrics
            self.collector.record_tick(engine, ctx.time_elapsed)

        outcome = (
            "Terminal condition met"
            if self.terminal.is_met(engine, ctx)
            else "Max ticks reached"
        )
        logger.info("simulation finished after %.1fs: %s", ctx.time_elapsed, outcome)
        return self._build_report(outcome)

    def _build_report(self, outcome: str) -> SimulationReport:
        state = self.engine.state
        return build_report(
            collector=self.collector,
            strategy_description=self.strategy.describe(),
            terminal_description=self.terminal.describe(),
            outcome=outcome,
            total_time=self.context.time_elapsed,
            final_money=state.money,
            final_income_per_sec=state.income_per_sec,
            final_neural_data=state.neural_data,
            final_building_counts=state.building_counts,
            total_clicks=state.total_clicks,
        )
