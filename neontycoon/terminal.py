from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neontycoon.engine import GameEngine


@dataclass
class SimulationContext:
    """Extra context available to terminal conditions during simulation."""

    time_elapsed: float = 0.0
    last_purchase_time: float = 0.0
    total_purchases: int = 0
    prestige_count: int = 0


class TerminalCondition(ABC):
    """Base class for simulation stopping conditions."""

    @abstractmethod
    def is_met(self, engine: GameEngine, context: SimulationContext) -> bool: ...

    @abstractmethod
    def describe(self) -> str: ...


class _TimeTerminal(TerminalCondition):
    def __init__(self, seconds: float) -> None:
        self.seconds = seconds

    def is_met(self, engine: GameEngine, context: SimulationContext) -> bool:
        return context.time_elapsed >= self.seconds

    def describe(self) -> str:
        return f"time({self.seconds})"


class _MoneyTerminal(TerminalCondition):
    def __init__(self, amount: float) -> None:
        self.amount = amount

    def is_met(self, engine: GameEngine, context: SimulationContext) -> bool:
        return engine.get_money() >= self.amount

    def describe(self) -> str:
        return f"money({self.amount})"


class _NeuralDataTerminal(TerminalCondition):
    def __init__(self, amount: int) -> None:
        self.amount = amount

    def is_met(self, engine: GameEngine, context: SimulationContext) -> bool:
        return engine.get_neural_data() >= self.amount

    def describe(self) -> str:
        return f"neural_data({self.amount})"


class _StallTerminal(TerminalCondition):
    def __init__(self, max_idle_seconds: float) -> None:
        self.max_idle_seconds = max_idle_seconds

    def is_met(self, engine: GameEngine, context: SimulationContext) -> bool:
        gap = context.time_elapsed - context.last_purchase_time
        return gap >= self.max_idle_seconds

    def describe(self) -> str:
        return f"stall({self.max_idle_seconds})"


class _AnyTerminal(TerminalCondition):
    def __init__(self, conditions: list[TerminalCondition]) -> None:
        self.conditions = conditions

    def is_met(self, engine: GameEngine, context: SimulationContext) -> bool:
        return any(c.is_met(engine, context) for c in self.conditions)

    def describe(self) -> str:
        return " OR ".join(c.describe() for c in self.conditions)


class Terminal:
    """Factory for built-in terminal conditions."""

    @staticmethod
    def time(seconds: float) -> TerminalCondition:
        return _TimeTerminal(seconds)

    @staticmethod
    def money(amount: float) -> TerminalCondition:
        return _MoneyTerminal(amount)

    @staticmethod
    def neural_data(amount: int) -> TerminalCondition:
        return _NeuralDataTerminal(amount)

    @staticmethod
    def stall(max_idle_seconds: float = 600) -> TerminalCondition:
        return _StallTerminal(max_idle_seconds)

    @staticmethod
    def any(*conditions: TerminalCondition) -> TerminalCondition:
        return _AnyTerminal(list(conditions))
