"""A steering agent that is also driven by a decision-making structure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

from .agent import SteeringAgent
from .behaviors import Seek, Wander
from .helpers import Vector2


class DecisionMaking(ABC):
    """A structure (state machine, behaviour tree, ...) updated every frame."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the decision making by one time step."""


class _Blocker(Protocol):
    def intersects_segment(self, start: Vector2, end: Vector2) -> bool: ...


class SmartAgent(SteeringAgent):
    """A steering agent with decision making and sight checks against obstacles."""

    def __init__(self, radius: float = 1.0, obstacles: Iterable[_Blocker] = ()) -> None:
        super().__init__(radius)
        self.decision_making: DecisionMaking | None = None
        self.wander = Wander()
        self.seek = Seek()
        self.obstacles: list[_Blocker] = list(obstacles)

    def update(self, dt: float) -> None:
        if self.decision_making is not None:
            self.decision_making.update(dt)
        super().update(dt)

    def set_decision_making(self, decision_making: DecisionMaking | None) -> None:
        """Replace the current decision-making structure."""
        self.decision_making = decision_making

    def has_line_of_sight(self, pos: Vector2) -> bool:
        """True when no obstacle lies on the segment from the agent to `pos`."""
        return not any(o.intersects_segment(self.position, pos) for o in self.obstacles)