"""An application running a flock that seeks the mouse target."""

from __future__ import annotations

import random

from .agent import SteeringAgent
from .flock import Flock
from .helpers import TargetData, Vector2


class FlockingApp:
    """A flock in a square world, evading one agent and seeking the mouse."""

    def __init__(
        self,
        flock_size: int = 4000,
        trim_world_size: float = 500.0,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self.mouse_target = TargetData()
        self.use_mouse_target = True
        self.visualize_mouse_target = True
        self.trim_world_size = trim_world_size
        self.flock_size = flock_size
        self.flock: Flock | None = None
        self.agent_to_evade: SteeringAgent | None = None

    def start(self) -> None:
        self.agent_to_evade = SteeringAgent()
        self.flock = Flock(
            self.flock_size, self.trim_world_size, self.agent_to_evade, True, self._rng
        )

    def set_mouse_target(self, position: Vector2) -> None:
        if self.visualize_mouse_target:
            self.mouse_target.position = position

    def update(self, dt: float) -> None:
        if self.flock is None:
            raise RuntimeError("application has not been started")
        self.flock.update(dt)
        if self.use_mouse_target:
            self.flock.set_seek_target(self.mouse_target)