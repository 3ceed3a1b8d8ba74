"""A sandbox agent with simple kinematic behaviours, and its application."""

from __future__ import annotations

import math
import random

from .agent import BaseAgent
from .helpers import ZERO, Vector2, vector_to_orientation

SEEK_AND_ARRIVE = 0
WANDER = 1


class SandboxAgent(BaseAgent):
    """An agent that either seeks its target or wanders."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self._rng = rng or random.Random()
        self.target: Vector2 = self.position
        self.current_behavior = SEEK_AND_ARRIVE

    def update(self, dt: float) -> None:
        if self.current_behavior == SEEK_AND_ARRIVE:
            self.kinematic_seek_and_arrive()
        elif self.current_behavior == WANDER:
            self.kinematic_wander()
        self.auto_orient()

    def set_current_behaviour(self, index: int) -> None:
        """Select a behaviour; negative picks the first, any other nonzero the second."""
        if index < 0:
            self.current_behavior = SEEK_AND_ARRIVE
        elif index:
            self.current_behavior = WANDER
        else:
            self.current_behavior = SEEK_AND_ARRIVE

    def auto_orient(self) -> None:
        velocity = self.linear_velocity
        if velocity.magnitude_squared() > 0:
            self.rotation = vector_to_orientation(velocity)

    def kinematic_seek_and_arrive(self) -> None:
        radius = 1.0
        time_to_target = 0.25

        direction = self.target - self.position
        if direction.magnitude_squared() < radius * radius:
            self.linear_velocity = ZERO
            return

        self.linear_velocity = direction / time_to_target
        self.angular_velocity = 0.0

    def kinematic_wander(self) -> None:
        max_angle = 2.0 * math.pi
        random_angle = max_angle * self._rng.random() - max_angle * self._rng.random()
        angle_vec = Vector2(math.sin(random_angle), math.cos(random_angle))

        wander_distance = 5.0
        speed = 5.0

        velocity = self.linear_velocity.normalized() * wander_distance + angle_vec
        self.linear_velocity = velocity.normalized() * speed


class SandboxApp:
    """Holds one sandbox agent and steps it each frame."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.agent: SandboxAgent | None = None

    def start(self) -> None:
        self.agent = SandboxAgent(self._rng)

    def _require_agent(self) -> SandboxAgent:
        if self.agent is None:
            raise RuntimeError("application has not been started")
        return self.agent

    def set_target(self, target: Vector2) -> None:
        self._require_agent().target = target

    def update(self, dt: float) -> None:
        agent = self._require_agent()
        agent.update(dt)
        agent.integrate(dt)