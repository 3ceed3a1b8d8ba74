"""An application showing blended and priority steering side by side."""

from __future__ import annotations

import random

from .agent import SteeringAgent
from .behaviors import Evade, Seek, Wander
from .combined import BlendedSteering, PrioritySteering, WeightedBehavior
from .helpers import TargetData, Vector2


class CombinedSteeringApp:
    """A wandering, seeking agent and another that evades it or seeks the mouse."""

    def __init__(
        self, trim_world_size: float = 50.0, rng: random.Random | None = None
    ) -> None:
        self._rng = rng or random.Random()
        self.mouse_target = TargetData()
        self.use_mouse_target = False
        self.visualize_mouse_target = True
        self.debug_render = False
        self.trim_world = True
        self.trim_world_size = trim_world_size

        self.wander: Wander | None = None
        self.seek: Seek | None = None
        self.blended_steering: BlendedSteering | None = None
        self.drunk_agent: SteeringAgent | None = None
        self.evade: Evade | None = None
        self.priority_steering: PrioritySteering | None = None
        self.evade_agent: SteeringAgent | None = None

    def start(self) -> None:
        self.wander = Wander(self._rng)
        self.seek = Seek()
        self.blended_steering = BlendedSteering(
            [WeightedBehavior(self.wander, 0.5), WeightedBehavior(self.seek, 0.5)]
        )

        self.drunk_agent = SteeringAgent()
        self.drunk_agent.steering_behavior = self.blended_steering
        self.drunk_agent.max_linear_speed = 15.0
        self.drunk_agent.auto_orient = True
        self.drunk_agent.mass = 1.0
        self.drunk_agent.body_color = (0.0, 1.0, 0.0, 1.0)

        self.evade = Evade(15.0)
        self.priority_steering = PrioritySteering([self.evade, self.seek])
        self.evade_agent = SteeringAgent()
        self.evade_agent.steering_behavior = self.priority_steering
        self.evade_agent.max_linear_speed = 15.0
        self.evade_agent.auto_orient = True
        self.evade_agent.mass = 1.0

    def set_mouse_target(self, position: Vector2) -> None:
        if self.visualize_mouse_target:
            self.mouse_target.position = position

    def update(self, dt: float) -> None:
        if (
            self.seek is None
            or self.evade is None
            or self.drunk_agent is None
            or self.evade_agent is None
        ):
            raise RuntimeError("application has not been started")

        self.seek.set_target(self.mouse_target)
        drunk = self.drunk_agent
        drunk.update(dt)
        drunk.integrate(dt)
        drunk.trim_to_world(self.trim_world_size)

        self.evade.set_target(
            TargetData(position=drunk.position, linear_velocity=drunk.linear_velocity)
        )
        evader = self.evade_agent
        evader.update(dt)
        evader.integrate(dt)
        evader.trim_to_world(self.trim_world_size)