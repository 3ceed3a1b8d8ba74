"""Basic steering behaviours: seek, wander, arrive, flee, face, pursuit and evade."""

from __future__ import annotations

import dataclasses
import math
import random
from abc import ABC, abstractmethod

from .agent import SteeringAgent
from .helpers import (
    ZERO,
    SteeringOutput,
    TargetData,
    Vector2,
    clamp,
    distance,
)


class SteeringBehavior(ABC):
    """Base class of all steering behaviours; holds the current target."""

    def __init__(self) -> None:
        self.target: TargetData = TargetData()

    def set_target(self, target: TargetData) -> None:
        """Store a copy of the target's kinematic state."""
        self.target = dataclasses.replace(target)

    @abstractmethod
    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        """Return the velocities the agent should have."""


class Seek(SteeringBehavior):
    """Head straight for the target at full speed."""

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        direction = (self.target.position - agent.position).normalized()
        return SteeringOutput(direction * agent.max_linear_speed)


class Wander(Seek):
    """Steer towards a point that drifts randomly on a circle ahead of the agent."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self._rng = rng or random.Random()
        self.offset_distance = 6.0
        self.radius = 4.0
        self.max_angle_change = math.radians(45.0)
        self.wander_angle = 0.0

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        offset_point = agent.position + agent.linear_velocity.normalized() * self.offset_distance
        angle = self.wander_angle + self._rng.uniform(
            -self.max_angle_change, self.max_angle_change
        )
        random_point = offset_point + Vector2(
            self.radius * math.cos(angle), self.radius * math.sin(angle)
        )
        self.wander_angle = angle

        direction = (random_point - agent.position).normalized()
        return SteeringOutput(direction * agent.max_linear_speed)


class Arrive(SteeringBehavior):
    """Seek that slows down inside a radius around the target."""

    def __init__(self, slow_radius: float = 15.0, target_radius: float = 3.0) -> None:
        super().__init__()
        self.slow_radius = slow_radius
        self.target_radius = target_radius

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        to_target = self.target.position - agent.position
        remaining = to_target.magnitude() - self.target_radius
        direction = to_target.normalized()

        if remaining < self.slow_radius:
            factor = remaining / (self.slow_radius + self.target_radius)
            return SteeringOutput(direction * (agent.max_linear_speed * factor))
        return SteeringOutput(direction * agent.max_linear_speed)


class Flee(SteeringBehavior):
    """Head straight away from the target at full speed."""

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        direction = (agent.position - self.target.position).normalized()
        return SteeringOutput(direction * agent.max_linear_speed)


class Face(SteeringBehavior):
    """Turn on the spot towards the target."""

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        to_target = self.target.position - agent.position
        desired = math.atan2(to_target.y, to_target.x)
        difference = desired - agent.rotation

        while difference > math.pi:
            difference -= 2.0 * math.pi
        while difference < -math.pi:
            difference += 2.0 * math.pi

        max_speed = agent.max_angular_speed
        return SteeringOutput(ZERO, clamp(difference * max_speed, -max_speed, max_speed))


def _predicted_position(target: TargetData, from_position: Vector2) -> Vector2:
    """Where the target will be after the time it takes to cover the gap at its speed."""
    speed = target.linear_velocity.magnitude()
    if speed == 0.0:
        return target.position
    time = distance(target.position, from_position) / speed
    return target.position + target.linear_velocity * time


class Pursuit(SteeringBehavior):
    """Seek the target's predicted future position."""

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        predicted = _predicted_position(self.target, agent.position)
        direction = (predicted - agent.position).normalized()
        return SteeringOutput(direction * agent.max_linear_speed)


class Evade(SteeringBehavior):
    """Flee the target's predicted position while it is within a radius.

    Outside the radius the output is marked invalid.
    """

    def __init__(self, radius: float = 30.0) -> None:
        super().__init__()
        self.radius = radius

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        if distance(self.target.position, agent.position) > self.radius:
            return SteeringOutput(is_valid=False)

        predicted = _predicted_position(self.target, agent.position)
        direction = (agent.position - predicted).normalized()
        return SteeringOutput(direction * agent.max_linear_speed)