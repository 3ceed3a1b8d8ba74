"""Steering behaviours that react to the neighbours of an agent in a flock."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .agent import BaseAgent, SteeringAgent
from .behaviors import Flee, Seek, SteeringBehavior
from .helpers import ZERO, SteeringOutput, TargetData, Vector2, distance


class Neighborhood(Protocol):
    """What the flocking behaviours need from their flock."""

    def neighbors(self) -> Sequence[BaseAgent]: ...

    def average_neighbor_pos(self) -> Vector2: ...

    def average_neighbor_velocity(self) -> Vector2: ...


class Cohesion(Seek):
    """Aim at the average position of the neighbours.

    The seek towards that point is evaluated, but its result is not used:
    cohesion contributes no velocity of its own.
    """

    def __init__(self, flock: Neighborhood) -> None:
        super().__init__()
        self.flock = flock

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        self.target.position = self.flock.average_neighbor_pos()
        super().calculate_steering(dt, agent)
        return SteeringOutput()


class Separation(Flee):
    """Flee every neighbour, weighted by the inverse of its distance."""

    def __init__(self, flock: Neighborhood) -> None:
        super().__init__()
        self.flock = flock

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        neighbors = self.flock.neighbors()
        if not neighbors:
            return SteeringOutput()

        total = ZERO
        for neighbor in neighbors:
            gap = distance(agent.position, neighbor.position)
            if gap == 0.0:
                # Coincident agents (the agent itself among them) give no direction.
                continue
            self.set_target(TargetData(position=neighbor.position))
            total = total + super().calculate_steering(dt, agent).linear_velocity * (1.0 / gap)

        return SteeringOutput(total.normalized() * agent.max_linear_speed)


class VelocityMatch(SteeringBehavior):
    """Move in the average direction of the neighbours at full speed."""

    def __init__(self, flock: Neighborhood) -> None:
        super().__init__()
        self.flock = flock

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        direction = self.flock.average_neighbor_velocity().normalized()
        return SteeringOutput(direction * agent.max_linear_speed)