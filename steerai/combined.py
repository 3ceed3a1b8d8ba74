"""Steering behaviours that combine other behaviours."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .agent import SteeringAgent
from .behaviors import SteeringBehavior
from .helpers import SteeringOutput, TargetData


@dataclass
class WeightedBehavior:
    """A behaviour together with its blending weight."""

    behavior: SteeringBehavior
    weight: float = 0.0


class _Composite(SteeringBehavior):
    def set_target(self, target: TargetData) -> None:
        raise TypeError("targets are set on the individual behaviours")


class BlendedSteering(_Composite):
    """Weighted average of several behaviours."""

    def __init__(self, weighted_behaviors: Iterable[WeightedBehavior] = ()) -> None:
        super().__init__()
        self.weighted_behaviors: list[WeightedBehavior] = list(weighted_behaviors)

    def add_behavior(self, weighted_behavior: WeightedBehavior) -> None:
        self.weighted_behaviors.append(weighted_behavior)

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        blended = SteeringOutput()
        total_weight = 0.0
        for entry in self.weighted_behaviors:
            steering = entry.behavior.calculate_steering(dt, agent)
            blended = blended.combined(steering.scaled(entry.weight))
            total_weight += entry.weight

        if total_weight > 0.0:
            blended = blended.divided(total_weight)
        return blended


class PrioritySteering(_Composite):
    """Use the first behaviour that gives a valid output, else the last one's."""

    def __init__(self, priority_behaviors: Iterable[SteeringBehavior] = ()) -> None:
        super().__init__()
        self.priority_behaviors: list[SteeringBehavior] = list(priority_behaviors)

    def add_behavior(self, behavior: SteeringBehavior) -> None:
        self.priority_behaviors.append(behavior)

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        steering = SteeringOutput()
        for behavior in self.priority_behaviors:
            steering = behavior.calculate_steering(dt, agent)
            if steering.is_valid:
                break
        return steering