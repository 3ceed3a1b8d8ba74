"""Steering along a sequence of waypoints."""

from __future__ import annotations

from collections.abc import Iterable

from .agent import SteeringAgent
from .behaviors import Arrive, Seek, SteeringBehavior
from .helpers import SteeringOutput, TargetData, Vector2, distance_squared


class PathFollow(SteeringBehavior):
    """Seek each waypoint in turn and arrive at the last one."""

    def __init__(self) -> None:
        super().__init__()
        self._seek = Seek()
        self._arrive = Arrive(target_radius=0.5)
        self._current: SteeringBehavior | None = None
        self.path: list[Vector2] = []
        self._index = 0

    def set_path(self, path: Iterable[Vector2]) -> None:
        self.path = list(path)
        self._index = -1
        self._goto_next_point()

    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput:
        if self._index < len(self.path):
            waypoint = self.path[self._index]
            if distance_squared(agent.position, waypoint) < agent.radius * agent.radius:
                self._goto_next_point()

        if self._current is None:
            return SteeringOutput()
        return self._current.calculate_steering(dt, agent)

    def has_arrived(self) -> bool:
        return self._index >= len(self.path)

    def _goto_next_point(self) -> None:
        self._index += 1
        if self._index >= len(self.path):
            return

        target = TargetData(position=self.path[self._index])
        if self._index == len(self.path) - 1:
            self._arrive.set_target(target)
            self._current = self._arrive
        else:
            self._seek.set_target(target)
            self._current = self._seek