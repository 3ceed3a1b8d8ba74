"""Agents and static world elements."""

from __future__ import annotations

from typing import Any, Protocol

from .helpers import (
    ZERO,
    Color,
    SteeringOutput,
    Vector2,
    clamp,
    clamped_angle,
    vector_to_orientation,
)


class _Behavior(Protocol):
    def calculate_steering(self, dt: float, agent: SteeringAgent) -> SteeringOutput: ...


class BaseAgent:
    """A circular dynamic body with position, rotation and velocities.

    `update` runs the agent's logic; `integrate` advances its body in the world.
    """

    def __init__(self, radius: float = 1.0) -> None:
        self.radius = radius
        self.position: Vector2 = ZERO
        self._rotation = 0.0
        self.linear_velocity: Vector2 = ZERO
        self.angular_velocity = 0.0
        self.mass = 0.01
        self.body_color: Color = (1.0, 1.0, 0.0, 1.0)
        self.user_data: Any = None

    @property
    def rotation(self) -> float:
        return clamped_angle(self._rotation)

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = value

    def update(self, dt: float) -> None:
        """The base agent has no behaviour of its own."""

    def integrate(self, dt: float) -> None:
        """Move the body along its velocities for one time step."""
        self.position = self.position + self.linear_velocity * dt
        self._rotation += self.angular_velocity * dt

    def trim_to_world(self, world_bounds: float, is_world_looping: bool = True) -> None:
        self.trim_to_rect(ZERO, Vector2(world_bounds, world_bounds), is_world_looping)

    def trim_to_rect(
        self, bottom_left: Vector2, top_right: Vector2, is_world_looping: bool = True
    ) -> None:
        """Wrap or clamp the position into the given rectangle."""
        x, y = self.position.x, self.position.y
        if is_world_looping:
            if x > top_right.x:
                x = bottom_left.x
            elif x < bottom_left.x:
                x = top_right.x
            if y > top_right.y:
                y = bottom_left.y
            elif y < bottom_left.y:
                y = top_right.y
        else:
            x = clamp(x, bottom_left.x, top_right.x)
            y = clamp(y, bottom_left.y, top_right.y)
        self.position = Vector2(x, y)


class SteeringAgent(BaseAgent):
    """An agent driven by a steering behaviour."""

    def __init__(self, radius: float = 1.0) -> None:
        super().__init__(radius)
        self.steering_behavior: _Behavior | None = None
        self.max_linear_speed = 10.0
        self.max_angular_speed = 10.0
        self.auto_orient = False
        self.debug_rendering = False

    def update(self, dt: float) -> None:
        if self.steering_behavior is None:
            return
        output = self.steering_behavior.calculate_steering(dt, self)

        current = self.linear_velocity
        acceleration = (output.linear_velocity - current) / self.mass
        self.linear_velocity = current + acceleration * dt

        if self.auto_orient:
            self.rotation = vector_to_orientation(self.linear_velocity)
        else:
            self.angular_velocity = min(output.angular_velocity, self.max_angular_speed)

    def direction(self) -> Vector2:
        return self.linear_velocity.normalized()


def _closest_point_on_segment(point: Vector2, start: Vector2, end: Vector2) -> Vector2:
    seg = end - start
    length_sq = seg.magnitude_squared()
    if length_sq == 0.0:
        return start
    t = clamp((point - start).dot(seg) / length_sq, 0.0, 1.0)
    return start + seg * t


class Obstacle:
    """A static circular obstacle."""

    def __init__(self, center: Vector2, radius: float) -> None:
        self.center = center
        self.radius = radius

    def intersects_segment(self, start: Vector2, end: Vector2) -> bool:
        closest = _closest_point_on_segment(self.center, start, end)
        return (closest - self.center).magnitude_squared() <= self.radius * self.radius


class NavigationColliderElement:
    """A static box, centred on its position, that blocks navigation."""

    def __init__(self, position: Vector2, width: float, height: float) -> None:
        self.position = position
        self.width = width
        self.height = height

    def _bounds(self) -> tuple[Vector2, Vector2]:
        half = Vector2(self.width / 2.0, self.height / 2.0)
        return self.position - half, self.position + half

    def corners(self) -> list[Vector2]:
        """Corners counter-clockwise from the bottom left."""
        lo, hi = self._bounds()
        return [lo, Vector2(hi.x, lo.y), hi, Vector2(lo.x, hi.y)]

    def intersects_segment(self, start: Vector2, end: Vector2) -> bool:
        lo, hi = self._bounds()
        delta = end - start
        t_enter, t_exit = 0.0, 1.0
        axes = (
            (start.x, delta.x, lo.x, hi.x),
            (start.y, delta.y, lo.y, hi.y),
        )
        for origin, step, low, high in axes:
            if step == 0.0:
                if origin < low or origin > high:
                    return False
                continue
            ta, tb = (low - origin) / step, (high - origin) / step
            if ta > tb:
                ta, tb = tb, ta
            t_enter = max(t_enter, ta)
            t_exit = min(t_exit, tb)
            if t_enter > t_exit:
                return False
        return True