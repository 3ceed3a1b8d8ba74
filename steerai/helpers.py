"""Vector maths and the small value types shared by steering behaviours."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Vector2:
        return Vector2(self.x / factor, self.y / factor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0.0:
            return Vector2()
        return Vector2(self.x / length, self.y / length)


ZERO = Vector2()

Color = tuple[float, float, float, float]


def distance(a: Vector2, b: Vector2) -> float:
    return (a - b).magnitude()


def distance_squared(a: Vector2, b: Vector2) -> float:
    return (a - b).magnitude_squared()


def vector_to_orientation(vector: Vector2) -> float:
    """Angle in radians of a direction vector."""
    return math.atan2(vector.y, vector.x)


def clamped_angle(angle: float) -> float:
    """Wrap an angle into the range [-pi, pi]."""
    wrapped = math.fmod(angle, 2.0 * math.pi)
    if wrapped < -math.pi:
        return wrapped + 2.0 * math.pi
    if wrapped > math.pi:
        return wrapped - 2.0 * math.pi
    return wrapped


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class SteeringParams:
    """Kinematic state of a target for steering behaviours."""

    position: Vector2 = ZERO
    orientation: float = 0.0
    linear_velocity: Vector2 = ZERO
    angular_velocity: float = 0.0

    def clear(self) -> None:
        self.position = ZERO
        self.linear_velocity = ZERO
        self.orientation = 0.0
        self.angular_velocity = 0.0


TargetData = SteeringParams


@dataclass
class SteeringOutput:
    """Desired velocities produced by a steering behaviour."""

    linear_velocity: Vector2 = ZERO
    angular_velocity: float = 0.0
    is_valid: bool = True

    def combined(self, other: SteeringOutput) -> SteeringOutput:
        """Sum of both outputs; validity is kept from this one."""
        return SteeringOutput(
            self.linear_velocity + other.linear_velocity,
            self.angular_velocity + other.angular_velocity,
            self.is_valid,
        )

    def scaled(self, factor: float) -> SteeringOutput:
        return SteeringOutput(
            self.linear_velocity * factor, self.angular_velocity * factor, self.is_valid
        )

    def divided(self, factor: float) -> SteeringOutput:
        return SteeringOutput(
            self.linear_velocity / factor, self.angular_velocity / factor, self.is_valid
        )


@dataclass
class Goal:
    """A position goal channel used when combining steering."""

    position: Vector2 = field(default=ZERO)
    position_set: bool = False

    def clear(self) -> None:
        self.position = ZERO
        self.position_set = False

    def update_goal(self, goal: Goal) -> None:
        if goal.position_set:
            self.position = goal.position
            self.position_set = True

    def can_merge_goal(self, goal: Goal) -> bool:
        return not (self.position_set and goal.position_set)