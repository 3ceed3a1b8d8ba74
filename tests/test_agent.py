import math

import pytest

from steerai.agent import BaseAgent, NavigationColliderElement, Obstacle, SteeringAgent
from steerai.helpers import SteeringOutput, Vector2, vector_to_orientation


class FixedBehavior:
    def __init__(self, output):
        self.output = output
        self.calls = 0

    def calculate_steering(self, dt, agent):
        self.calls += 1
        return self.output


def test_base_agent_defaults():
    agent = BaseAgent(2.5)
    assert agent.radius == 2.5
    assert agent.position == Vector2()
    assert agent.body_color == (1.0, 1.0, 0.0, 1.0)


def test_rotation_is_wrapped():
    agent = BaseAgent()
    agent.rotation = 3 * math.pi + 0.1
    assert -math.pi <= agent.rotation <= math.pi
    assert math.cos(agent.rotation) == pytest.approx(math.cos(3 * math.pi + 0.1))


def test_integrate_moves_along_velocity():
    agent = BaseAgent()
    agent.linear_velocity = Vector2(2.0, -1.0)
    agent.integrate(0.5)
    assert agent.position == Vector2(2.0, -1.0) * 0.5


def test_trim_to_world_loops():
    agent = BaseAgent()
    agent.position = Vector2(60.0, -3.0)
    agent.trim_to_world(50.0)
    assert agent.position == Vector2(0.0, 50.0)


def test_trim_to_rect_clamps():
    agent = BaseAgent()
    agent.position = Vector2(60.0, -3.0)
    agent.trim_to_rect(Vector2(-10.0, -2.0), Vector2(20.0, 30.0), False)
    assert agent.position == Vector2(20.0, -2.0)


def test_trim_inside_leaves_position():
    agent = BaseAgent()
    agent.position = Vector2(5.0, 5.0)
    agent.trim_to_world(50.0)
    assert agent.position == Vector2(5.0, 5.0)


def test_steering_agent_defaults():
    agent = SteeringAgent()
    assert agent.max_linear_speed == 10.0
    assert agent.max_angular_speed == 10.0
    assert agent.auto_orient is False


def test_update_without_behavior_keeps_velocity():
    agent = SteeringAgent()
    agent.linear_velocity = Vector2(1.0, 1.0)
    agent.update(0.1)
    assert agent.linear_velocity == Vector2(1.0, 1.0)


def test_update_reaches_desired_velocity_with_unit_mass_and_step():
    agent = SteeringAgent()
    agent.mass = 1.0
    agent.auto_orient = True
    desired = Vector2(3.0, 4.0)
    behavior = FixedBehavior(SteeringOutput(desired))
    agent.steering_behavior = behavior
    agent.update(1.0)
    assert behavior.calls == 1
    assert agent.linear_velocity.x == pytest.approx(desired.x)
    assert agent.linear_velocity.y == pytest.approx(desired.y)
    assert agent.rotation == pytest.approx(vector_to_orientation(desired))


def test_update_clamps_angular_speed_from_above_only():
    agent = SteeringAgent()
    agent.steering_behavior = FixedBehavior(SteeringOutput(angular_velocity=50.0))
    agent.update(0.1)
    assert agent.angular_velocity == agent.max_angular_speed
    agent.steering_behavior = FixedBehavior(SteeringOutput(angular_velocity=-50.0))
    agent.update(0.1)
    assert agent.angular_velocity == -50.0


def test_direction_is_unit():
    agent = SteeringAgent()
    agent.linear_velocity = Vector2(-6.0, 8.0)
    assert agent.direction().magnitude() == pytest.approx(1.0)


def test_obstacle_segment_intersection():
    obstacle = Obstacle(Vector2(0.0, 0.0), 1.0)
    assert obstacle.intersects_segment(Vector2(-5.0, 0.5), Vector2(5.0, 0.5))
    assert not obstacle.intersects_segment(Vector2(-5.0, 2.0), Vector2(5.0, 2.0))
    assert not obstacle.intersects_segment(Vector2(3.0, 0.0), Vector2(5.0, 0.0))


def test_collider_corners_centered():
    collider = NavigationColliderElement(Vector2(15.0, 0.0), 3.0, 15.0)
    corners = collider.corners()
    assert len(corners) == 4
    cx = sum(c.x for c in corners) / 4
    cy = sum(c.y for c in corners) / 4
    assert cx == pytest.approx(15.0)
    assert cy == pytest.approx(0.0)
    assert max(c.x for c in corners) - min(c.x for c in corners) == pytest.approx(3.0)


def test_collider_segment_intersection():
    collider = NavigationColliderElement(Vector2(0.0, 0.0), 2.0, 2.0)
    assert collider.intersects_segment(Vector2(-5.0, 0.0), Vector2(5.0, 0.0))
    assert not collider.intersects_segment(Vector2(-5.0, 3.0), Vector2(5.0, 3.0))
    assert not collider.intersects_segment(Vector2(-5.0, 0.0), Vector2(-3.0, 0.0))
    assert collider.intersects_segment(Vector2(0.0, -5.0), Vector2(0.0, 5.0))