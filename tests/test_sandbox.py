import math
import random

import pytest

from steerai.helpers import Vector2, vector_to_orientation
from steerai.sandbox import SandboxAgent, SandboxApp


@pytest.mark.parametrize("index, expected", [(-3, 0), (0, 0), (1, 1), (7, 1)])
def test_set_current_behaviour(index, expected):
    agent = SandboxAgent()
    agent.set_current_behaviour(index)
    assert agent.current_behavior == expected


def test_initial_target_is_position():
    agent = SandboxAgent()
    assert agent.target == agent.position


def test_seek_sets_velocity_towards_target():
    agent = SandboxAgent()
    agent.target = Vector2(8.0, -6.0)
    agent.angular_velocity = 2.0
    agent.kinematic_seek_and_arrive()
    expected = (agent.target - agent.position) / 0.25
    assert agent.linear_velocity.x == pytest.approx(expected.x)
    assert agent.linear_velocity.y == pytest.approx(expected.y)
    assert agent.angular_velocity == 0.0


def test_seek_stops_inside_radius():
    agent = SandboxAgent()
    agent.linear_velocity = Vector2(3.0, 3.0)
    agent.target = Vector2(0.5, 0.5)
    agent.kinematic_seek_and_arrive()
    assert agent.linear_velocity == Vector2()


def test_wander_keeps_constant_speed():
    agent = SandboxAgent(random.Random(4))
    agent.linear_velocity = Vector2(1.0, 0.0)
    for _ in range(20):
        agent.kinematic_wander()
        assert agent.linear_velocity.magnitude() == pytest.approx(5.0)


def test_update_orients_along_velocity():
    agent = SandboxAgent()
    agent.target = Vector2(-10.0, 10.0)
    agent.update(0.1)
    assert agent.rotation == pytest.approx(vector_to_orientation(agent.linear_velocity))
    assert math.isclose(agent.rotation, vector_to_orientation(Vector2(-1.0, 1.0)))


def test_app_moves_agent_to_target():
    app = SandboxApp(random.Random(1))
    app.start()
    target = Vector2(20.0, 15.0)
    app.set_target(target)
    start_gap = (target - app.agent.position).magnitude()
    for _ in range(60):
        app.update(0.05)
    gap = (target - app.agent.position).magnitude()
    assert gap < start_gap
    assert gap < 1.0


def test_app_requires_start():
    app = SandboxApp()
    with pytest.raises(RuntimeError):
        app.update(0.1)
    with pytest.raises(RuntimeError):
        app.set_target(Vector2(1.0, 1.0))