import math

import pytest

from steerai.agent import SteeringAgent
from steerai.flocking import Cohesion, Separation, VelocityMatch
from steerai.helpers import ZERO, Vector2


class FakeFlock:
    def __init__(self, neighbors=(), avg_pos=ZERO, avg_vel=ZERO):
        self._neighbors = list(neighbors)
        self._avg_pos = avg_pos
        self._avg_vel = avg_vel

    def neighbors(self):
        return self._neighbors

    def average_neighbor_pos(self):
        return self._avg_pos

    def average_neighbor_velocity(self):
        return self._avg_vel


def make_agent(x=0.0, y=0.0, speed=10.0):
    agent = SteeringAgent()
    agent.position = Vector2(x, y)
    agent.max_linear_speed = speed
    return agent


def test_cohesion_targets_average_but_adds_no_velocity():
    flock = FakeFlock(avg_pos=Vector2(7.0, 3.0))
    cohesion = Cohesion(flock)
    out = cohesion.calculate_steering(0.1, make_agent())
    assert out.linear_velocity == ZERO
    assert out.angular_velocity == 0.0
    assert cohesion.target.position == Vector2(7.0, 3.0)


def test_separation_flees_single_neighbor():
    agent = make_agent(speed=10.0)
    flock = FakeFlock([make_agent(5.0, 0.0)])
    out = Separation(flock).calculate_steering(0.1, agent)
    assert out.linear_velocity.x == pytest.approx(-agent.max_linear_speed)
    assert out.linear_velocity.y == pytest.approx(0.0)


def test_separation_symmetric_neighbors_cancel():
    flock = FakeFlock([make_agent(1.0, 0.0), make_agent(-1.0, 0.0)])
    out = Separation(flock).calculate_steering(0.1, make_agent())
    assert out.linear_velocity == ZERO


def test_separation_closer_neighbor_dominates():
    agent = make_agent(speed=8.0)
    flock = FakeFlock([make_agent(1.0, 0.0), make_agent(0.0, -4.0)])
    out = Separation(flock).calculate_steering(0.1, agent)
    v = out.linear_velocity
    assert v.x < 0.0
    assert v.y > 0.0
    assert abs(v.x) > abs(v.y)
    assert v.magnitude() == pytest.approx(agent.max_linear_speed)


def test_separation_without_neighbors_is_zero():
    out = Separation(FakeFlock()).calculate_steering(0.1, make_agent())
    assert out.linear_velocity == ZERO
    assert out.is_valid


def test_separation_ignores_coincident_neighbor():
    agent = make_agent(2.0, 2.0)
    out = Separation(FakeFlock([agent])).calculate_steering(0.1, agent)
    assert math.isfinite(out.linear_velocity.x)
    assert out.linear_velocity == ZERO


def test_velocity_match_follows_average_direction():
    agent = make_agent(speed=6.0)
    avg = Vector2(3.0, 4.0)
    out = VelocityMatch(FakeFlock(avg_vel=avg)).calculate_steering(0.1, agent)
    v = out.linear_velocity
    assert v.magnitude() == pytest.approx(agent.max_linear_speed)
    assert v.x * avg.y - v.y * avg.x == pytest.approx(0.0)
    assert v.dot(avg) > 0.0


def test_velocity_match_zero_average_is_zero():
    out = VelocityMatch(FakeFlock()).calculate_steering(0.1, make_agent())
    assert out.linear_velocity == ZERO