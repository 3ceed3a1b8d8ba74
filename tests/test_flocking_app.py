import random

import pytest

from steerai.flocking_app import FlockingApp
from steerai.helpers import Vector2


@pytest.fixture
def app():
    application = FlockingApp(flock_size=20, trim_world_size=100.0, rng=random.Random(5))
    application.start()
    return application


def test_start_creates_flock(app):
    assert len(app.flock.agents) == 20
    assert app.flock.agent_to_evade is app.agent_to_evade
    assert app.agent_to_evade.max_linear_speed == 20.0
    assert app.flock.trim_world is True
    assert app.flock.world_size == 100.0


def test_update_before_start_raises():
    with pytest.raises(RuntimeError):
        FlockingApp(flock_size=1).update(0.1)


def test_update_sets_seek_target(app):
    app.set_mouse_target(Vector2(30.0, 40.0))
    app.update(0.1)
    assert app.flock.seek.target.position == Vector2(30.0, 40.0)


def test_seek_target_untouched_without_mouse_target(app):
    app.use_mouse_target = False
    app.set_mouse_target(Vector2(30.0, 40.0))
    app.update(0.1)
    assert app.flock.seek.target.position == Vector2()


def test_mouse_target_ignored_when_not_visualized(app):
    app.visualize_mouse_target = False
    app.set_mouse_target(Vector2(30.0, 40.0))
    assert app.mouse_target.position == Vector2()


def test_agents_stay_in_world(app):
    app.set_mouse_target(Vector2(50.0, 50.0))
    for _ in range(20):
        app.update(0.1)
    for agent in app.flock.agents + [app.agent_to_evade]:
        assert 0.0 <= agent.position.x <= app.trim_world_size
        assert 0.0 <= agent.position.y <= app.trim_world_size