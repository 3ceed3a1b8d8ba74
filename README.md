# steerai

Steering behaviours for 2D agents, in plain Python with no third-party
dependencies.

## What is in it

- **Vector maths and value types** (`steerai.helpers`): the immutable
  `Vector2` with `magnitude`, `magnitude_squared`, `normalized` and `dot`;
  `distance`, `distance_squared`, `vector_to_orientation`, `clamped_angle`
  and `clamp`; `SteeringParams` (alias `TargetData`), the kinematic state of
  a target; `SteeringOutput`, the velocities a behaviour asks for, with an
  `is_valid` flag; and `Goal`, a position goal channel.
- **Agents** (`steerai.agent`): `BaseAgent`, a circular body with position,
  rotation, velocities and mass. `update` runs the agent's logic and
  `integrate` moves it along its velocities; `trim_to_world` and
  `trim_to_rect` wrap or clamp it into a rectangle. `SteeringAgent` turns the
  output of its `steering_behavior` into a new velocity, limited by its mass,
  and either faces its direction of travel (`auto_orient`) or takes the
  angular velocity, capped at `max_angular_speed`. `Obstacle` (a circle) and
  `NavigationColliderElement` (a box) are static shapes that can be tested
  against a line segment with `intersects_segment`.
- **Basic steering** (`steerai.behaviors`): `Seek`, `Flee`, `Arrive`,
  `Wander`, `Face`, `Pursuit` and `Evade`, all subclasses of
  `SteeringBehavior`. `Evade` returns an invalid output when the target is
  farther away than its radius.
- **Combined steering** (`steerai.combined`): `BlendedSteering` takes the
  weighted average of several `WeightedBehavior`s; `PrioritySteering` uses
  the first behaviour whose output is valid, or the last one's output if
  none is. Targets are set on the behaviours inside them: calling
  `set_target` on a combined behaviour raises `TypeError`.
- **Path following** (`steerai.path_follow`): `PathFollow` seeks each point
  of a path in turn, arrives at the last one and reports `has_arrived`.
- **Decision-making agents** (`steerai.smart_agent`): `SmartAgent` updates a
  `DecisionMaking` structure before steering, and `has_line_of_sight`
  checks a segment against its list of obstacles.
- **Spatial partitioning** (`steerai.spatial`): `CellSpace`, a grid of
  `Cell`s that tracks which agents are in which cell so that neighbour
  queries only look at nearby cells; `Rect` and `is_overlapping`.
- **Flocking** (`steerai.flocking`, `steerai.flock`): `Cohesion`,
  `Separation` and `VelocityMatch`, and a `Flock` that blends them with
  seek and wander, puts evading one agent first, and keeps the cell grid up
  to date.
- **Scenarios**: `SandboxApp` with its kinematic `SandboxAgent`
  (`steerai.sandbox`), `SteeringApp` with one selectable `BehaviorType` per
  agent (`steerai.steering_app`), `CombinedSteeringApp`
  (`steerai.combined_app`) and `FlockingApp` (`steerai.flocking_app`). Each
  has `start` and `update`.

## Installing

```
pip install .
```

## Using the library

```python
from steerai.agent import SteeringAgent
from steerai.behaviors import Seek
from steerai.helpers import SteeringParams, Vector2

agent = SteeringAgent()
seek = Seek()
seek.set_target(SteeringParams(Vector2(10.0, 5.0)))
agent.steering_behavior = seek

for _ in range(60):
    agent.update(1 / 60)     # choose a new velocity
    agent.integrate(1 / 60)  # move along it

print(agent.position)
```

Behaviours are combined by nesting them:

```python
from steerai.behaviors import Evade, Seek, Wander
from steerai.combined import BlendedSteering, PrioritySteering, WeightedBehavior

drunk = BlendedSteering([WeightedBehavior(Wander(), 0.5), WeightedBehavior(Seek(), 0.5)])
careful = PrioritySteering([Evade(15.0), drunk])
```

A `Flock` holds its agents, the agent they evade and the cell grid; call
`Flock.update` once per step and `Flock.set_seek_target` to steer the whole
group. Behaviours and scenarios that use randomness take an optional
`random.Random` so that runs can be repeated.

## Running a simulation

The `steerai` command starts one of the scenarios and steps it with a fixed
time step, without any display:

```
steerai --app steering --frames 120 --dt 0.016
```

`--app` is one of `combined`, `flocking` (the default, 4000 agents),
`sandbox` and `steering`; `--frames` defaults to 60 and `--dt` to 1/60 s.
`-x` and `-y` give a window position, which is only printed:

```
steerai -x 100 -y 50
```

From Python, `steerai.cli.create_app` builds a scenario by name and
`steerai.cli.run` starts it and steps it for a number of frames.

## What it does not do

There is no window, drawing or interactive user interface: the scenarios
run headless, the mouse target is set by calling `set_mouse_target`, and
settings are plain attributes. There is no physics engine beyond moving
bodies along their velocities; obstacles do not collide with agents. There
is no graph search, navigation mesh, finite state machine or behaviour tree:
`SmartAgent` accepts any `DecisionMaking` subclass you write.

## Tests

```
pip install .[test]
pytest
```