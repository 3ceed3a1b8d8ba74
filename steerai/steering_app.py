"""An application with agents that each run one selectable steering behaviour."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from enum import IntEnum

from .agent import Obstacle, SteeringAgent
from .behaviors import (
    Arrive,
    Evade,
    Face,
    Flee,
    Pursuit,
    Seek,
    SteeringBehavior,
    Wander,
)
from .helpers import TargetData, Vector2, distance


class BehaviorType(IntEnum):
    """The behaviours an agent can be given, in the order the menu lists them."""

    SEEK = 0
    WANDER = 1
    ARRIVE = 2
    FLEE = 3
    FACE = 4
    PURSUIT = 5
    EVADE = 6


@dataclass
class AgentEntry:
    """An agent with its behaviour and the menu selections that produced it.

    `selected_target` is the index of the agent to target, or negative for the mouse.
    """

    agent: SteeringAgent
    behavior: SteeringBehavior | None = None
    selected_behavior: int = BehaviorType.SEEK
    selected_target: int = -1


class SteeringApp:
    """Agents steering towards the mouse target or towards each other."""

    max_obstacle_radius = 5.0
    min_obstacle_radius = 1.0
    min_obstacle_distance = 10.0
    max_obstacle_tries = 200

    def __init__(
        self, trim_world_size: float = 50.0, rng: random.Random | None = None
    ) -> None:
        self._rng = rng or random.Random()
        self.agents: list[AgentEntry] = []
        self.target_labels: list[str] = []
        self.target = TargetData()
        self.visualize_target = True
        self.is_initialized = False
        self.trim_world = True
        self.trim_world_size = trim_world_size
        self.obstacles: list[Obstacle] = []

    def start(self) -> None:
        self.add_agent(BehaviorType.SEEK, -1)
        self.agents[0].agent.debug_rendering = True
        self._update_target_labels()
        for entry in self.agents:
            self.set_agent_behavior(entry)
        self.is_initialized = True

    def update(self, dt: float) -> None:
        for entry in self.agents:
            agent = entry.agent
            agent.update(dt)
            agent.integrate(dt)
            if self.trim_world:
                agent.trim_to_world(self.trim_world_size)
            self.update_target(entry)

    def set_mouse_target(self, position: Vector2) -> None:
        """Move the mouse target and retarget every agent."""
        if not self.visualize_target:
            return
        self.target.position = position
        for entry in self.agents:
            self.update_target(entry)

    def add_agent(
        self,
        behavior_type: BehaviorType = BehaviorType.WANDER,
        target_id: int = -1,
        auto_orient: bool = True,
        mass: float = 1.0,
        max_speed: float = 7.0,
    ) -> AgentEntry:
        agent = SteeringAgent()
        agent.auto_orient = auto_orient
        agent.max_linear_speed = max_speed
        agent.mass = mass
        agent.position = Vector2(
            self._rng.uniform(0.0, self.trim_world_size) / 2.0,
            self._rng.uniform(0.0, self.trim_world_size) / 2.0,
        )
        entry = AgentEntry(
            agent=agent, selected_behavior=int(behavior_type), selected_target=target_id
        )
        if self.is_initialized:
            self.set_agent_behavior(entry)
        self.agents.append(entry)
        if self.is_initialized:
            self._update_target_labels()
        return entry

    def remove_agent(self, index: int) -> None:
        """Remove an agent; agents after it that targeted it shift their target down."""
        del self.agents[index]
        self._update_target_labels()
        for position, entry in enumerate(self.agents):
            if position >= index and entry.selected_target == index:
                entry.selected_target -= 1

    def set_agent_behavior(self, entry: AgentEntry) -> None:
        """Give the agent a fresh behaviour of its selected type."""
        try:
            kind = BehaviorType(entry.selected_behavior)
        except ValueError:
            kind = BehaviorType.SEEK

        auto_orient = True
        behavior: SteeringBehavior
        if kind is BehaviorType.ARRIVE:
            behavior = Arrive()
        elif kind is BehaviorType.WANDER:
            behavior = Wander(self._rng)
        elif kind is BehaviorType.FLEE:
            behavior = Flee()
        elif kind is BehaviorType.FACE:
            auto_orient = False
            behavior = Face()
        elif kind is BehaviorType.PURSUIT:
            behavior = Pursuit()
        elif kind is BehaviorType.EVADE:
            behavior = Evade(15.0)
        else:
            behavior = Seek()

        entry.behavior = behavior
        self.update_target(entry)
        entry.agent.auto_orient = auto_orient
        entry.agent.steering_behavior = behavior

    def update_target(self, entry: AgentEntry) -> None:
        """Point the entry's behaviour at the mouse or at its selected agent."""
        if entry.behavior is None:
            raise RuntimeError("agent has no behaviour to target")
        if entry.selected_target < 0:
            entry.behavior.set_target(self.target)
            return
        other = self.agents[entry.selected_target].agent
        entry.behavior.set_target(
            TargetData(
                position=other.position,
                orientation=other.rotation,
                linear_velocity=other.linear_velocity,
                angular_velocity=other.angular_velocity,
            )
        )

    def add_obstacle(self) -> None:
        radius = self._rng.uniform(self.min_obstacle_radius, self.max_obstacle_radius)
        position = self.random_obstacle_position(radius)
        if position is not None:
            self.obstacles.append(Obstacle(position, radius))

    def random_obstacle_position(self, radius: float) -> Vector2 | None:
        """A random position clear of all obstacles, or None if none was found."""
        for _ in range(self.max_obstacle_tries):
            position = Vector2(
                self._rng.uniform(0.0, self.trim_world_size),
                self._rng.uniform(0.0, self.trim_world_size),
            )
            if all(
                distance(position, obstacle.center)
                >= radius + obstacle.radius + self.min_obstacle_distance
                for obstacle in self.obstacles
            ):
                return position
        return None

    def _update_target_labels(self) -> None:
        self.target_labels = ["Mouse"] + [f"Agent {i}" for i in range(len(self.agents))]

    @property
    def mouse_target(self) -> TargetData:
        return dataclasses.replace(self.target)