"""A flock of steering agents that keep together while avoiding a predator."""

from __future__ import annotations

import random

from .agent import SteeringAgent
from .behaviors import Evade, Seek, SteeringBehavior, Wander
from .combined import BlendedSteering, PrioritySteering, WeightedBehavior
from .flocking import Cohesion, Separation, VelocityMatch
from .helpers import ZERO, TargetData, Vector2, distance
from .spatial import CellSpace


class Flock:
    """Agents steered by a blend of flocking behaviours, evading one agent."""

    def __init__(
        self,
        flock_size: int = 50,
        world_size: float = 100.0,
        agent_to_evade: SteeringAgent | None = None,
        trim_world: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self.world_size = world_size
        self.flock_size = flock_size
        self.trim_world = trim_world
        self.use_partitioning = True
        self.neighborhood_radius = 5.0
        self._neighbors: list[SteeringAgent] = []

        self.cell_space = CellSpace(world_size, world_size, 25, 25, flock_size)

        self.separation = Separation(self)
        self.cohesion = Cohesion(self)
        self.velocity_match = VelocityMatch(self)
        self.seek = Seek()
        self.wander = Wander(self._rng)
        self.evade = Evade(15.0)

        self.agent_to_evade = agent_to_evade if agent_to_evade is not None else SteeringAgent()
        self.agent_to_evade.steering_behavior = self.seek
        self.agent_to_evade.max_linear_speed = 20.0
        self.agent_to_evade.body_color = (1.0, 0.0, 0.0, 1.0)

        self.blended_steering = BlendedSteering(
            [
                WeightedBehavior(self.cohesion, 0.2),
                WeightedBehavior(self.separation, 0.1),
                WeightedBehavior(self.velocity_match, 0.6),
                WeightedBehavior(self.seek, 0.2),
                WeightedBehavior(self.wander, 1.0),
            ]
        )
        self.priority_steering = PrioritySteering([self.evade, self.blended_steering])

        self.agents: list[SteeringAgent] = []
        for _ in range(flock_size):
            agent = SteeringAgent()
            agent.auto_orient = True
            agent.max_linear_speed = 10.0
            agent.mass = 1.0
            agent.steering_behavior = self.priority_steering
            agent.position = Vector2(
                self._rng.uniform(0.0, world_size), self._rng.uniform(0.0, world_size)
            )
            self.cell_space.add_agent(agent)
            self.agents.append(agent)
        self._old_positions: list[Vector2] = [a.position for a in self.agents]

    def update(self, dt: float) -> None:
        """Step every agent and the evaded agent, then retarget the evade behaviour."""
        for index, agent in enumerate(self.agents):
            self.register_neighbors(agent)
            agent.update(dt)
            agent.integrate(dt)
            if self.trim_world:
                agent.trim_to_world(self.world_size)
            self.cell_space.agent_position_changed(agent, self._old_positions[index])
            self._old_positions[index] = agent.position

        predator = self.agent_to_evade
        predator.update(dt)
        predator.integrate(dt)
        predator.trim_to_world(self.world_size)

        self.evade.set_target(
            TargetData(
                position=predator.position,
                linear_velocity=predator.linear_velocity,
                angular_velocity=predator.angular_velocity,
            )
        )

    def register_neighbors(self, agent: SteeringAgent) -> None:
        """Find the neighbours of `agent` for the behaviours to use."""
        if self.use_partitioning:
            self.cell_space.register_neighbors(agent, self.neighborhood_radius)
            return
        self._neighbors = [
            other
            for other in self.agents
            if other is not agent
            and distance(other.position, agent.position) < self.neighborhood_radius
        ]

    def neighbors(self) -> list[SteeringAgent]:
        if self.use_partitioning:
            return self.cell_space.neighbors
        return self._neighbors

    def average_neighbor_pos(self) -> Vector2:
        neighbors = self.neighbors()
        if not neighbors:
            return ZERO
        total = ZERO
        for neighbor in neighbors:
            total = total + neighbor.position
        return total / len(neighbors)

    def average_neighbor_velocity(self) -> Vector2:
        neighbors = self.neighbors()
        if not neighbors:
            return ZERO
        total = ZERO
        for neighbor in neighbors:
            total = total + neighbor.linear_velocity
        return total / len(neighbors)

    def set_seek_target(self, target: TargetData) -> None:
        self.seek.set_target(target)

    def weight_of(self, behavior: SteeringBehavior) -> float | None:
        """Blending weight of a behaviour, or None if it is not blended."""
        for entry in self.blended_steering.weighted_behaviors:
            if entry.behavior is behavior:
                return entry.weight
        return None