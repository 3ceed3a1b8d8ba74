"""Partitioning of a rectangular space into cells to speed up neighbour queries."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .agent import BaseAgent
from .helpers import ZERO, Vector2, distance_squared


@dataclass
class Rect:
    """An axis-aligned rectangle given by its bottom-left corner and size."""

    bottom_left: Vector2 = ZERO
    width: float = 0.0
    height: float = 0.0


def is_overlapping(a: Rect, b: Rect) -> bool:
    """True when the rectangles overlap; touching edges count as overlapping."""
    if (
        a.bottom_left.x + a.width < b.bottom_left.x
        or b.bottom_left.x + b.width < a.bottom_left.x
    ):
        return False
    if (
        a.bottom_left.y > b.bottom_left.y + b.height
        or b.bottom_left.y > a.bottom_left.y + a.height
    ):
        return False
    return True


class Cell:
    """One cell of the space and the agents currently inside it."""

    def __init__(self, left: float, bottom: float, width: float, height: float) -> None:
        self.bounding_box = Rect(Vector2(left, bottom), width, height)
        self.agents: list[BaseAgent] = []

    def rect_points(self) -> list[Vector2]:
        """Corners clockwise from the bottom left."""
        box = self.bounding_box
        left, bottom = box.bottom_left.x, box.bottom_left.y
        return [
            Vector2(left, bottom),
            Vector2(left, bottom + box.height),
            Vector2(left + box.width, bottom + box.height),
            Vector2(left + box.width, bottom),
        ]


class CellSpace:
    """A grid of cells covering [0, width] x [0, height], stored row by row."""

    def __init__(
        self, width: float, height: float, rows: int, cols: int, max_entities: int
    ) -> None:
        self.space_width = width
        self.space_height = height
        self.rows = rows
        self.cols = cols
        self.max_entities = max_entities
        self.cell_width = width / cols
        self.cell_height = height / rows
        self.cells: list[Cell] = [
            Cell(col * self.cell_width, row * self.cell_height, self.cell_width, self.cell_height)
            for row in range(rows)
            for col in range(cols)
        ]
        self.neighbors: list[BaseAgent] = []
        self.neighborhood_radius = 0.0

    def add_agent(self, agent: BaseAgent) -> None:
        self.cells[self.position_to_index(agent.position)].agents.append(agent)

    def agent_position_changed(self, agent: BaseAgent, old_pos: Vector2) -> None:
        """Move the agent to the cell of its current position if it changed cell."""
        new_index = self.position_to_index(agent.position)
        old_index = self.position_to_index(old_pos)
        if new_index == old_index:
            return
        old_cell = self.cells[old_index]
        old_cell.agents = [a for a in old_cell.agents if a is not agent]
        self.cells[new_index].agents.append(agent)

    def register_neighbors(self, agent: BaseAgent, neighborhood_radius: float) -> None:
        """Collect every agent (the agent itself included) closer than the radius."""
        pos = agent.position
        self.neighbors = []
        self.neighborhood_radius = neighborhood_radius
        radius_sq = neighborhood_radius * neighborhood_radius

        min_col = max(0, int((pos.x - neighborhood_radius) / self.cell_width))
        max_col = min(self.cols - 1, int((pos.x + neighborhood_radius) / self.cell_width))
        min_row = max(0, int((pos.y - neighborhood_radius) / self.cell_height))
        max_row = min(self.rows - 1, int((pos.y + neighborhood_radius) / self.cell_height))

        half_diagonal = 0.5 * math.sqrt(
            self.cell_width * self.cell_width + self.cell_height * self.cell_height
        )
        max_cell_dist = neighborhood_radius + half_diagonal

        for row in range(min_row, max_row + 1):
            for col in range(min_col, max_col + 1):
                center = Vector2((col + 0.5) * self.cell_width, (row + 0.5) * self.cell_height)
                if distance_squared(pos, center) > max_cell_dist * max_cell_dist:
                    continue
                cell = self.cells[row * self.cols + col]
                self.neighbors.extend(
                    other
                    for other in cell.agents
                    if distance_squared(other.position, pos) < radius_sq
                )

    def empty_cells(self) -> None:
        for cell in self.cells:
            cell.agents.clear()

    def position_to_index(self, pos: Vector2) -> int:
        """Index of the cell holding `pos`; positions outside are clamped in."""
        y = min(max(pos.y, 0.0), self.space_height - 0.01)
        x = min(max(pos.x, 0.0), self.space_width - 0.01)
        row = int(y / self.cell_height)
        col = int(x / self.cell_width)
        return row * self.cols + col

    def overlapping_cells(self, agent: BaseAgent) -> list[Cell]:
        """Cells touched by the square around the agent of the last neighbourhood radius."""
        r = self.neighborhood_radius
        box = Rect(agent.position - Vector2(r, r), 2.0 * r, 2.0 * r)
        return [cell for cell in self.cells if is_overlapping(cell.bounding_box, box)]