"""Falling-sand cells and the shared state they act on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from sandfall.rng import random_int

GridPos = Tuple[int, int]
Point = Tuple[float, float]
Color = Tuple[int, int, int, int]
Grid = List[List[Optional["Cell"]]]

SAND_COLOR: Color = (252, 191, 98, 255)
DEFAULT_COLOR: Color = (0, 0, 0, 255)


@dataclass
class Vertex:
    """A coloured corner of a drawn triangle."""

    position: Point = (0.0, 0.0)
    color: Color = DEFAULT_COLOR


@dataclass
class CellManager:
    """State shared by every cell: both grids, the vertex list and sizes."""

    grid: Grid
    next_grid: Grid
    vertices: List[Vertex] = field(default_factory=list)
    cell_size: float = 10.0
    cell_color_variance: int = 10


class Cell:
    """One grain that falls through the grid and draws itself as two triangles."""

    def __init__(
        self,
        manager: CellManager,
        cell_position: Point,
        grid_pos: GridPos,
        kind: str = "sand",
    ) -> None:
        self.manager = manager
        self.cell_position: Point = cell_position
        self.grid_pos: GridPos = grid_pos
        self.last_grid_pos: GridPos = grid_pos
        self.kind = kind
        self.falling = True
        self.cell_size = manager.cell_size
        self.vertices_index = len(manager.vertices)

        color = self._initial_color()
        manager.vertices.extend(
            Vertex(position, color) for position in self._corner_positions()
        )

    def _initial_color(self) -> Color:
        if self.kind != "sand":
            return DEFAULT_COLOR
        variance = self.manager.cell_color_variance
        r, g, b, a = SAND_COLOR
        # Channels are 8-bit, so subtraction wraps around.
        return (
            (r - random_int(variance)) % 256,
            (g - random_int(variance)) % 256,
            (b - random_int(variance)) % 256,
            a,
        )

    def _corner_positions(self) -> List[Point]:
        x, y = self.cell_position
        size = self.cell_size
        top_left = (x, y)
        top_right = (x + size, y)
        bottom_left = (x, y + size)
        bottom_right = (x + size, y + size)
        return [top_left, top_right, bottom_left, bottom_left, top_right, bottom_right]

    def _sync_vertices(self) -> None:
        start = self.vertices_index
        vertices = self.manager.vertices[start:start + 6]
        for vertex, position in zip(vertices, self._corner_positions()):
            vertex.position = position

    def move_to(self, new_grid_pos: GridPos) -> None:
        """Place this cell at ``new_grid_pos`` in the next grid and move its vertices."""
        x, y = self.grid_pos
        new_x, new_y = new_grid_pos
        self.manager.next_grid[new_y][new_x] = self.manager.grid[y][x]
        self.last_grid_pos = self.grid_pos
        self.grid_pos = (new_x, new_y)
        self.cell_position = (
            float(new_x * self.cell_size),
            float(new_y * self.cell_size),
        )
        self._sync_vertices()

    def move_by(self, x_change: int, y_change: int) -> None:
        """Move this cell by the given offset."""
        x, y = self.grid_pos
        self.move_to((x + x_change, y + y_change))

    def step(self) -> None:
        """Advance this cell by one tick, writing its new place into the next grid."""
        grid = self.manager.grid
        next_grid = self.manager.next_grid
        x, y = self.grid_pos
        height = len(grid)
        width = len(grid[y])

        stay_still = False
        if y < height - 1:
            below = grid[y + 1][x]
            if below is None:
                if next_grid[y + 1][x] is None:
                    self.move_by(0, 1)
                    self.falling = True
                else:
                    stay_still = True
                    self.falling = False
            elif below.falling:
                stay_still = True
            elif x > 0 and grid[y + 1][x - 1] is None and next_grid[y + 1][x - 1] is None:
                self.move_by(-1, 1)
                self.falling = True
            elif (
                x < width - 1
                and grid[y + 1][x + 1] is None
                and next_grid[y + 1][x + 1] is None
            ):
                self.move_by(1, 1)
                self.falling = True
            else:
                stay_still = True
                self.falling = False
        else:
            stay_still = True
            self.falling = False

        if stay_still:
            self.last_grid_pos = self.grid_pos
            next_grid[y][x] = grid[y][x]