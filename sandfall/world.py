"""The sand grid: cell creation, stepping and mapping pixels to grid cells."""

from __future__ import annotations

import math
from typing import List, Optional, Set, Tuple

from sandfall.cell import Cell, CellManager, GridPos, Vertex

PixelPos = Tuple[float, float]


class World:
    """A grid of cells that advances one tick per :meth:`step`."""

    def __init__(self, width: int = 500, height: int = 500, window_height: float = 800) -> None:
        self.width = width
        self.height = height
        self.grid: List[List[Optional[Cell]]] = [[None] * width for _ in range(height)]
        self.next_grid: List[List[Optional[Cell]]] = [[None] * width for _ in range(height)]
        self.vertices: List[Vertex] = []
        self.cells: List[Cell] = []
        self.manager = CellManager(self.grid, self.next_grid, self.vertices)
        self.manager.cell_size = float(window_height) / float(height)

    @property
    def cell_size(self) -> float:
        return self.manager.cell_size

    def step(self) -> None:
        """Advance every cell by one tick and commit the moves to the grid."""
        for cell in self.cells:
            cell.step()

        for cell in self.cells:
            x, y = cell.grid_pos
            last_x, last_y = cell.last_grid_pos
            self.grid[last_y][last_x] = None
            self.grid[y][x] = self.next_grid[y][x]
            self.next_grid[y][x] = None

    def grid_position(self, pixel_pos: PixelPos) -> GridPos:
        """Return the grid coordinates under a pixel position."""
        size = self.cell_size
        px, py = pixel_pos
        return (
            int((px - math.fmod(px, size)) / size),
            int((py - math.fmod(py, size)) / size),
        )

    def grid_positions_in_radius(self, pixel_pos: PixelPos, radius: int) -> List[GridPos]:
        """Return grid coordinates within ``radius`` cells of the one under ``pixel_pos``."""
        center_x, center_y = self.grid_position(pixel_pos)
        return [
            (x, y)
            for x in range(center_x - radius, center_x + radius + 1)
            for y in range(center_y - radius, center_y + radius + 1)
            if (x - center_x) ** 2 + (y - center_y) ** 2 <= radius * radius
        ]

    def _in_bounds(self, pos: GridPos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def _try_create(self, pos: GridPos) -> Optional[Cell]:
        if not self._in_bounds(pos):
            return None
        x, y = pos
        if self.grid[y][x] is not None:
            return None
        size = self.cell_size
        return self._create_cell(pos, (float(x * size), float(y * size)))

    def _create_cell(self, grid_pos: GridPos, cell_position: PixelPos) -> Cell:
        x, y = grid_pos
        cell = Cell(self.manager, cell_position, grid_pos, "sand")
        self.grid[y][x] = cell
        self.cells.append(cell)
        return cell

    def create_cell_from_click(self, pixel_pos: PixelPos) -> Optional[Cell]:
        """Create a sand cell under ``pixel_pos`` if it is inside the grid and empty."""
        return self._try_create(self.grid_position(pixel_pos))

    def create_cell_circle_from_click(self, pixel_pos: PixelPos, radius: int) -> List[Cell]:
        """Fill the empty, in-bounds places of a disc around ``pixel_pos`` with sand."""
        created = (self._try_create(pos) for pos in self.grid_positions_in_radius(pixel_pos, radius))
        return [cell for cell in created if cell is not None]

    def occupied(self) -> Set[GridPos]:
        """Return the grid coordinates that currently hold a cell."""
        return {
            (x, y)
            for y, row in enumerate(self.grid)
            for x, cell in enumerate(row)
            if cell is not None
        }