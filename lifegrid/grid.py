"""A rectangular grid of cells, optionally wrapping at the edges."""

from typing import Iterable, List, Optional, Tuple

from .cell import Cell
from .states import CellState

_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class Grid:
    """A grid of cells stepping generation by generation."""

    def __init__(self, width: int, height: int, toroidal: bool = False) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid grid size {width}x{height}")
        self.width = width
        self.height = height
        self.toroidal = toroidal
        self._rows = [[Cell(CellState.DEAD) for _ in range(width)] for _ in range(height)]
        self._stable = False

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or None outside the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._rows[y][x]
        return None

    def _resolve(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        if self.toroidal:
            return x % self.width, y % self.height
        if 0 <= x < self.width and 0 <= y < self.height:
            return x, y
        return None

    def count_neighbours(self, x: int, y: int) -> int:
        """Count the live neighbours of the cell at (x, y)."""
        count = 0
        for dx, dy in _OFFSETS:
            position = self._resolve(x + dx, y + dy)
            if position is not None:
                nx, ny = position
                if self._rows[ny][nx].alive():
                    count += 1
        return count

    def update(self) -> None:
        """Advance every cell by one generation and record stability."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                cell.compute_next(self.count_neighbours(x, y))
        changed = False
        for row in self._rows:
            for cell in row:
                if cell.commit():
                    changed = True
        self._stable = not changed

    def is_stable(self) -> bool:
        """Return True if the last update changed no cell."""
        return self._stable

    def live_cells(self) -> List[Tuple[int, int]]:
        """Return the (x, y) positions of live cells, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self._rows)
            for x, cell in enumerate(row)
            if cell.alive()
        ]

    def set_pattern(self, alive: Iterable[Tuple[int, int]]) -> None:
        """Kill every cell, then bring the given positions to life."""
        positions = list(alive)
        for x, y in positions:
            if self.cell(x, y) is None:
                raise IndexError(f"position ({x}, {y}) is outside the grid")
        for row in self._rows:
            for cell in row:
                cell.state = CellState.DEAD
        for x, y in positions:
            self._rows[y][x].state = CellState.ALIVE