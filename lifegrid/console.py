"""Text display of a grid in a terminal."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .grid import Grid

CLEAR_SCREEN = "\033[2J\033[1;1H"
ALIVE_CELL = "██"
DEAD_CELL = "  "


class Display(ABC):
    """Something that can show a grid."""

    @abstractmethod
    def show(self, grid: Grid) -> None:
        """Show the grid."""


def render_grid(grid: Grid) -> str:
    """Return the text picture of the grid with its header."""
    lines = [
        "=== JEU DE LA VIE (Mode Console) ===",
        f"Largeur: {grid.width} | Hauteur: {grid.height}",
        "------------------------------------",
    ]
    for y in range(grid.height):
        lines.append(
            "".join(
                ALIVE_CELL if grid.cell(x, y).display_value() == 1 else DEAD_CELL
                for x in range(grid.width)
            )
        )
    return "\n".join(lines) + "\n"


class ConsoleDisplay(Display):
    """Clears the terminal and draws the grid with block characters."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def show(self, grid: Grid) -> None:
        self.stream.write(CLEAR_SCREEN + render_grid(grid))
        self.stream.flush()