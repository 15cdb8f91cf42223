"""Graphical display of a grid in a window."""

import pygame

from .console import Display
from .grid import Grid

WINDOW_TITLE = "Jeu de la Vie"
FRAME_RATE = 60
BACKGROUND = (255, 255, 255)
CELL_COLOUR = (0, 0, 0)


class GraphicWindow(Display):
    """A window drawing live cells as black squares on a white background."""

    def __init__(self, grid_width: int, grid_height: int, cell_size: int) -> None:
        self.cell_size = cell_size
        pygame.display.init()
        self.surface = pygame.display.set_mode((grid_width * cell_size, grid_height * cell_size))
        pygame.display.set_caption(WINDOW_TITLE)
        self._clock = pygame.time.Clock()
        self._open = True

    def show(self, grid: Grid) -> None:
        """Draw the live cells of the grid on the window surface."""
        if not self._open:
            raise RuntimeError("window is closed")
        self.surface.fill(BACKGROUND)
        side = max(self.cell_size - 1, 0)
        for x, y in grid.live_cells():
            rect = pygame.Rect(x * self.cell_size, y * self.cell_size, side, side)
            pygame.draw.rect(self.surface, CELL_COLOUR, rect)

    def refresh(self) -> None:
        """Present what was drawn, limited to the frame rate."""
        if not self._open:
            return
        pygame.display.flip()
        self._clock.tick(FRAME_RATE)

    def handle_events(self) -> None:
        """Process pending events, closing the window when asked to."""
        if not self._open:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return

    def is_open(self) -> bool:
        """Return whether the window is still open."""
        return self._open

    def close(self) -> None:
        """Close the window if it is open."""
        if self._open:
            self._open = False
            pygame.display.quit()

    def __enter__(self) -> "GraphicWindow":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()