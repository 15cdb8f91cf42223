"""Running a simulation loaded from a grid file."""

import time
from pathlib import Path
from typing import Optional, Union

from .console import ConsoleDisplay, Display
from .grid import Grid
from .storage import GridFile

PathLike = Union[str, Path]

STABLE_MESSAGE = "\nLe jeu s'est stabilise a l'iteration {} !"
MAX_REACHED_MESSAGE = "\nNombre maximum d'iterations atteint !"
WINDOW_PIXELS = 1000


class GameOfLife:
    """A game loaded from a file, saving every generation as it runs.

    Raises GridFileError when the source file cannot be read.
    """

    def __init__(
        self,
        path: PathLike,
        max_iterations: int,
        toroidal: bool = False,
        data_dir: PathLike = "Data",
        delay: float = 0.2,
    ) -> None:
        self.path = Path(path)
        self.max_iterations = max_iterations
        self.toroidal = toroidal
        self.data_dir = Path(data_dir)
        self.delay = delay
        self.iteration = 0
        self.grid: Optional[Grid] = None
        self._storage = GridFile(self.path, self.data_dir)
        self.load(self.path)

    def load(self, path: PathLike) -> Grid:
        """Replace the current grid with the one read from ``path``."""
        self.grid = GridFile(path, self.data_dir).read(self.toroidal)
        return self.grid

    def _can_advance(self) -> bool:
        return self.iteration < self.max_iterations and not self.grid.is_stable()

    def _save(self) -> Path:
        return self._storage.write(self.grid, self.iteration, self.toroidal)

    def step(self) -> bool:
        """Advance one generation and save it; return False if the game is over."""
        if not self._can_advance():
            return False
        self.grid.update()
        self.iteration += 1
        self._save()
        return True

    def _pause(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def play_console(self, display: Optional[Display] = None) -> bool:
        """Run the game in the terminal until stable or out of iterations.

        Returns whether the grid ended stable.
        """
        if display is None:
            display = ConsoleDisplay()
        display.show(self.grid)
        self._save()
        while self.step():
            display.show(self.grid)
            self._pause()
        stable = self.grid.is_stable()
        if stable:
            print(STABLE_MESSAGE.format(self.iteration))
        else:
            print(MAX_REACHED_MESSAGE)
        return stable

    def play_graphic(self) -> bool:
        """Run the game in a window until the window is closed.

        Returns whether the grid ended stable.
        """
        from .window import GraphicWindow

        cell_size = WINDOW_PIXELS // self.grid.width
        with GraphicWindow(self.grid.width, self.grid.height, cell_size) as window:
            self._save()
            while window.is_open():
                window.handle_events()
                self.step()
                if window.is_open():
                    window.show(self.grid)
                    window.refresh()
                self._pause()
        stable = self.grid.is_stable()
        if stable:
            print(STABLE_MESSAGE.format(self.iteration))
        elif self.iteration >= self.max_iterations:
            print(MAX_REACHED_MESSAGE)
        return stable