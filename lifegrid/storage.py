"""Reading grids from text files and saving each generation to disk."""

from pathlib import Path
from typing import Iterator, Optional, Union

from .grid import Grid
from .states import CellState

PathLike = Union[str, Path]


class GridFileError(Exception):
    """Raised when a grid file cannot be opened or its header is unreadable."""


def _int_tokens(text: str) -> Iterator[int]:
    """Yield integers from whitespace-separated text, stopping at the first bad token."""
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


class GridFile:
    """A grid source file and the directory where its generations are saved.

    The file starts with the height and the width, followed by one value per
    cell, row by row: 1 for a live cell, anything else for a dead one.
    """

    def __init__(self, path: PathLike, data_dir: PathLike = "Data") -> None:
        self.path = Path(path)
        self.data_dir = Path(data_dir)

    def read(self, toroidal: bool = False) -> Grid:
        """Load the file into a new grid."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise GridFileError(f"cannot open {self.path}: {exc}") from exc

        values = _int_tokens(text)
        height = next(values, None)
        width = next(values, None)
        if height is None or width is None:
            raise GridFileError(f"{self.path}: missing or invalid grid size")
        if height < 0 or width < 0:
            raise GridFileError(f"{self.path}: invalid grid size {height} {width}")

        grid = Grid(width, height, toroidal)
        for y in range(height):
            for x in range(width):
                # Missing or unreadable values leave the cell dead.
                value = next(values, 0)
                grid.cell(x, y).state = CellState.from_alive(value == 1)
        return grid

    def output_dir(self, toroidal: bool = False) -> Path:
        """Return the directory that holds the saved generations."""
        mode = "Torique" if toroidal else "Classique"
        return self.data_dir / f"{self.path.stem}_{mode}_out"

    def write(self, grid: Grid, iteration: int, toroidal: bool = False) -> Path:
        """Save the grid as generation ``iteration`` and return the file written."""
        directory = self.output_dir(toroidal)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / f"iteration_{iteration}.txt"

        lines = [f"{grid.height} {grid.width}"]
        for y in range(grid.height):
            lines.append(" ".join(str(grid.cell(x, y).display_value()) for x in range(grid.width)))
        target.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return target

    def __repr__(self) -> str:
        return f"GridFile({str(self.path)!r}, data_dir={str(self.data_dir)!r})"


def read_grid(path: PathLike, toroidal: bool = False, data_dir: Optional[PathLike] = None) -> Grid:
    """Convenience wrapper reading a grid file."""
    return GridFile(path, data_dir if data_dir is not None else "Data").read(toroidal)