# lifegrid

Conway's Game of Life, played on a grid read from a plain text file. Each
generation is shown either in the terminal or in a graphical window (drawn
with pygame), and every generation is also written to disk so a run can be
examined afterwards.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
lifegrid path/to/grid.txt
```

The command prints a banner, then asks for the following, in this order:

1. the grid file, if no path was given on the command line or the given path
   does not exist;
2. the maximum number of iterations, which must be a positive integer;
3. whether to use toroidal mode (`o`/`n`). In toroidal mode, cells on one
   edge have the cells on the opposite edge as neighbours;
4. the display mode: `1` for the console, `2` for a graphical window.

The simulation stops when the maximum number of iterations is reached, or
sooner if no cell changed during the last generation. There is a pause of
0.2 seconds between generations. In window mode, the window stays open until
you close it; the window is 1000 pixels wide divided by the grid width per
cell.

The command exits with status 1 if the input ends before all questions are
answered, or if the grid file cannot be read or has no valid size header.

## Grid file format

The file starts with the height and then the width. After them come
`height` rows of `width` values, separated by whitespace. `1` is a live
cell; any other number is a dead cell. If values are missing, or reading
stops at a token that is not an integer, the remaining cells are dead.

```
5 5
0 0 0 0 0
0 0 1 0 0
0 0 1 0 0
0 0 1 0 0
0 0 0 0 0
```

## Output

Each generation, starting with the initial one (iteration 0), is saved in the
same format, relative to the current directory, under

```
Data/<file name without extension>_<Torique|Classique>_out/iteration_<n>.txt
```

## Rules

The standard rules apply:

- a dead cell with exactly three live neighbours becomes alive;
- a live cell with two or three live neighbours stays alive;
- every other cell is dead in the next generation.

Outside toroidal mode, positions beyond the edge count as dead.

## Using it as a library

```python
from lifegrid.grid import Grid

grid = Grid(5, 5, False)
grid.set_pattern([(2, 1), (2, 2), (2, 3)])
grid.update()
print(sorted(grid.live_cells()))   # [(1, 2), (2, 2), (3, 2)]
print(grid.is_stable())            # False
```

- `lifegrid.grid.Grid` holds the cells. `cell(x, y)` returns a `Cell` or
  `None` outside the grid, `count_neighbours(x, y)` counts live neighbours,
  `update()` advances one generation and `is_stable()` tells whether that
  generation changed nothing. `set_pattern()` raises `IndexError` for a
  position outside the grid.
- `lifegrid.cell.Cell` and `lifegrid.states.CellState` (`DEAD`, `ALIVE`)
  model a single cell; `lifegrid.rules.StandardRule` is the rule cells use
  by default, and `lifegrid.rules.CellRule` is the base class for other
  rules.
- `lifegrid.storage.GridFile(path, data_dir="Data")` reads a grid with
  `read(toroidal)` and saves a generation with
  `write(grid, iteration, toroidal)`, which returns the path written. Errors
  reading the file raise `lifegrid.storage.GridFileError`.
- `lifegrid.game.GameOfLife(path, max_iterations, toroidal=False,
  data_dir="Data", delay=0.2)` runs a whole simulation: `step()` advances and
  saves one generation, `play_console()` runs it in the terminal and
  `play_graphic()` in a window. Both return whether the grid ended stable.
- `lifegrid.console.render_grid(grid)` returns the text used to draw a grid
  in the terminal; `lifegrid.console.ConsoleDisplay` writes it to a stream
  after clearing the screen.
- `lifegrid.window.GraphicWindow` draws a grid in a pygame window and can be
  used as a context manager.