"""Conway's Game of Life on grids read from text files, shown in a terminal or a pygame window."""

__version__ = "1.0.0"