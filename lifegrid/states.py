"""Life states a cell can be in."""

from enum import Enum


class CellState(Enum):
    """Whether a cell is dead or alive, with the value used to display it."""

    DEAD = 0
    ALIVE = 1

    def is_alive(self) -> bool:
        """Return True for a living cell."""
        return self is CellState.ALIVE

    def display_value(self) -> int:
        """Return the symbol value written for this state: 1 alive, 0 dead."""
        return self.value

    @classmethod
    def from_alive(cls, alive: bool) -> "CellState":
        """Return the state matching a boolean liveness flag."""
        return cls.ALIVE if alive else cls.DEAD