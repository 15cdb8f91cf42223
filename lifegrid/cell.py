"""A single cell with a current state and a pending next state."""

from typing import Optional

from .rules import CellRule, StandardRule
from .states import CellState


class Cell:
    """A cell that computes its next state and commits it in a second step."""

    def __init__(self, state: CellState = CellState.DEAD, rule: Optional[CellRule] = None) -> None:
        self.state = state
        self.rule = rule if rule is not None else StandardRule()
        self._next: Optional[CellState] = None

    def alive(self) -> bool:
        """Return whether the cell is currently alive."""
        return self.state.is_alive()

    def compute_next(self, neighbours: int) -> None:
        """Work out the next state from the number of live neighbours."""
        self._next = CellState.from_alive(self.rule.next_alive(self.alive(), neighbours))

    def commit(self) -> bool:
        """Apply the pending next state; return True if liveness changed."""
        if self._next is None:
            return False
        changed = self._next.is_alive() != self.state.is_alive()
        self.state = self._next
        self._next = None
        return changed

    def display_value(self) -> int:
        """Return the value used to display the cell."""
        return self.state.display_value()

    def __repr__(self) -> str:
        return f"Cell({self.state!r})"