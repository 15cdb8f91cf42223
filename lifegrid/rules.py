"""Rules deciding a cell's next state from its neighbourhood."""

from abc import ABC, abstractmethod


class CellRule(ABC):
    """A rule computing whether a cell lives in the next generation."""

    @abstractmethod
    def next_alive(self, alive: bool, neighbours: int) -> bool:
        """Return whether the cell is alive next generation."""


class StandardRule(CellRule):
    """Conway's rule: birth on 3 neighbours, survival on 2 or 3."""

    def next_alive(self, alive: bool, neighbours: int) -> bool:
        if alive:
            return neighbours in (2, 3)
        return neighbours == 3