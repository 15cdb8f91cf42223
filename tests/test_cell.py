from lifegrid.cell import Cell
from lifegrid.rules import CellRule
from lifegrid.states import CellState


def test_live_cell_with_no_neighbours_dies():
    cell = Cell(CellState.ALIVE)
    cell.compute_next(0)
    assert cell.commit() is True
    assert cell.alive() is False


def test_dead_cell_with_three_neighbours_is_born():
    cell = Cell(CellState.DEAD)
    cell.compute_next(3)
    assert cell.commit() is True
    assert cell.alive() is True


def test_live_cell_with_two_neighbours_survives():
    cell = Cell(CellState.ALIVE)
    cell.compute_next(2)
    assert cell.commit() is False
    assert cell.alive() is True


def test_commit_without_pending_state_changes_nothing():
    cell = Cell(CellState.ALIVE)
    assert cell.commit() is False
    assert cell.alive() is True


def test_commit_consumes_pending_state():
    cell = Cell(CellState.DEAD)
    cell.compute_next(3)
    cell.commit()
    assert cell.commit() is False
    assert cell.alive() is True


def test_display_value_follows_state():
    cell = Cell(CellState.ALIVE)
    assert cell.display_value() == 1
    cell.state = CellState.DEAD
    assert cell.display_value() == 0


def test_default_cell_is_dead():
    assert Cell().alive() is False


def test_custom_rule_is_used():
    class Never(CellRule):
        def next_alive(self, alive, neighbours):
            return False

    cell = Cell(CellState.DEAD, Never())
    cell.compute_next(3)
    assert cell.commit() is False
    assert cell.alive() is False