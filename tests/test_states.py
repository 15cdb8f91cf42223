import pytest

from lifegrid.states import CellState


def test_alive_state_reports_alive():
    assert CellState.ALIVE.is_alive() is True


def test_dead_state_reports_dead():
    assert CellState.DEAD.is_alive() is False


def test_display_values_match_file_format():
    assert CellState.ALIVE.display_value() == 1
    assert CellState.DEAD.display_value() == 0


@pytest.mark.parametrize("state", list(CellState))
def test_from_alive_round_trip(state):
    assert CellState.from_alive(state.is_alive()) is state


def test_display_value_round_trips_through_enum():
    for state in CellState:
        assert CellState(state.display_value()) is state