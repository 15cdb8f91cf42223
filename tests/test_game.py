import io

import pygame
import pytest

from lifegrid.console import ConsoleDisplay
from lifegrid.game import GameOfLife
from lifegrid.storage import GridFile, GridFileError


def _write_grid(path, width, height, alive):
    rows = []
    for y in range(height):
        rows.append(" ".join("1" if (x, y) in alive else "0" for x in range(width)))
    path.write_text(f"{height} {width}\n" + "\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def blinker(tmp_path):
    return _write_grid(tmp_path / "blinker.txt", 5, 5, {(2, 1), (2, 2), (2, 3)})


@pytest.fixture
def block(tmp_path):
    return _write_grid(tmp_path / "block.txt", 4, 4, {(1, 1), (2, 1), (1, 2), (2, 2)})


def _game(path, tmp_path, max_iterations=5, toroidal=False):
    return GameOfLife(path, max_iterations, toroidal, data_dir=tmp_path / "Data", delay=0)


def test_load_reads_grid(blinker, tmp_path):
    game = _game(blinker, tmp_path)
    assert game.grid.live_cells() == [(2, 1), (2, 2), (2, 3)]
    assert game.iteration == 0
    assert game.max_iterations == 5


def test_missing_file_raises(tmp_path):
    with pytest.raises(GridFileError):
        _game(tmp_path / "absent.txt", tmp_path)


def test_step_advances_and_saves(blinker, tmp_path):
    game = _game(blinker, tmp_path)
    assert game.step() is True
    assert game.iteration == 1
    assert game.grid.live_cells() == [(1, 2), (2, 2), (3, 2)]
    saved = tmp_path / "Data" / "blinker_Classique_out" / "iteration_1.txt"
    reread = GridFile(saved).read()
    assert reread.live_cells() == game.grid.live_cells()


def test_step_stops_at_max_iterations(blinker, tmp_path):
    game = _game(blinker, tmp_path, max_iterations=2)
    assert [game.step() for _ in range(4)] == [True, True, False, False]
    assert game.iteration == 2


def test_play_console_stable_block(block, tmp_path, capsys):
    stream = io.StringIO()
    game = _game(block, tmp_path)
    assert game.play_console(ConsoleDisplay(stream)) is True
    assert game.iteration == 1
    out_dir = tmp_path / "Data" / "block_Classique_out"
    assert sorted(p.name for p in out_dir.iterdir()) == ["iteration_0.txt", "iteration_1.txt"]
    assert "Le jeu s'est stabilise a l'iteration 1 !" in capsys.readouterr().out
    assert stream.getvalue().count("=== JEU DE LA VIE (Mode Console) ===") == 2


def test_play_console_reaches_max(blinker, tmp_path, capsys):
    game = _game(blinker, tmp_path, max_iterations=3, toroidal=True)
    assert game.play_console(ConsoleDisplay(io.StringIO())) is False
    assert game.iteration == 3
    out_dir = tmp_path / "Data" / "blinker_Torique_out"
    assert len(list(out_dir.iterdir())) == 4
    assert "Nombre maximum d'iterations atteint !" in capsys.readouterr().out


def test_play_console_initial_file_matches_source(blinker, tmp_path):
    game = _game(blinker, tmp_path, max_iterations=1)
    game.play_console(ConsoleDisplay(io.StringIO()))
    saved = tmp_path / "Data" / "blinker_Classique_out" / "iteration_0.txt"
    assert saved.read_text(encoding="utf-8") == blinker.read_text(encoding="utf-8")


def test_play_graphic_runs_until_closed(blinker, tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    calls = {"count": 0}

    def fake_get():
        calls["count"] += 1
        if calls["count"] >= 3:
            return [pygame.event.Event(pygame.QUIT)]
        return []

    monkeypatch.setattr(pygame.event, "get", fake_get)
    game = _game(blinker, tmp_path, max_iterations=10)
    assert game.play_graphic() is False
    assert game.iteration == 3
    out_dir = tmp_path / "Data" / "blinker_Classique_out"
    assert len(list(out_dir.iterdir())) == 4