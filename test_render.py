"""
Tests for the renderers. No gnuplot binary or display is needed.
"""

import subprocess

import numpy as np
import pytest

from logic import GameState, Player, Outcome
from render import (
    RenderConfig, RendererError, NullRenderer, GnuplotRenderer, ImageRenderer,
    build_commands, create_renderer,
)
from render.base import cell_center, win_line_ends

X, O, _ = Player.X, Player.O, None


def won_state() -> GameState:
    state = GameState()
    for index in [0, 3, 1, 4, 2]:
        state.make_move(index)
    return state


# ==================== GEOMETRY ====================

def test_cell_centers_follow_keypad_layout():
    assert cell_center(0) == (0.5, 0.5)
    assert cell_center(2) == (2.5, 0.5)
    assert cell_center(4) == (1.5, 1.5)
    assert cell_center(6) == (0.5, 2.5)


def test_win_line_is_extended_past_end_cells():
    x1, y1, x2, y2 = win_line_ends((0, 1, 2), 0.35)

    assert x1 == pytest.approx(0.15)
    assert x2 == pytest.approx(2.85)
    assert y1 == pytest.approx(0.5)
    assert y2 == pytest.approx(0.5)


# ==================== GNUPLOT COMMANDS ====================

def test_empty_board_commands():
    commands = build_commands([None] * 9)

    assert commands[:2] == ["unset object", "unset arrow"]
    assert commands[-1] == "plot NaN notitle"
    assert sum(c.startswith("set arrow") for c in commands) == 4
    assert not any("circle" in c for c in commands)


def test_symbols_are_drawn():
    board = [X, _, _, _, O, _, _, _, _]
    commands = build_commands(board)

    assert any(c.startswith("set arrow from 0.200,0.200 to 0.800,0.800") for c in commands)
    assert any(c.startswith("set arrow from 0.200,0.800 to 0.800,0.200") for c in commands)
    assert any(c.startswith("set object circle at 1.500,1.500 size 0.300") for c in commands)

    x_strokes = [c for c in commands if RenderConfig.X_COLOR in c]
    assert len(x_strokes) == 2


def test_win_line_is_drawn_only_on_a_win():
    state = won_state()
    commands = build_commands(state.board, state.outcome, state.winning_line)

    win = [c for c in commands if RenderConfig.WIN_COLOR in c]
    assert win == [
        "set arrow from 0.150,0.500 to 2.850,0.500 lw 8 lc rgb 0x00FF00 nohead front"
    ]

    commands = build_commands(state.board, Outcome.NONE, state.winning_line)
    assert not any(RenderConfig.WIN_COLOR in c for c in commands)


# ==================== GNUPLOT PROCESS ====================

class FakeStdin:
    def __init__(self):
        self.chunks = []
        self.closed = False

    def write(self, text):
        self.chunks.append(text)

    def flush(self):
        pass

    def close(self):
        self.closed = True


class FakeProcess:
    def __init__(self, command, stdin=None, text=None):
        self.command = command
        self.stdin = FakeStdin()
        self.waited = False

    def wait(self):
        self.waited = True
        return 0


def test_gnuplot_renderer_pipes_commands(monkeypatch):
    started = []

    def fake_popen(command, **kwargs):
        process = FakeProcess(command, **kwargs)
        started.append(process)
        return process

    monkeypatch.setattr(subprocess, "Popen", fake_popen)

    renderer = GnuplotRenderer()
    state = won_state()
    renderer.draw(state)

    process = started[0]
    assert process.command == ["gnuplot", "-persist"]

    script = "".join(process.stdin.chunks)
    assert script.endswith("plot NaN notitle\n")
    assert "0x00FF00" in script

    renderer.close()
    assert process.stdin.closed
    assert process.waited
    assert not renderer.is_open


def test_gnuplot_missing_raises_renderer_error(monkeypatch):
    def fake_popen(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(subprocess, "Popen", fake_popen)

    with pytest.raises(RendererError):
        GnuplotRenderer().open()


def test_close_without_open_is_harmless():
    GnuplotRenderer().close()


# ==================== IMAGE ====================

def test_image_of_empty_board():
    img = ImageRenderer().render([None] * 9)

    assert img.shape == (RenderConfig.IMAGE_SIZE, RenderConfig.IMAGE_SIZE, 3)
    assert img.dtype == np.uint8
    # Centre of a cell is background, grid line is black
    assert tuple(img[100, 100]) == RenderConfig.IMAGE_BACKGROUND
    assert tuple(img[100, 200]) == RenderConfig.IMAGE_GRID_COLOR


def test_image_symbols_and_win_line():
    renderer = ImageRenderer()

    img = renderer.render([X, _, _, _, O, _, _, _, _])
    # Cell 1 is bottom-left: its X crosses at pixel (100, 500)
    assert tuple(img[500, 100]) == RenderConfig.IMAGE_X_COLOR
    # The O at the centre passes through (300, 240)
    assert tuple(img[240, 300]) == RenderConfig.IMAGE_O_COLOR

    state = won_state()
    img = renderer.render(state.board, state.outcome, state.winning_line)
    assert tuple(img[500, 300]) == RenderConfig.IMAGE_WIN_COLOR


def test_image_renderer_writes_snapshots(tmp_path):
    renderer = ImageRenderer(output_dir=str(tmp_path / "frames"))

    first = renderer.draw(GameState())
    second = renderer.draw(won_state())

    assert first.name == "move_00.png"
    assert second.name == "move_01.png"
    assert first.exists() and second.exists()


# ==================== FACTORY ====================

def test_create_renderer(tmp_path):
    assert isinstance(create_renderer("gnuplot"), GnuplotRenderer)
    assert isinstance(create_renderer("image", str(tmp_path)), ImageRenderer)
    assert isinstance(create_renderer("none"), NullRenderer)

    with pytest.raises(ValueError):
        create_renderer("svg")


def test_null_renderer_keeps_last_state():
    renderer = NullRenderer()
    state = GameState()
    renderer.draw(state)
    state.make_move(4)

    assert renderer.frames == 1
    assert renderer.last_state.board == [None] * 9
