"""
Tests for the console game loop and command line.
"""

import pytest

import main
from logic import Difficulty, Player, Outcome
from render import NullRenderer, RendererError


def scripted(*lines):
    """Input function that replays lines, then hits end of input."""
    remaining = list(lines)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


# ==================== MENU ====================

def test_read_choice_reprompts(capsys):
    value = main.read_choice("> ", 1, 3, scripted("x", "7", "2"))

    assert value == 2
    assert capsys.readouterr().out.count("Please enter a number between 1 and 3.") == 2


def test_read_choice_end_of_input_picks_lowest():
    assert main.read_choice("> ", 1, 2, scripted()) == 1


def test_show_menu_one_player():
    mode, difficulty = main.show_menu(scripted("1", "3"))

    assert mode == main.MODE_1P
    assert difficulty == Difficulty.HARD


def test_show_menu_two_players():
    mode, _ = main.show_menu(scripted("2"))
    assert mode == main.MODE_2P


# ==================== TWO PLAYERS ====================

def test_two_player_win():
    renderer = NullRenderer()
    game = main.TicTacToeGame(
        mode=main.MODE_2P,
        renderer=renderer,
        input_func=scripted("1", "4", "2", "5", "3")
    )

    state = game.play()

    assert state.outcome == Outcome.X
    assert state.winning_line == (0, 1, 2)
    # Initial frame plus one per move
    assert renderer.frames == 6


def test_bad_input_is_rejected_without_changes(capsys):
    game = main.TicTacToeGame(
        mode=main.MODE_2P,
        input_func=scripted("0", "abc", "5", "5", "q")
    )

    state = game.play()
    out = capsys.readouterr().out

    assert out.count("Please enter 1-9 (or q to quit).") == 2
    assert "Cell already filled. Try another." in out
    assert state.board.count(None) == 8
    assert state.current_player == Player.O
    assert game.quit
    assert "Game quit." in out


def test_draw_is_announced(capsys):
    game = main.TicTacToeGame(
        mode=main.MODE_2P,
        input_func=scripted("1", "2", "3", "5", "4", "6", "8", "7", "9")
    )

    state = game.play()

    assert state.outcome == Outcome.DRAW
    assert "Draw!" in capsys.readouterr().out


# ==================== ONE PLAYER ====================

def test_hard_ai_is_never_beaten_by_first_free_cell():
    game = main.TicTacToeGame(mode=main.MODE_1P, difficulty=Difficulty.HARD)
    game.input_func = lambda prompt: str(game.game_state.get_empty_cells()[0] + 1)

    state = game.play()

    assert state.is_game_over
    assert state.winner != Player.X


def test_ai_blocks_human(capsys):
    game = main.TicTacToeGame(
        mode=main.MODE_1P,
        difficulty=Difficulty.HARD,
        input_func=scripted("5", "6")
    )

    game.play()
    out = capsys.readouterr().out

    # O answers the centre with cell 1, then has to stop 4-5-6
    assert game.game_state.board[0] == Player.O
    assert game.game_state.board[3] == Player.O
    assert "AI (O) plays 1" in out
    assert "AI (O) plays 4" in out


# ==================== COMMAND LINE ====================

def test_main_runs_headless(monkeypatch):
    monkeypatch.setattr("builtins.input", scripted("1", "4", "2", "5", "3"))

    assert main.main(["--mode", "2", "--renderer", "none", "--log-level", "ERROR"]) == 0


def test_main_reports_renderer_failure(monkeypatch, capsys):
    class BrokenRenderer(NullRenderer):
        def draw(self, game_state):
            raise RendererError("Could not open gnuplot")

    monkeypatch.setattr(main, "create_renderer", lambda name, output_dir=None: BrokenRenderer())

    assert main.main(["--mode", "1", "--difficulty", "3"]) == 1
    assert "ERROR: Could not open gnuplot" in capsys.readouterr().out


def test_main_rejects_unknown_difficulty():
    with pytest.raises(SystemExit):
        main.main(["--mode", "1", "--difficulty", "4"])
