"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (game state, move validation, AI)
- Render (gnuplot window or OpenCV snapshots)
- The console menu and move input

Run this script to play TicTacToe against a friend or the computer!
"""

import logging
import random
import sys
from typing import Callable, Optional, Tuple

from logic.config import GameConfig
from logic.errors import GameError
from logic.game_state import GameState, Player, PlaceResult
from logic.move_validator import MoveValidator
from logic.ai_player import AIPlayer, Difficulty

from render import RendererError, NullRenderer, create_renderer
from logging_setup import setup_logging

logger = logging.getLogger(__name__)

MODE_1P = 1
MODE_2P = 2

InputFunc = Callable[[str], str]


def read_choice(prompt: str, lo: int, hi: int, input_func: Optional[InputFunc] = None) -> int:
    """
    Ask for a number until one in [lo, hi] is entered.
    End of input picks `lo`.
    """
    input_func = input_func or input

    while True:
        try:
            text = input_func(prompt)
        except EOFError:
            return lo

        try:
            value = int(text.strip())
        except ValueError:
            value = None

        if value is not None and lo <= value <= hi:
            return value

        print(f"Please enter a number between {lo} and {hi}.")


def show_menu(input_func: Optional[InputFunc] = None) -> Tuple[int, Difficulty]:
    """Ask for the game mode and, in 1-player mode, the difficulty."""
    print("=== Tic-Tac-Toe ===")
    print("1) 1 Player (you are X)")
    print("2) 2 Players")
    mode = read_choice("Select mode: ", 1, 2, input_func)

    difficulty = Difficulty(GameConfig.DEFAULT_DIFFICULTY)
    if mode == MODE_1P:
        print("\nSelect difficulty:")
        print("1) Easy (random)")
        print("2) Medium (win/block/random)")
        print("3) Hard (minimax)")
        difficulty = Difficulty(read_choice("Difficulty: ", 1, 3, input_func))
        print("\nYou are X. Enter 1-9 to play.\n")
    else:
        print("\n2-Player mode: X goes first. Enter 1-9 to play.\n")

    return mode, difficulty


class TicTacToeGame:
    """
    Main controller for a console TicTacToe game.

    Game flow:
    1. The current human types a cell (1-9), or 'q' to quit
    2. The move is validated and played
    3. In 1-player mode the AI (O) answers straight away
    4. The board is redrawn after every move
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        mode: int = MODE_2P,
        difficulty: Difficulty = Difficulty.EASY,
        renderer=None,
        rng: Optional[random.Random] = None,
        input_func: Optional[InputFunc] = None
    ):
        """
        Initialize the game.

        Args:
            mode: MODE_1P (human X vs AI O) or MODE_2P.
            difficulty: AI difficulty, fixed for the game.
            renderer: Anything with draw(state) and close(); defaults to NullRenderer.
            rng: Random source for the AI.
            input_func: Reads a line of input, raising EOFError at end of input.
        """
        self.mode = mode
        self.difficulty = difficulty
        self.renderer = renderer or NullRenderer()
        self.input_func = input_func or input

        self.game_state = GameState()
        self.validator = MoveValidator()

        self.human_player = Player.X
        self.ai: Optional[AIPlayer] = None
        if mode == MODE_1P:
            self.ai = AIPlayer(self.human_player.opposite(), difficulty, rng)

        self.quit = False

    def is_ai_turn(self) -> bool:
        return self.ai is not None and self.game_state.current_player == self.ai.player

    def play(self) -> GameState:
        """
        Run the game until it ends or the player quits.

        Returns:
            The final game state.
        """
        logger.info("Starting game: mode=%d difficulty=%s", self.mode, self.difficulty.name)

        self.renderer.draw(self.game_state)

        while not self.game_state.is_game_over and not self.quit:
            if self.is_ai_turn():
                self._ai_move()
                continue

            try:
                text = self.input_func(
                    f"{self.game_state.current_player.value}, enter position (1-9), or 'q' to quit: "
                )
            except EOFError:
                self.quit = True
                break

            if text.strip().lower() == "q":
                self.quit = True
                break

            self._process_human_move(text)

        if self.game_state.is_game_over:
            self._show_game_result()
        else:
            print("\nGame quit.")

        return self.game_state

    def _process_human_move(self, text: str) -> bool:
        """
        Validate and play a typed move.

        Returns:
            True if the move was played.
        """
        try:
            index = self.validator.parse_cell(text)
            self.validator.require_valid(self.game_state, index)
        except GameError as e:
            logger.debug("Rejected input %r: %s", text, e)
            print(e)
            return False

        self._apply_move(index)
        return True

    def _ai_move(self):
        """Let the AI pick and play its move."""
        index = self.ai.get_best_move(self.game_state)
        print(f"\nAI ({self.ai.player.value}) plays {index + 1}")
        self._apply_move(index)

    def _apply_move(self, index: int):
        player = self.game_state.current_player
        result = self.game_state.make_move(index)

        if result != PlaceResult.ACCEPTED:
            # Validated just before, so this is a bug
            raise GameError(f"Move {index} by {player.value} rejected: {result.value}")

        logger.info("%s -> cell %d", player.value, index + 1)
        self.renderer.draw(self.game_state)

        if not self.game_state.is_game_over:
            self.game_state.print_board()

    def _show_game_result(self):
        """Show the final game result."""
        self.game_state.print_board()

        winner = self.game_state.winner
        if winner is not None and self.ai is not None:
            if winner == self.human_player:
                print("Congratulations! You won!")
            else:
                print("Computer wins! Better luck next time!")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe in a gnuplot window")
    parser.add_argument(
        "--mode",
        type=int,
        choices=[MODE_1P, MODE_2P],
        help="1 = play against the computer, 2 = two players (skips the menu)"
    )
    parser.add_argument(
        "--difficulty",
        type=int,
        choices=[d.value for d in Difficulty],
        help="AI difficulty: 1 easy, 2 medium, 3 hard"
    )
    parser.add_argument(
        "--renderer",
        choices=["gnuplot", "image", "none"],
        default=GameConfig.DEFAULT_RENDERER,
        help="Where to draw the board"
    )
    parser.add_argument(
        "--output-dir",
        help="Snapshot directory for --renderer image"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the AI's random choices"
    )
    parser.add_argument(
        "--log-level",
        help="DEBUG, INFO, WARNING, ... (default: $LOG_LEVEL or WARNING)"
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.mode is None:
        mode, difficulty = show_menu()
    else:
        mode = args.mode
        difficulty = Difficulty(args.difficulty or GameConfig.DEFAULT_DIFFICULTY)

    renderer = create_renderer(args.renderer, args.output_dir)
    rng = random.Random(args.seed)

    try:
        game = TicTacToeGame(mode=mode, difficulty=difficulty, renderer=renderer, rng=rng)
        game.play()
    except RendererError as e:
        print(f"ERROR: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        renderer.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
