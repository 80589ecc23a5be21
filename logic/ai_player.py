"""
AI player for TicTacToe.
Picks a move at one of three difficulty levels; the hardest uses Minimax.
"""

import logging
import random
from enum import Enum
from typing import Dict, Optional, Tuple

from .config import GameConfig
from .errors import PreconditionViolated
from .game_state import Board, GameState, Player, Outcome
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Win, else block, else random
    HARD = 3      # Win, else block, else full minimax


class AIPlayer:
    """
    An AI that plays TicTacToe.

    On HARD it never loses: it takes a win if there is one, blocks the
    opponent's immediate win, and otherwise searches the whole remaining
    game tree. The block check only looks one move ahead, so MEDIUM can
    still be beaten with a fork.

    All lookahead works on the live board by placing a symbol and taking
    it back again, so the board is unchanged when a method returns.
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which symbol the AI plays (default: O)
            difficulty: How hard the AI tries
            rng: Random source for EASY/MEDIUM; pass a seeded one for repeatable games
        """
        self.player = player
        self.opponent = player.opposite()
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0
        self._cache: Dict[Tuple[Tuple[Optional[Player], ...], Player], int] = {}

    def get_best_move(self, game_state: GameState) -> int:
        """
        Choose the cell to play.

        Args:
            game_state: Current game state; the board must have an empty cell.

        Returns:
            Index (0-8) of an empty cell.

        Raises:
            PreconditionViolated: if the board is full.
        """
        board = game_state.board

        if not any(cell is None for cell in board):
            raise PreconditionViolated("AI asked to move on a full board")

        if game_state.current_player != self.player:
            logger.warning("AI (%s) asked to move on %s's turn",
                           self.player.value, game_state.current_player.value)

        if self.difficulty == Difficulty.EASY:
            move = self._random_move(board)
        elif self.difficulty == Difficulty.MEDIUM:
            move = self._win_or_block(board)
            if move is None:
                move = self._random_move(board)
        else:
            move = self._win_or_block(board)
            if move is None:
                move = self._best_minimax_move(board)

        logger.debug("AI (%s, %s) plays %d",
                     self.player.value, self.difficulty.name, move)
        return move

    def _win_or_block(self, board: Board) -> Optional[int]:
        """Our immediate win if there is one, else the cell that stops theirs."""
        move = self.find_winning_move(board, self.player)
        if move is not None:
            return move
        return self.find_winning_move(board, self.opponent)

    def find_winning_move(self, board: Board, who: Player) -> Optional[int]:
        """
        First empty cell where `who` would win straight away.

        Each candidate is tried on the board and taken back before the
        next one.
        """
        for i in range(GameConfig.NUM_CELLS):
            if board[i] is not None:
                continue

            board[i] = who
            winner = self.win_checker.check_winner(board)
            board[i] = None

            if winner == who:
                return i

        return None

    def _random_move(self, board: Board) -> int:
        """Any empty cell, uniformly at random."""
        empty = [i for i, cell in enumerate(board) if cell is None]
        return self.rng.choice(empty)

    def _best_minimax_move(self, board: Board) -> int:
        """
        Try every empty cell as our move and keep the best minimax score.
        Ties go to the lowest cell index.
        """
        self.moves_evaluated = 0
        self._cache = {}

        best_score = None
        best_move = None

        for i in range(GameConfig.NUM_CELLS):
            if board[i] is not None:
                continue

            board[i] = self.player
            score = self._minimax(board, self.opponent)
            board[i] = None

            if best_score is None or score > best_score:
                best_score = score
                best_move = i

        logger.debug("AI evaluated %d positions. Best move: %s (score: %s)",
                     self.moves_evaluated, best_move, best_score)

        return best_move

    def score_position(self, board: Board, to_move: Player) -> int:
        """
        Minimax value of a board from this AI's point of view.

        Args:
            board: The board to score; left unchanged.
            to_move: Whose move it is on that board.

        Returns:
            WIN_SCORE, LOSS_SCORE or DRAW_SCORE under perfect play.
        """
        self.moves_evaluated = 0
        self._cache = {}
        return self._minimax(board, to_move)

    def _minimax(self, board: Board, to_move: Player) -> int:
        """
        Plain minimax to the end of the game.

        We maximize on our own moves and the opponent minimizes on theirs.
        Positions already scored in this search come from the cache.
        """
        key = (tuple(board), to_move)
        if key in self._cache:
            return self._cache[key]

        self.moves_evaluated += 1

        outcome, _ = self.win_checker.evaluate(board)

        if outcome == Outcome.for_player(self.player):
            score = GameConfig.WIN_SCORE
        elif outcome == Outcome.for_player(self.opponent):
            score = GameConfig.LOSS_SCORE
        elif outcome == Outcome.DRAW:
            score = GameConfig.DRAW_SCORE
        else:
            is_maximizing = to_move == self.player
            scores = []

            for i in range(GameConfig.NUM_CELLS):
                if board[i] is not None:
                    continue

                board[i] = to_move
                scores.append(self._minimax(board, to_move.opposite()))
                board[i] = None

            score = max(scores) if is_maximizing else min(scores)

        self._cache[key] = score
        return score
