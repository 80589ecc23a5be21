"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple
from .game_state import GameState, Player, Outcome


# All possible winning lines as cell indices, checked in this order
WINNING_LINES: List[Tuple[int, int, int]] = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same symbol in a row
    (horizontally, vertically, or diagonally).

    Every method is a pure function of the board it is given. Nothing
    here stops play after the game ends; that is up to the caller.
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(
        self,
        board: Sequence[Optional[Player]]
    ) -> Tuple[Outcome, Optional[Tuple[int, int, int]]]:
        """
        Work out the result of a board.

        The first complete line in WINNING_LINES order decides the winner,
        even on boards that legal play could never produce.

        Args:
            board: 9 cells, None for empty.

        Returns:
            (outcome, winning line); the line is None unless someone won.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return Outcome.for_player(winner), line

        if all(cell is not None for cell in board):
            return Outcome.DRAW, None

        return Outcome.NONE, None

    def check_winner(self, board: Sequence[Optional[Player]]) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Sequence[Optional[Player]],
        line: Tuple[int, int, int]
    ) -> Optional[Player]:
        """The Player holding all 3 cells of the line, or None."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Sequence[Optional[Player]]) -> bool:
        """
        Check if the board is a draw: every cell filled and no winner.
        """
        return self.evaluate(board)[0] == Outcome.DRAW

    def get_winning_line(
        self,
        board: Sequence[Optional[Player]]
    ) -> Optional[Tuple[int, int, int]]:
        """The winning line as 3 cell indices, or None."""
        return self.evaluate(board)[1]

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Store the outcome and winning line of the board on the game state.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.outcome, game_state.winning_line = self.evaluate(game_state.board)
        return game_state
