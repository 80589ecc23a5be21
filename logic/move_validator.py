"""
Move validator for TicTacToe.
Validates moves and converts typed cell numbers into board indices.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .errors import GameError, InvalidCellIndex, CellOccupied
from .game_state import GameState, PlaceResult


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: PlaceResult = PlaceResult.ACCEPTED
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell must be on the board
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move for the current player.

        Args:
            game_state: Current game state.
            index: Cell index (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=PlaceResult.GAME_OVER,
                error_message="Game is already over!"
            )

        if not (0 <= index < GameConfig.NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                reason=PlaceResult.INVALID_CELL_INDEX,
                error_message=f"Please enter 1-{GameConfig.NUM_CELLS} (or q to quit)."
            )

        if game_state.board[index] is not None:
            return ValidationResult(
                is_valid=False,
                reason=PlaceResult.CELL_OCCUPIED,
                error_message="Cell already filled. Try another."
            )

        return ValidationResult(is_valid=True)

    def require_valid(self, game_state: GameState, index: int):
        """
        Like validate_move, but raises instead of returning a result.

        Raises:
            InvalidCellIndex, CellOccupied, GameError
        """
        result = self.validate_move(game_state, index)
        if result.is_valid:
            return

        if result.reason == PlaceResult.INVALID_CELL_INDEX:
            raise InvalidCellIndex(result.error_message)
        if result.reason == PlaceResult.CELL_OCCUPIED:
            raise CellOccupied(result.error_message)
        raise GameError(result.error_message)

    def parse_cell(self, text: str) -> int:
        """
        Turn a typed cell number (1-9) into a board index (0-8).

        Raises:
            InvalidCellIndex: if the text is not a number in range.
        """
        message = f"Please enter 1-{GameConfig.NUM_CELLS} (or q to quit)."

        try:
            number = int(text.strip())
        except ValueError:
            raise InvalidCellIndex(message)

        if not (1 <= number <= GameConfig.NUM_CELLS):
            raise InvalidCellIndex(message)

        return number - 1

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Empty cell indices, or nothing once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
