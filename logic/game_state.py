"""
Game state management for TicTacToe.
Tracks the board, current player, move history and the cached result.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two symbols in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Outcome(Enum):
    """Result of the game so far."""
    NONE = "none"    # Game continues
    X = "X"
    O = "O"
    DRAW = "draw"

    @classmethod
    def for_player(cls, player: Player) -> "Outcome":
        """Outcome meaning `player` has won."""
        return cls.X if player == Player.X else cls.O


class PlaceResult(Enum):
    """What happened to a placement request."""
    ACCEPTED = "accepted"
    INVALID_CELL_INDEX = "invalid_cell_index"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


# A board is 9 cells, row-major; None means empty
Board = List[Optional[Player]]


def empty_board() -> Board:
    return [None] * GameConfig.NUM_CELLS


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9 cells of the board (index = row*3 + col)
    - Current player (X always opens)
    - Move history
    - Outcome and winning line, recomputed after every accepted move
    """

    board: Board = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    outcome: Outcome = Outcome.NONE
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.outcome != Outcome.NONE

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while playing or on a draw."""
        if self.outcome == Outcome.X:
            return Player.X
        if self.outcome == Outcome.O:
            return Player.O
        return None

    def try_place(self, index: int, player: Player) -> PlaceResult:
        """
        Put `player` on a cell, if the cell exists and is empty.

        This is the raw board operation: it does not look at whose turn
        it is or whether the game has already ended.

        Args:
            index: Cell index (0-8).
            player: Symbol to place.

        Returns:
            ACCEPTED if the board changed, otherwise why it was rejected.
        """
        if not (0 <= index < GameConfig.NUM_CELLS):
            return PlaceResult.INVALID_CELL_INDEX

        if self.board[index] is not None:
            return PlaceResult.CELL_OCCUPIED

        self.board[index] = player
        return PlaceResult.ACCEPTED

    def make_move(self, index: int) -> PlaceResult:
        """
        Play the current player's symbol at the given cell.

        On success the move is recorded, the outcome is recomputed and
        the turn passes to the other player.

        Args:
            index: Cell index (0-8).

        Returns:
            The PlaceResult; the state is untouched unless ACCEPTED.
        """
        if self.is_game_over:
            return PlaceResult.GAME_OVER

        result = self.try_place(index, self.current_player)
        if result != PlaceResult.ACCEPTED:
            return result

        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        self.refresh_outcome()
        self.current_player = self.current_player.opposite()

        return PlaceResult.ACCEPTED

    def refresh_outcome(self):
        """Recompute outcome and winning line from the board."""
        from .win_checker import WinChecker

        WinChecker().update_game_state(self)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            outcome=self.outcome,
            winning_line=self.winning_line
        )

    def reset(self):
        """Clear the board for a new game."""
        self.board = empty_board()
        self.current_player = Player.X
        self.moves = []
        self.outcome = Outcome.NONE
        self.winning_line = None

    def board_string(self) -> str:
        """
        Text picture of the board, laid out like a numeric keypad
        (cells 7-9 on top, 1-3 at the bottom) with free cells numbered.
        """
        lines = ["┌───┬───┬───┐"]

        for row in reversed(range(GameConfig.BOARD_SIZE)):
            row_str = "│"
            for col in range(GameConfig.BOARD_SIZE):
                index = row * GameConfig.BOARD_SIZE + col
                cell = self.board[index]
                label = cell.value if cell is not None else str(index + 1)
                row_str += f" {label} │"
            lines.append(row_str)

            if row > 0:
                lines.append("├───┼───┼───┤")

        lines.append("└───┴───┴───┘")
        return "\n".join(lines)

    def print_board(self):
        """Print the board and status to console."""
        print()
        print(self.board_string())

        if self.outcome == Outcome.DRAW:
            print("\nDraw!")
        elif self.is_game_over:
            print(f"\n{self.outcome.value} wins!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
