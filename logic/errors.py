"""
Errors raised by the TicTacToe game logic.
"""


class GameError(Exception):
    """Base class for game logic errors."""
    pass


class InvalidCellIndex(GameError):
    """Cell index is outside the board (0-8, or 1-9 when typed by a player)."""
    pass


class CellOccupied(GameError):
    """Cell is on the board but already holds a symbol."""
    pass


class PreconditionViolated(GameError):
    """The AI was asked for a move on a board with no empty cells."""
    pass
