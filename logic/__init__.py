"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

from .config import GameConfig
from .errors import GameError, InvalidCellIndex, CellOccupied, PreconditionViolated
from .game_state import GameState, Player, Outcome, PlaceResult, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WINNING_LINES
from .ai_player import AIPlayer, Difficulty
