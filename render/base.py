"""
Shared pieces for the renderers.
"""

import math
from typing import Optional, Sequence, Tuple

from logic.game_state import GameState


class RendererError(Exception):
    """The renderer could not be started or written to."""
    pass


def cell_center(index: int) -> Tuple[float, float]:
    """
    Centre of a cell in board units.

    Row 0 is at the bottom, like a numeric keypad: cell 1 (index 0)
    is bottom-left and cell 9 (index 8) is top-right.
    """
    row, col = divmod(index, 3)
    return col + 0.5, row + 0.5


def win_line_ends(
    line: Sequence[int],
    extend: float
) -> Tuple[float, float, float, float]:
    """
    End points of the stroke through a winning line, stretched by
    `extend` past the first and last cell centres.
    """
    x1, y1 = cell_center(line[0])
    x2, y2 = cell_center(line[-1])

    dx, dy = x2 - x1, y2 - y1
    length = math.hypot(dx, dy) or 1.0
    dx /= length
    dy /= length

    return x1 - dx * extend, y1 - dy * extend, x2 + dx * extend, y2 + dy * extend


class NullRenderer:
    """Renderer that draws nothing (headless play and tests)."""

    def __init__(self):
        self.frames = 0
        self.last_state: Optional[GameState] = None

    def draw(self, game_state: GameState):
        self.frames += 1
        self.last_state = game_state.copy()

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
