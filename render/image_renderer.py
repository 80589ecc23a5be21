"""
Image renderer for TicTacToe.
Draws the board with OpenCV and saves a PNG snapshot after every move.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from logic.game_state import GameState, Outcome, Player
from .base import RendererError, cell_center, win_line_ends
from .config import RenderConfig

logger = logging.getLogger(__name__)


class ImageRenderer:
    """
    Renders the board to a BGR numpy image.

    Uses the same keypad layout as the gnuplot window, so cell 1 is
    bottom-left.
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        output_dir: Optional[str] = None
    ):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
            output_dir: Where to write snapshots (default: config.OUTPUT_DIR)
        """
        self.config = config or RenderConfig()
        self.output_dir = Path(output_dir or self.config.OUTPUT_DIR)
        self.frames = 0

    def _to_pixels(self, x: float, y: float) -> Tuple[int, int]:
        """Board units (y up) to pixel coordinates (y down)."""
        cell = self.config.CELL_PIXELS
        return int(round(x * cell)), int(round((3 - y) * cell))

    def render(
        self,
        board: Sequence[Optional[Player]],
        outcome: Outcome = Outcome.NONE,
        winning_line: Optional[Sequence[int]] = None
    ) -> np.ndarray:
        """
        Draw a board.

        Args:
            board: 9 cells, None for empty.
            outcome: Result of the game so far.
            winning_line: The 3 cells to strike through when someone has won.

        Returns:
            BGR image of size IMAGE_SIZE x IMAGE_SIZE.
        """
        cfg = self.config
        size = cfg.IMAGE_SIZE
        cell = cfg.CELL_PIXELS

        img = np.full((size, size, 3), cfg.IMAGE_BACKGROUND, dtype=np.uint8)

        # Grid lines
        for i in range(1, 3):
            cv2.line(img, (i * cell, 0), (i * cell, size),
                     cfg.IMAGE_GRID_COLOR, cfg.IMAGE_GRID_THICKNESS)
            cv2.line(img, (0, i * cell), (size, i * cell),
                     cfg.IMAGE_GRID_COLOR, cfg.IMAGE_GRID_THICKNESS)

        marker = int(cfg.SYMBOL_SIZE * cell)

        for index, piece in enumerate(board):
            if piece is None:
                continue

            cx, cy = self._to_pixels(*cell_center(index))

            if piece == Player.X:
                cv2.line(img, (cx - marker, cy - marker), (cx + marker, cy + marker),
                         cfg.IMAGE_X_COLOR, cfg.IMAGE_SYMBOL_THICKNESS)
                cv2.line(img, (cx + marker, cy - marker), (cx - marker, cy + marker),
                         cfg.IMAGE_X_COLOR, cfg.IMAGE_SYMBOL_THICKNESS)
            else:
                cv2.circle(img, (cx, cy), marker,
                           cfg.IMAGE_O_COLOR, cfg.IMAGE_SYMBOL_THICKNESS)

        if outcome in (Outcome.X, Outcome.O) and winning_line:
            x1, y1, x2, y2 = win_line_ends(winning_line, cfg.WIN_LINE_EXTEND)
            cv2.line(img, self._to_pixels(x1, y1), self._to_pixels(x2, y2),
                     cfg.IMAGE_WIN_COLOR, cfg.IMAGE_WIN_THICKNESS)

        return img

    def draw(self, game_state: GameState) -> Path:
        """
        Render the state and write it as the next numbered snapshot.

        Returns:
            Path of the written image.

        Raises:
            RendererError: if the image could not be written.
        """
        img = self.render(game_state.board, game_state.outcome, game_state.winning_line)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / self.config.SNAPSHOT_PATTERN.format(self.frames)

        if not cv2.imwrite(str(path), img):
            raise RendererError(f"Could not write {path}")

        self.frames += 1
        logger.info("Saved: %s", path)
        return path

    def close(self):
        logger.debug("Image renderer wrote %d frames", self.frames)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
