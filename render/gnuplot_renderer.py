"""
Gnuplot renderer for TicTacToe.
Pipes drawing commands to a gnuplot process that redraws the board.
"""

import logging
import subprocess
from typing import List, Optional, Sequence

from logic.game_state import GameState, Outcome, Player
from .base import RendererError, cell_center, win_line_ends
from .config import RenderConfig

logger = logging.getLogger(__name__)


def build_commands(
    board: Sequence[Optional[Player]],
    outcome: Outcome = Outcome.NONE,
    winning_line: Optional[Sequence[int]] = None,
    config: Optional[RenderConfig] = None
) -> List[str]:
    """
    Build the gnuplot script that draws one frame.

    Args:
        board: 9 cells, None for empty.
        outcome: Result of the game so far.
        winning_line: The 3 cells to strike through when someone has won.
        config: Render settings. Uses defaults if not provided.

    Returns:
        Lines of gnuplot commands, without trailing newlines.
    """
    config = config or RenderConfig()
    size = config.SYMBOL_SIZE

    # Clear whatever the last frame drew
    commands = [
        "unset object",
        "unset arrow",
        "unset key",
        "set size square",
        "set xrange [0:3]",
        "set yrange [0:3]",
        "unset xtics",
        "unset ytics",
        "unset border",
        f"set style line 1 lc rgb {config.GRID_COLOR} lw {config.GRID_LINE_WIDTH}",
        "set arrow from 1,0 to 1,3 nohead ls 1",
        "set arrow from 2,0 to 2,3 nohead ls 1",
        "set arrow from 0,1 to 3,1 nohead ls 1",
        "set arrow from 0,2 to 3,2 nohead ls 1",
    ]

    for index, cell in enumerate(board):
        x, y = cell_center(index)

        if cell == Player.X:
            # Two diagonal strokes
            commands.append(
                f"set arrow from {x - size:.3f},{y - size:.3f} to {x + size:.3f},{y + size:.3f} "
                f"nohead lw {config.SYMBOL_LINE_WIDTH} lc rgb {config.X_COLOR}"
            )
            commands.append(
                f"set arrow from {x - size:.3f},{y + size:.3f} to {x + size:.3f},{y - size:.3f} "
                f"nohead lw {config.SYMBOL_LINE_WIDTH} lc rgb {config.X_COLOR}"
            )
        elif cell == Player.O:
            commands.append(
                f"set object circle at {x:.3f},{y:.3f} size {size:.3f} front fs empty "
                f"border lc rgb {config.O_COLOR} lw {config.SYMBOL_LINE_WIDTH}"
            )

    if outcome in (Outcome.X, Outcome.O) and winning_line:
        x1, y1, x2, y2 = win_line_ends(winning_line, config.WIN_LINE_EXTEND)
        commands.append(
            f"set arrow from {x1:.3f},{y1:.3f} to {x2:.3f},{y2:.3f} "
            f"lw {config.WIN_LINE_WIDTH} lc rgb {config.WIN_COLOR} nohead front"
        )

    # One plot renders everything
    commands.append("plot NaN notitle")
    return commands


class GnuplotRenderer:
    """
    Keeps a gnuplot process open and redraws the board on demand.
    The game never reads anything back from gnuplot.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
        """
        self.config = config or RenderConfig()
        self.process: Optional[subprocess.Popen] = None

    @property
    def is_open(self) -> bool:
        return self.process is not None

    def open(self):
        """
        Start gnuplot.

        Raises:
            RendererError: if gnuplot cannot be started.
        """
        command = self.config.GNUPLOT_COMMAND
        logger.info("Starting %s", " ".join(command))

        try:
            self.process = subprocess.Popen(
                command,
                stdin=subprocess.PIPE,
                text=True
            )
        except OSError as e:
            raise RendererError(f"Could not open gnuplot: {e}") from e

    def draw(self, game_state: GameState):
        """
        Redraw the board for the given state.

        Raises:
            RendererError: if gnuplot has gone away.
        """
        if not self.is_open:
            self.open()

        script = build_commands(
            game_state.board,
            game_state.outcome,
            game_state.winning_line,
            self.config
        )

        try:
            self.process.stdin.write("\n".join(script) + "\n")
            self.process.stdin.flush()
        except (BrokenPipeError, OSError) as e:
            raise RendererError(f"Lost connection to gnuplot: {e}") from e

        logger.debug("Sent %d gnuplot commands", len(script))

    def close(self):
        """Close the pipe and wait for gnuplot to exit."""
        if self.process is None:
            return

        try:
            self.process.stdin.close()
        except (BrokenPipeError, OSError) as e:
            logger.warning("Error closing gnuplot pipe: %s", e)

        self.process.wait()
        self.process = None
        logger.info("Gnuplot closed.")

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
