"""
Render configuration for TicTacToe.
Settings for the gnuplot window and the OpenCV snapshot images.

Setup:
    Install gnuplot and make sure it is on PATH, or use --renderer image.
"""


class RenderConfig:
    """
    Configuration class for render settings.
    Change these values to restyle the board!
    """

    # ==================== GNUPLOT SETTINGS ====================
    # -persist keeps the window open after the game ends
    GNUPLOT_COMMAND = ["gnuplot", "-persist"]

    # Colours as gnuplot rgb integers
    GRID_COLOR = "0x000000"
    X_COLOR = "0xFF0000"
    O_COLOR = "0x0000FF"
    WIN_COLOR = "0x00FF00"

    GRID_LINE_WIDTH = 3
    SYMBOL_LINE_WIDTH = 6
    WIN_LINE_WIDTH = 8

    # ==================== GEOMETRY (board units, 1 per cell) ====================
    # Half the size of an X, and the radius of an O
    SYMBOL_SIZE = 0.30

    # How far the win line runs past the centres of its end cells
    WIN_LINE_EXTEND = 0.35

    # ==================== IMAGE SETTINGS ====================
    IMAGE_SIZE = 600                      # Square image, pixels
    CELL_PIXELS = IMAGE_SIZE // 3         # 200 pixels per cell

    # BGR colours for OpenCV
    IMAGE_BACKGROUND = (255, 255, 255)
    IMAGE_GRID_COLOR = (0, 0, 0)
    IMAGE_X_COLOR = (0, 0, 255)           # Red
    IMAGE_O_COLOR = (255, 0, 0)           # Blue
    IMAGE_WIN_COLOR = (0, 255, 0)         # Green

    IMAGE_GRID_THICKNESS = 3
    IMAGE_SYMBOL_THICKNESS = 8
    IMAGE_WIN_THICKNESS = 10

    # Where ImageRenderer writes its snapshots
    OUTPUT_DIR = "render_output"
    SNAPSHOT_PATTERN = "move_{:02d}.png"
