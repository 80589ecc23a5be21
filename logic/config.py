"""
Game configuration for TicTacToe.
Board shape, symbols and AI scoring.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override the defaults below.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, index = row*3 + col

    # ==================== MINIMAX SCORES ====================
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== DEFAULTS ====================
    DEFAULT_MODE = 2          # 1 = one player vs AI, 2 = two players
    DEFAULT_DIFFICULTY = 1    # 1 = easy, 2 = medium, 3 = hard
    DEFAULT_RENDERER = "gnuplot"
    DEFAULT_LOG_LEVEL = "WARNING"
