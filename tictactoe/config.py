"""
Game configuration for TicTacToe.
All the constants for the board, input numbering, and console output.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Override attributes on an instance to change behaviour for one game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major as 9 cells
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

    # The two marks, in turn order (X always starts)
    MARKS = ("X", "O")

    # ==================== INPUT SETTINGS ====================
    # Numpad-style numbering: the keypad layout matches the board
    #  7 | 8 | 9
    #  4 | 5 | 6
    #  1 | 2 | 3
    POSITIONS = {
        7: 0, 8: 1, 9: 2,
        4: 3, 5: 4, 6: 5,
        1: 6, 2: 7, 3: 8,
    }

    # Reverse mapping used when drawing empty cells (index -> label)
    LABELS = ("7", "8", "9", "4", "5", "6", "1", "2", "3")

    # ==================== AI SETTINGS ====================
    # Terminal score for a win; depth is subtracted so faster wins score higher
    WIN_SCORE = 10

    # Print search statistics after every computer move
    VERBOSE_AI = False

    # ==================== CONSOLE SETTINGS ====================
    CLEAR_SCREEN = True
    TITLE = "=== Tic-Tac-Toe ==="
    ROW_SEPARATOR = "---+---+---"
