"""
Console display for TicTacToe.
Builds the text for the board, the position legend, and the final result.
"""

from typing import Optional

from .config import GameConfig
from .game_state import GameState, Mark
from .win_checker import Outcome

# ANSI: clear screen and move the cursor home
_CLEAR = "\033[2J\033[H"


def render_instructions(config: Optional[GameConfig] = None) -> str:
    """Legend showing which number selects which cell."""
    config = config or GameConfig()
    size = config.BOARD_SIZE
    lines = ["Board positions (numpad-style):"]
    for row in range(size):
        labels = config.LABELS[row * size:(row + 1) * size]
        lines.append(" " + " | ".join(labels) + " ")
        if row < size - 1:
            lines.append(config.ROW_SEPARATOR)
    return "\n".join(lines) + "\n"


def render_board(board: GameState, config: Optional[GameConfig] = None) -> str:
    """
    Draw the board.

    Empty cells show their numpad label so the player can see what to type.
    """
    config = config or GameConfig()
    size = config.BOARD_SIZE

    def cell(index: int) -> str:
        mark = board.at(index)
        return config.LABELS[index] if mark == Mark.EMPTY else mark.value

    lines = []
    for row in range(size):
        start = row * size
        lines.append(" " + " | ".join(cell(i) for i in range(start, start + size)) + " ")
        if row < size - 1:
            lines.append(config.ROW_SEPARATOR)
    return "\n".join(lines)


def render_result(outcome: Outcome) -> str:
    """Message shown once the game is over."""
    if outcome.winner is not None:
        return f"{outcome.winner.value} wins! 🎉"
    if outcome == Outcome.DRAW:
        return "It's a draw. 🤝"
    return "Game in progress."


def clear_screen(config: Optional[GameConfig] = None):
    """Clear the terminal (skipped if disabled in config)."""
    config = config or GameConfig()
    if config.CLEAR_SCREEN:
        print(_CLEAR, end="", flush=True)
