"""
Win checker for TicTacToe.
Classifies a board as ongoing, won by either mark, or drawn.
"""

from enum import Enum
from typing import Optional, Tuple

from .game_state import GameState, Mark, WINNING_LINES


class Outcome(Enum):
    """Match status after a move."""
    ONGOING = "ongoing"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_over(self) -> bool:
        return self != Outcome.ONGOING

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or an unfinished game."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None


def check_outcome(board: GameState) -> Outcome:
    """
    Check whether the game is over.

    Args:
        board: The current board.

    Returns:
        The Outcome. X is checked before O, matching the turn loop.
    """
    if board.is_win(Mark.X):
        return Outcome.X_WINS
    if board.is_win(Mark.O):
        return Outcome.O_WINS
    if board.is_draw():
        return Outcome.DRAW
    return Outcome.ONGOING


def get_winning_line(board: GameState) -> Optional[Tuple[int, int, int]]:
    """
    Get the winning line if there is one.

    Args:
        board: The current board.

    Returns:
        The first line (as 3 cell indices) held entirely by one mark, or None.
    """
    for line in WINNING_LINES:
        a, b, c = line
        first = board.at(a)
        if first != Mark.EMPTY and board.at(b) == first and board.at(c) == first:
            return line
    return None
