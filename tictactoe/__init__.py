"""
Logic module for TicTacToe.
Handles the board, rules, input validation, display, and AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, Mark, WINNING_LINES
from .win_checker import Outcome, check_outcome, get_winning_line
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, find_best_move
