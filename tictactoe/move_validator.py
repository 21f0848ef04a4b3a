"""
Move validator for TicTacToe.
Turns what the player typed into a board index, or explains why it can't.
"""

from typing import List, Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves typed at the console.

    Rules:
    1. Input must be a whole number
    2. The number must be a numpad position (1-9)
    3. The cell it points at must be empty
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def parse_move(self, board: GameState, text: Optional[str]) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            text: Raw input line (numpad position).

        Returns:
            ValidationResult with the board index when valid.
        """
        text = (text or "").strip()

        try:
            position = int(text)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text}' is not a number."
            )

        # Check if the number is on the keypad
        if position not in self.config.POSITIONS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be 1-9."
            )

        # Check if cell is empty
        index = self.config.POSITIONS[position]
        if not board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Position {position} is already taken by {board.at(index).value}."
            )

        return ValidationResult(is_valid=True, index=index)

    def get_valid_positions(self, board: GameState) -> List[int]:
        """
        Get all positions the current player may type.

        Args:
            board: Current board.

        Returns:
            Sorted numpad positions of the empty cells.
        """
        return sorted(
            position for position, index in self.config.POSITIONS.items()
            if board.is_empty(index)
        )
