"""
Game state management for TicTacToe.
Tracks the 9 cells of the board and answers win/draw questions.
"""

from enum import Enum
from typing import List
from dataclasses import dataclass, field

from .config import GameConfig


class Mark(Enum):
    """The value held by a single cell."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposing mark (EMPTY has no opponent)."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY


# All possible winning lines, as row-major cell indices
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

# Symbols accepted by GameState.from_string for an empty cell
_EMPTY_SYMBOLS = (" ", ".", "-", "_")


@dataclass
class GameState:
    """
    The 3x3 TicTacToe board.

    Index 0-8 maps to the grid in row-major order:
        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    Moves are applied in place. Speculative moves (used by the AI) must be
    reverted with undo() in strict last-placed-first-undone order.
    """

    cells: List[Mark] = field(
        default_factory=lambda: [Mark.EMPTY] * GameConfig.BOARD_CELLS
    )

    @classmethod
    def from_string(cls, text: str) -> "GameState":
        """
        Build a board from a 9-symbol string.

        Args:
            text: Cells in row-major order. 'X' and 'O' are marks,
                  '.', '-', '_' or a space mark an empty cell. Newlines
                  and '|' separators are ignored.

        Returns:
            A new GameState.

        Raises:
            ValueError: If the text does not hold exactly 9 cell symbols.
        """
        symbols = [c for c in text.upper() if c not in "\n\r|"]
        if len(symbols) != GameConfig.BOARD_CELLS:
            raise ValueError(
                f"Board must have exactly {GameConfig.BOARD_CELLS} cells, got {len(symbols)}"
            )

        cells = []
        for symbol in symbols:
            if symbol in _EMPTY_SYMBOLS:
                cells.append(Mark.EMPTY)
            elif symbol in ("X", "O"):
                cells.append(Mark(symbol))
            else:
                raise ValueError(f"Invalid cell symbol: {symbol!r}")
        return cls(cells=cells)

    def is_empty(self, index: int) -> bool:
        """True if the cell at index holds no mark."""
        return self.cells[index] == Mark.EMPTY

    def place(self, index: int, mark: Mark):
        """
        Place a mark on the board.

        Does nothing if the cell is already occupied.
        """
        if self.is_empty(index):
            self.cells[index] = mark

    def undo(self, index: int):
        """Clear a cell previously filled with place()."""
        self.cells[index] = Mark.EMPTY

    def empty_indices(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i in range(GameConfig.BOARD_CELLS) if self.is_empty(i)]

    def is_win(self, mark: Mark) -> bool:
        """True if mark holds all three cells of any winning line."""
        cells = self.cells
        return any(
            cells[a] == mark and cells[b] == mark and cells[c] == mark
            for a, b, c in WINNING_LINES
        )

    def is_draw(self) -> bool:
        """True if the board is full and nobody has won."""
        return (
            not self.is_win(Mark.X)
            and not self.is_win(Mark.O)
            and all(cell != Mark.EMPTY for cell in self.cells)
        )

    def at(self, index: int) -> Mark:
        """Get the mark at index."""
        return self.cells[index]

    def copy(self) -> "GameState":
        """Create an independent copy of the board."""
        return GameState(cells=list(self.cells))

    def __str__(self) -> str:
        rows = []
        for row in range(GameConfig.BOARD_SIZE):
            start = row * GameConfig.BOARD_SIZE
            rows.append("".join(
                "." if cell == Mark.EMPTY else cell.value
                for cell in self.cells[start:start + GameConfig.BOARD_SIZE]
            ))
        return "\n".join(rows)
