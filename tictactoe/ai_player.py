"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict, Optional, Tuple

from .config import GameConfig
from .game_state import GameState, Mark


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search works on the board it is given: every speculative move is
    placed and then undone, so the board is unchanged when it returns.
    """

    def __init__(
        self,
        mark: Mark = Mark.O,
        opponent: Optional[Mark] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            opponent: The opposing mark (default: the opposite of mark)
            config: Game configuration. Uses defaults if not provided.
        """
        self.mark = mark
        self.opponent = opponent or mark.opposite()
        self.config = config or GameConfig()

        # Statistics of the last search (for debugging)
        self.positions_evaluated = 0
        self.last_score: Optional[int] = None

        # Scores of positions seen during the current search
        self._scores: Dict[Tuple[Mark, ...], int] = {}

    def get_best_move(self, board: GameState) -> int:
        """
        Get the best move for the current position.

        Ties between equally good moves go to the lowest cell index.
        The board must have at least one empty cell and no winner.

        Args:
            board: Current board.

        Returns:
            Index (0-8) of the best move.
        """
        self.positions_evaluated = 0
        self._scores = {}

        valid_moves = board.empty_indices()

        best_score = None
        best_move = valid_moves[0]

        for move in valid_moves:
            # Try this move
            board.place(move, self.mark)
            score = self._score(board, depth=0, is_maximizing=False)
            board.undo(move)

            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        self._scores = {}
        self.last_score = best_score

        if self.config.VERBOSE_AI:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _score(self, board: GameState, depth: int, is_maximizing: bool) -> int:
        """
        Minimax score of the board from the AI's point of view.

        Args:
            board: Current board (a speculative move has just been placed).
            depth: Number of moves played since the search root.
            is_maximizing: True if the AI is to move next.

        Returns:
            10 - depth for a win, depth - 10 for a loss, 0 for a draw.
        """
        # Within one search the cells decide both depth and side to move
        key = tuple(board.cells)
        cached = self._scores.get(key)
        if cached is not None:
            return cached

        self.positions_evaluated += 1

        # Check terminal states
        if board.is_win(self.mark):
            score = self.config.WIN_SCORE - depth  # Win (prefer faster wins)
        elif board.is_win(self.opponent):
            score = depth - self.config.WIN_SCORE  # Loss (prefer slower losses)
        elif board.is_draw():
            score = 0
        elif is_maximizing:
            score = max(
                self._try_move(board, move, self.mark, depth, False)
                for move in board.empty_indices()
            )
        else:
            score = min(
                self._try_move(board, move, self.opponent, depth, True)
                for move in board.empty_indices()
            )

        self._scores[key] = score
        return score

    def _try_move(
        self,
        board: GameState,
        move: int,
        mark: Mark,
        depth: int,
        is_maximizing: bool
    ) -> int:
        """Place mark at move, score the result one ply deeper, then undo."""
        board.place(move, mark)
        score = self._score(board, depth + 1, is_maximizing)
        board.undo(move)
        return score


def find_best_move(
    board: GameState,
    self_mark: Mark,
    opponent_mark: Mark,
    config: Optional[GameConfig] = None
) -> int:
    """
    Pick the optimal move for self_mark.

    Args:
        board: Current board. It must not be full or already won.
        self_mark: The mark to move.
        opponent_mark: The other mark.
        config: Game configuration. Uses defaults if not provided.

    Returns:
        Index (0-8) of the chosen cell. The caller places it.
    """
    return AIPlayer(self_mark, opponent_mark, config).get_best_move(board)
