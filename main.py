"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, win checking, move validation)
- AI (minimax opponent)
- Display (board and result text)

Run this script to play TicTacToe against a friend or the computer!
"""

import argparse
from enum import Enum
from typing import Optional

from tictactoe.config import GameConfig
from tictactoe.game_state import GameState, Mark
from tictactoe.win_checker import Outcome, check_outcome, get_winning_line
from tictactoe.move_validator import MoveValidator
from tictactoe.ai_player import find_best_move
from tictactoe import display


class PlayerType(Enum):
    """Who controls a mark."""
    HUMAN = "human"
    AI = "ai"


class TicTacToeGame:
    """
    One match of console TicTacToe.

    Game flow:
    1. Show the position legend and the board
    2. Stop if someone has won or the board is full
    3. Human turn: read a numpad position; AI turn: run minimax
    4. Switch marks and repeat
    """

    def __init__(
        self,
        vs_ai: bool = False,
        ai_first: bool = False,
        config: Optional[GameConfig] = None,
        board: Optional[GameState] = None
    ):
        """
        Set up a match.

        Args:
            vs_ai: If True, one side is played by the computer.
            ai_first: Let the computer play X (moves first).
            config: Game configuration. Uses defaults if not provided.
            board: Starting position. Uses an empty board if not provided.
        """
        self.config = config or GameConfig()
        self.board = board or GameState()
        self.validator = MoveValidator(self.config)

        if vs_ai and ai_first:
            self.players = {Mark.X: PlayerType.AI, Mark.O: PlayerType.HUMAN}
        elif vs_ai:
            self.players = {Mark.X: PlayerType.HUMAN, Mark.O: PlayerType.AI}
        else:
            self.players = {Mark.X: PlayerType.HUMAN, Mark.O: PlayerType.HUMAN}

        self.current = side_to_move(self.board)

    def play(self) -> Outcome:
        """
        Play until the game is over.

        Returns:
            The final Outcome.
        """
        while True:
            print(display.render_instructions(self.config))
            print(display.render_board(self.board, self.config))

            outcome = check_outcome(self.board)
            if outcome.is_over:
                break

            if self.players[self.current] == PlayerType.HUMAN:
                if not self._human_move():
                    continue
            else:
                self._ai_move()

            # Clear screen after every move
            display.clear_screen(self.config)

            self.current = self.current.opposite()

        self._show_game_result(outcome)
        return outcome

    def _human_move(self) -> bool:
        """
        Read and apply a human move.

        Returns:
            True if a move was made, False if the input was rejected.
        """
        text = input(f"\n{self.current.value}'s turn. Enter 1-9: ")
        result = self.validator.parse_move(self.board, text)

        if not result.is_valid:
            print(f"Invalid input: {result.error_message}")
            if self.config.CLEAR_SCREEN:
                input("Press Enter to try again...")
                display.clear_screen(self.config)
            return False

        self.board.place(result.index, self.current)
        return True

    def _ai_move(self):
        """Let the computer pick and play its move."""
        print(f"\nAI ({self.current.value}) is thinking...")
        best = find_best_move(
            self.board, self.current, self.current.opposite(), self.config
        )
        self.board.place(best, self.current)

    def _show_game_result(self, outcome: Outcome):
        """Show the final game result."""
        display.clear_screen(self.config)
        print(display.render_board(self.board, self.config))
        print()

        line = get_winning_line(self.board)
        if line is not None:
            labels = "-".join(self.config.LABELS[i] for i in line)
            print(f"Winning line: {labels}")

        print(display.render_result(outcome))


def side_to_move(board: GameState) -> Mark:
    """X moves first, so X is to move whenever both marks are level."""
    x_count = sum(1 for cell in board.cells if cell == Mark.X)
    o_count = sum(1 for cell in board.cells if cell == Mark.O)
    return Mark.X if x_count == o_count else Mark.O


def choose_mode() -> bool:
    """
    Ask which mode to play.

    Returns:
        True for Human vs AI, False for Human vs Human.
    """
    print("1) Human vs Human")
    print("2) Human vs AI")
    answer = input("Choose mode (1/2): ")
    return answer.strip() == "2"


def ask_play_again() -> bool:
    answer = input("\nPlay again? (y/n): ")
    return answer.strip().lower().startswith("y")


def parse_board(parser: argparse.ArgumentParser, text: Optional[str]) -> Optional[GameState]:
    """Turn the --board option into a GameState, or exit with a usage error."""
    if text is None:
        return None

    try:
        board = GameState.from_string(text)
    except ValueError as e:
        parser.error(str(e))

    x_count = sum(1 for cell in board.cells if cell == Mark.X)
    o_count = sum(1 for cell in board.cells if cell == Mark.O)
    if x_count - o_count not in (0, 1):
        parser.error(f"Board has {x_count} X and {o_count} O; X moves first.")
    return board


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--mode",
        choices=["1", "2"],
        help="1 = Human vs Human, 2 = Human vs AI (skips the menu)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play X and move first"
    )
    parser.add_argument(
        "--board",
        help="Start the first game from this position, e.g. 'XX.OO....'"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Play a single game without asking to play again"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between moves"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.CLEAR_SCREEN = not args.no_clear
    config.VERBOSE_AI = args.verbose

    board = parse_board(parser, args.board)

    try:
        while True:
            display.clear_screen(config)
            print(config.TITLE)

            if args.mode is None:
                vs_ai = choose_mode()
            else:
                vs_ai = args.mode == "2"

            game = TicTacToeGame(
                vs_ai=vs_ai,
                ai_first=args.ai_first,
                config=config,
                board=board
            )
            board = None
            game.play()

            if args.once or not ask_play_again():
                break
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
