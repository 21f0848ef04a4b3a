"""
Tests for the supporting TicTacToe modules:
win checker, move validator, and console display.
"""

import pytest

from tictactoe import display
from tictactoe.config import GameConfig
from tictactoe.game_state import GameState, Mark
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import Outcome, check_outcome, get_winning_line


# ==================== WIN CHECKER ====================

def test_outcome_ongoing():
    outcome = check_outcome(GameState.from_string("XO......."))
    assert outcome == Outcome.ONGOING
    assert not outcome.is_over
    assert outcome.winner is None


@pytest.mark.parametrize("text, expected", [
    ("XXXOO....", Outcome.X_WINS),
    ("XX.OOOX..", Outcome.O_WINS),
    ("XOXXOOOXX", Outcome.DRAW),
])
def test_outcome_terminal(text, expected):
    outcome = check_outcome(GameState.from_string(text))
    assert outcome == expected
    assert outcome.is_over


def test_outcome_winner_mark():
    assert Outcome.X_WINS.winner == Mark.X
    assert Outcome.O_WINS.winner == Mark.O
    assert Outcome.DRAW.winner is None


def test_winning_line():
    assert get_winning_line(GameState.from_string("O.X.OX..O")) == (0, 4, 8)
    assert get_winning_line(GameState.from_string("X.O.XO..O")) == (2, 5, 8)
    assert get_winning_line(GameState.from_string("XOXXOOOXX")) is None
    assert get_winning_line(GameState()) is None


# ==================== MOVE VALIDATOR ====================

@pytest.mark.parametrize("text, index", [
    ("7", 0), ("8", 1), ("9", 2),
    ("4", 3), ("5", 4), ("6", 5),
    ("1", 6), ("2", 7), (" 3\n", 8),
])
def test_numpad_positions(text, index):
    result = MoveValidator().parse_move(GameState(), text)
    assert result.is_valid
    assert result.index == index
    assert result.error_message is None


@pytest.mark.parametrize("text", ["", "abc", "5.0", None])
def test_rejects_non_numbers(text):
    result = MoveValidator().parse_move(GameState(), text)
    assert not result.is_valid
    assert result.index is None
    assert "not a number" in result.error_message


@pytest.mark.parametrize("text", ["0", "10", "-1"])
def test_rejects_out_of_range(text):
    result = MoveValidator().parse_move(GameState(), text)
    assert not result.is_valid
    assert "Must be 1-9" in result.error_message


def test_rejects_occupied_cell():
    board = GameState.from_string("....X....")
    result = MoveValidator().parse_move(board, "5")
    assert not result.is_valid
    assert "already taken by X" in result.error_message


def test_valid_positions():
    board = GameState.from_string("XO..X...O")
    assert MoveValidator().get_valid_positions(board) == [1, 2, 4, 6, 9]


# ==================== DISPLAY ====================

def test_render_instructions():
    text = display.render_instructions()
    assert text.splitlines() == [
        "Board positions (numpad-style):",
        " 7 | 8 | 9 ",
        "---+---+---",
        " 4 | 5 | 6 ",
        "---+---+---",
        " 1 | 2 | 3 ",
    ]


def test_render_board_shows_labels_for_empty_cells():
    board = GameState.from_string("X...O....")
    assert display.render_board(board).splitlines() == [
        " X | 8 | 9 ",
        "---+---+---",
        " 4 | O | 6 ",
        "---+---+---",
        " 1 | 2 | 3 ",
    ]


def test_render_result():
    assert display.render_result(Outcome.X_WINS) == "X wins! 🎉"
    assert display.render_result(Outcome.O_WINS) == "O wins! 🎉"
    assert display.render_result(Outcome.DRAW) == "It's a draw. 🤝"


def test_clear_screen(capsys):
    config = GameConfig()
    config.CLEAR_SCREEN = False
    display.clear_screen(config)
    assert capsys.readouterr().out == ""

    config.CLEAR_SCREEN = True
    display.clear_screen(config)
    assert capsys.readouterr().out.startswith("\033[2J")
