"""
Tests for the board, the line scanner and the computer opponent.

Usage:
    pytest test_logic.py
    python test_logic.py
"""

import random
import sys

import pytest

from logic.board import Board, Outcome, Party, EMPTY_MARKER, CENTER_SQUARE
from logic.errors import InvalidMoveError, NoMovesAvailableError
from logic.line_scanner import LineScanner, WIN_LINES
from logic.move_strategy import Difficulty, MoveStrategy


HUMAN = "X"
COMPUTER = "O"


def make_board(layout: str) -> Board:
    """
    Build a board from a 9-character string, square 1 first.
    Use '.' for empty squares, e.g. "XX.......".
    """
    board = Board()
    for position, marker in enumerate(layout, start=1):
        if marker != ".":
            board.occupy(position, marker)
    return board


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.unoccupied_positions() == list(range(1, 10))
    assert board.occupied_count() == 0
    assert not board.is_full()
    assert board.winner() is None
    assert all(board.marker_at(p) == EMPTY_MARKER for p in range(1, 10))


def test_occupy_shrinks_free_squares_by_one():
    board = Board()
    moves = [5, 1, 9, 3, 7]
    for count, position in enumerate(moves, start=1):
        before = len(board.unoccupied_positions())
        board.occupy(position, HUMAN if count % 2 else COMPUTER)
        after = board.unoccupied_positions()
        assert len(after) == before - 1
        assert len(after) == 9 - board.occupied_count()
        assert position not in after
    assert board.unoccupied_positions() == [2, 4, 6, 8]


def test_occupy_taken_square_is_rejected_without_change():
    board = make_board("X........")
    with pytest.raises(InvalidMoveError):
        board.occupy(1, COMPUTER)
    assert board.marker_at(1) == HUMAN
    assert board.occupied_count() == 1


@pytest.mark.parametrize("position", [0, 10, -1, "5", None])
def test_occupy_off_board_is_rejected(position):
    board = Board()
    with pytest.raises(InvalidMoveError):
        board.occupy(position, HUMAN)
    assert board.occupied_count() == 0


def test_occupy_with_empty_marker_is_rejected():
    board = Board()
    with pytest.raises(InvalidMoveError):
        board.occupy(1, EMPTY_MARKER)
    assert board.is_empty(1)


@pytest.mark.parametrize("line", WIN_LINES)
def test_every_line_is_a_win(line):
    board = Board()
    for position in line:
        board.occupy(position, COMPUTER)
    assert board.winner() == COMPUTER
    assert board.winning_line() == line


def test_no_winner_without_complete_line():
    board = make_board("XO.XO.O..")
    assert board.winner() is None
    assert board.winning_line() is None


def test_full_board_without_line_is_tie_position():
    board = make_board("XOXXOOOXX")
    assert board.is_full()
    assert board.winner() is None
    assert board.unoccupied_positions() == []


def test_queries_are_idempotent():
    board = make_board("XX.O.O...")
    assert board.winner() == board.winner()
    assert board.unoccupied_positions() == board.unoccupied_positions()
    assert board.snapshot() == board.snapshot()


def test_random_games_never_report_false_or_double_winners():
    rng = random.Random(1234)
    for _ in range(200):
        board = Board()
        marker = HUMAN
        while not board.is_full() and board.winner() is None:
            board.occupy(rng.choice(board.unoccupied_positions()), marker)
            marker = COMPUTER if marker == HUMAN else HUMAN

        owners = {
            board.marker_at(line[0]) for line in WIN_LINES
            if not board.is_empty(line[0])
            and all(board.marker_at(p) == board.marker_at(line[0]) for p in line)
        }
        assert len(owners) <= 1
        if owners:
            assert board.winner() in owners
        else:
            assert board.winner() is None


def test_copy_and_reset():
    board = make_board("X...O....")
    clone = board.copy()
    clone.occupy(2, HUMAN)
    assert board.is_empty(2)

    board.reset()
    assert board.occupied_count() == 0
    assert clone.occupied_count() == 3


def test_rows_for_drawing():
    board = make_board("X...O...X")
    assert board.rows() == [
        ("X", " ", " "),
        (" ", "O", " "),
        (" ", " ", "X"),
    ]


def test_party_and_outcome_helpers():
    assert Party.HUMAN.opposite() == Party.COMPUTER
    assert Party.COMPUTER.opposite() == Party.HUMAN
    assert Outcome.HUMAN_WIN.winner == Party.HUMAN
    assert Outcome.COMPUTER_WIN.winner == Party.COMPUTER
    assert Outcome.TIE.winner is None


# ==================== LINE SCANNER ====================

def test_count_markers_on_line():
    scanner = LineScanner(make_board("XX.O....."))
    assert scanner.count_markers_on_line((1, 2, 3), HUMAN) == 2
    assert scanner.count_markers_on_line((1, 2, 3), COMPUTER) == 0
    assert scanner.count_markers_on_line((1, 4, 7), COMPUTER) == 1


def test_open_position_finds_third_square():
    scanner = LineScanner(make_board("X...X...."))
    # Diagonal 1-5-9 holds two X
    assert scanner.open_position_on_line_with_count(HUMAN, 2) == 9


def test_open_position_uses_first_declared_line():
    # Row 1-2-3 and column 1-4-7 both hold two X; the row comes first
    scanner = LineScanner(make_board("X.X...X.."))
    assert scanner.open_position_on_line_with_count(HUMAN, 2) == 2


def test_open_position_skips_blocked_lines():
    scanner = LineScanner(make_board("XXO......"))
    assert scanner.open_position_on_line_with_count(HUMAN, 2) is None


def test_open_position_with_zero_count_on_empty_board():
    scanner = LineScanner(Board())
    assert scanner.open_position_on_line_with_count(HUMAN, 0) == 1


# ==================== MOVE STRATEGY ====================

def strategy(difficulty: Difficulty, seed: int = 0) -> MoveStrategy:
    return MoveStrategy(difficulty, COMPUTER, HUMAN, random.Random(seed))


def test_advanced_takes_center_on_empty_board():
    assert strategy(Difficulty.ADVANCED).choose_move(Board()) == CENTER_SQUARE


def test_intermediate_blocks_human():
    board = make_board("XX.......")
    assert strategy(Difficulty.INTERMEDIATE).choose_move(board) == 3


def test_advanced_prefers_win_over_block():
    # Human threatens 3, computer can win at 6
    board = make_board("XX.OO....")
    assert strategy(Difficulty.ADVANCED).choose_move(board) == 6


def test_advanced_blocks_when_it_cannot_win():
    board = make_board("XX..O....")
    assert strategy(Difficulty.ADVANCED).choose_move(board) == 3


def test_advanced_falls_back_to_random_free_square():
    board = make_board("X...O...X")
    for seed in range(20):
        move = strategy(Difficulty.ADVANCED, seed).choose_move(board)
        assert move in board.unoccupied_positions()


def test_intermediate_does_not_go_for_the_win():
    # Only the computer has two in a line; intermediate plays randomly
    board = make_board("OO.X....X")
    moves = {strategy(Difficulty.INTERMEDIATE, seed).choose_move(board) for seed in range(50)}
    assert moves <= set(board.unoccupied_positions())
    assert len(moves) > 1


def test_easy_picks_only_free_squares():
    board = make_board("XOXOX....")
    moves = {strategy(Difficulty.EASY, seed).choose_move(board) for seed in range(50)}
    assert moves <= {6, 7, 8, 9}


def test_same_seed_same_choices():
    board = Board()
    first = [strategy(Difficulty.EASY, 7).choose_move(board) for _ in range(5)]
    second = [strategy(Difficulty.EASY, 7).choose_move(board) for _ in range(5)]
    assert first == second


def test_strategy_does_not_modify_board():
    board = make_board("XX.OO....")
    before = board.snapshot()
    strategy(Difficulty.ADVANCED).choose_move(board)
    assert board.snapshot() == before


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_has_no_moves(difficulty):
    with pytest.raises(NoMovesAvailableError):
        strategy(difficulty).choose_move(make_board("XOXXOOOXX"))


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
