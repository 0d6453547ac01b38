"""Unit tests for Tic-Tac-Toe board rules."""

import pytest

from tictactoe.game import (
    Board,
    InProgress,
    OccupiedSlotError,
    Player,
    Tie,
    Win,
    WINNING_LINES,
    player_move,
    start_new_game,
)

X, O = Player.X, Player.O


def board_from(text: str) -> Board:
    """Build a board from a 9-char string such as ``"XO.X.O..."``."""
    marks = {"X": X, "O": O, ".": None}
    return Board(cells=[marks[ch] for ch in text])


def test_new_game_is_empty():
    board = start_new_game()
    assert board.empty_positions() == list(range(9))
    assert board.check_win(X) is None
    assert board.check_win(O) is None
    assert not board.is_tie()


def test_empty_positions_ascending_and_counted():
    board = board_from("X.O.X..O.")
    empty = board.empty_positions()
    assert empty == [1, 3, 5, 6, 8]
    occupied = sum(1 for c in board.cells if c is not None)
    assert len(empty) + occupied == 9


def test_top_row_win_reports_line_zero():
    board = board_from("XXX......")
    assert board.check_win(X) == Win(X, 0)
    assert board.check_win(O) is None


def test_main_diagonal_win_reports_line_six():
    board = board_from("X...X...X")
    won = board.check_win(X)
    assert won == Win(X, 6)
    assert won.positions == (0, 4, 8)


def test_first_line_in_table_order_wins():
    # Column 0 and the top row are both complete; the row comes first
    board = board_from("XXXX..X..")
    assert board.check_win(X) == Win(X, 0)


def test_anti_diagonal_positions():
    board = board_from("..O.O.O..")
    assert board.check_win(O) == Win(O, 7)
    assert set(WINNING_LINES[7]) == {2, 4, 6}


def test_full_board_without_line_is_tie():
    board = board_from("XOXXOOOXX")
    assert board.empty_positions() == []
    assert board.check_win(X) is None
    assert board.check_win(O) is None
    assert board.is_tie()


def test_full_board_with_line_is_not_tie():
    board = board_from("XXXOOXOXO")
    assert board.is_full()
    assert not board.is_tie()


def test_place_on_occupied_slot_raises_and_leaves_board():
    board = board_from("X........")
    before = list(board.cells)
    with pytest.raises(OccupiedSlotError) as excinfo:
        board.place(0, O)
    assert excinfo.value.position == 0
    assert excinfo.value.mark is X
    assert board.cells == before


def test_occupied_slot_error_is_value_error():
    assert issubclass(OccupiedSlotError, ValueError)


def test_player_move_reports_outcomes():
    board = board_from("XX.OO....")
    assert player_move(board, 5, O) == Win(O, 1)

    board = board_from("XX.......")
    assert isinstance(player_move(board, 4, O), InProgress)


def test_last_move_completing_line_is_win_not_tie():
    board = board_from("XOXOXOOX.")
    assert player_move(board, 8, X) == Win(X, 6)


def test_last_move_without_line_is_tie():
    board = board_from("XOXXOOOX.")
    assert player_move(board, 8, X) == Tie()


def test_copy_is_independent():
    board = board_from("X........")
    snapshot = board.copy()
    snapshot.place(1, O)
    assert board.cells[1] is None


def test_render_rows():
    board = board_from("XO..X...O")
    assert board.render() == "X|O| \n |X| \n | |O"


def test_opponent():
    assert X.opponent is O
    assert O.opponent is X
