"""Tests for the Board grid."""

import pytest

from tictactoe_api.board import EMPTY, Board


def test_new_board_is_empty():
    board = Board(3)
    assert board.size == 3
    assert all(board.get(r, c) == EMPTY for r in range(3) for c in range(3))
    assert board.occupied_count() == 0
    assert not board.is_full()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_range_coordinates(row, col):
    board = Board(3)
    assert not board.is_valid(row, col)
    assert not board.is_empty(row, col)
    assert board.get(row, col) is None

    board.place(row, col, "X")
    assert board.occupied_count() == 0


def test_place_and_clear():
    board = Board(3)
    board.place(1, 2, "X")
    assert board.get(1, 2) == "X"
    assert not board.is_empty(1, 2)

    board.clear(1, 2)
    assert board.get(1, 2) == EMPTY
    assert board.is_empty(1, 2)


def test_is_full_tracks_every_cell():
    board = Board(3)
    cells = [(r, c) for r in range(3) for c in range(3)]
    for i, (r, c) in enumerate(cells):
        assert not board.is_full()
        board.place(r, c, "X" if i % 2 else "O")
    assert board.is_full()

    board.clear(2, 2)
    assert not board.is_full()


def test_reset_keeps_size():
    board = Board(4)
    board.place(0, 0, "X")
    board.place(3, 3, "O")
    board.reset()
    assert board.size == 4
    assert board.occupied_count() == 0


def test_cells_returns_a_copy():
    board = Board(3)
    board.place(0, 0, "X")
    cells = board.cells()
    assert cells[0] == ["X", "", ""]

    cells[0][1] = "O"
    assert board.get(0, 1) == EMPTY
