"""Move validation, win detection and solvability."""

from __future__ import annotations

import pytest

from xnumbers.engine.gamerules import Rules
from xnumbers.errors import BoardIntegrityError, InvalidTile
from xnumbers.models.board import EMPTY, Board


# -- moves --------------------------------------------------------------------


def test_adjacent_tile_slides_into_gap() -> None:
    board = Board.solved(3, 3)
    new_board, accepted = Rules.apply_move(board, 7)
    assert accepted
    assert new_board is board
    assert board.cells == [0, 1, 2, 3, 4, 5, 6, EMPTY, 7]
    assert board.empty_index == 7


def test_distant_tile_is_rejected() -> None:
    board = Board.solved(3, 3)
    _, accepted = Rules.apply_move(board, 0)
    assert not accepted
    assert board.cells == [0, 1, 2, 3, 4, 5, 6, 7, EMPTY]


def test_diagonal_tile_is_rejected() -> None:
    board = Board.solved(3, 3)
    _, accepted = Rules.apply_move(board, 4)
    assert not accepted


@pytest.mark.parametrize("tile", [-1, 8, 9, 100, "3", True], ids=repr)
def test_non_tiles_raise(tile: object) -> None:
    board = Board.solved(3, 3)
    with pytest.raises(InvalidTile):
        Rules.apply_move(board, tile)  # type: ignore[arg-type]
    assert board.cells == [0, 1, 2, 3, 4, 5, 6, 7, EMPTY]


def test_missing_tile_raises_when_gap_is_elsewhere() -> None:
    board = Board.solved(3, 3, empty_index=2)
    with pytest.raises(InvalidTile):
        Rules.apply_move(board, 2)
    _, accepted = Rules.apply_move(board, 8)
    assert not accepted


def test_duplicate_tile_is_an_integrity_failure() -> None:
    board = Board.solved(2, 2)
    board.cells[0] = 1
    with pytest.raises(BoardIntegrityError):
        Rules.apply_move(board, 2)


# -- win detection ------------------------------------------------------------


def test_check_win_is_pure() -> None:
    board = Board.from_flat(3, 3, [0, 1, 2, 3, 4, 5, EMPTY, 7, 6])
    before = board.cells[:]
    assert Rules.check_win(board) is False
    assert Rules.check_win(board) is False
    assert board.cells == before


def test_check_win_ignores_gap_position() -> None:
    board = Board.from_flat(2, 2, [0, EMPTY, 2, 3])
    assert Rules.check_win(board)


# -- solvability --------------------------------------------------------------


def test_swapped_pair_is_unsolvable() -> None:
    board = Board.from_flat(3, 3, [1, 0, 2, 3, 4, 5, 6, 7, EMPTY])
    assert not Rules.is_solvable(board)


def test_one_move_from_solved_is_solvable() -> None:
    board = Board.from_flat(3, 3, [0, 1, 2, 3, 4, 5, 6, EMPTY, 7])
    assert Rules.is_solvable(board)


def test_rotated_tiles_with_gap_off_home_is_unsolvable() -> None:
    # a 2×2 board only cycles its three tiles one way around the gap
    board = Board.from_flat(2, 2, [0, EMPTY, 1, 2])
    assert not Rules.is_solvable(board)
    assert Rules.is_solvable(Board.from_flat(2, 2, [1, EMPTY, 0, 2]))


def test_single_row_keeps_order() -> None:
    assert Rules.is_solvable(Board.from_flat(4, 1, [EMPTY, 0, 1, 2]))
    assert not Rules.is_solvable(Board.from_flat(4, 1, [1, 0, EMPTY, 2]))
