"""Unit tests for /src/duel/board.py"""

import pytest

from src.core.exceptions import OutOfBoundsError
from src.duel.board import Board
from src.duel.pieces import PieceKey
from src.duel.square import Square


@pytest.fixture
def board() -> Board:
    return Board.empty()


def test_empty_board(board: Board) -> None:
    assert len(board.cells) == 25
    assert all(key is None for key in board.cells.values())
    assert board.occupied_squares() == {}


def test_place_and_clear(board: Board) -> None:
    key = PieceKey(owner=0, name="P1")
    square = Square(2, 3)

    board.place(key, square)
    assert board.occupant(square) == key
    assert not board.is_empty(square)
    assert board.occupied_squares() == {square: key}

    board.clear(square)
    assert board.occupant(square) is None
    assert board.is_empty(square)


@pytest.mark.parametrize("square", [Square(-1, 0), Square(0, 5), Square(5, 5)])
def test_occupant_out_of_range(board: Board, square: Square) -> None:
    with pytest.raises(OutOfBoundsError):
        board.occupant(square)


def test_place_out_of_range_never_writes(board: Board) -> None:
    with pytest.raises(OutOfBoundsError):
        board.place(PieceKey(0, "P1"), Square(5, 0))
    assert Square(5, 0) not in board.cells
