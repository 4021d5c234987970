"""Unit tests for /src/duel/square.py"""

import pytest

from src.duel.square import BOARD_DIMENSIONS, Square, all_squares


def test_square_within_bounds() -> None:
    """happy case: every cell of the 5x5 board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "row, col", [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5), (-2, 3), (2, 6)]
)
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_shifted_square() -> None:
    assert Square(2, 2).shifted(-2, 1) == Square(0, 3)
    assert Square(0, 0).shifted(-1, 0) == Square(-1, 0)


def test_all_squares_covers_the_board() -> None:
    squares = all_squares()
    assert len(squares) == 25
    assert len(set(squares)) == 25
    assert squares[0] == Square(0, 0)
    assert squares[-1] == Square(4, 4)
