"""Unit tests for /src/duel/catalog.py"""

import pytest

from src.core.shared_types import Direction, PieceType
from src.duel.catalog import PIECE_CATALOG, MoveKind, board_vector


def test_every_piece_type_has_a_rule() -> None:
    assert set(PIECE_CATALOG) == set(PieceType)


@pytest.mark.parametrize(
    "piece_type, directions, kind",
    [
        (PieceType.RUNNER, {"F", "B", "L", "R"}, MoveKind.STEP),
        (PieceType.JUMPER_STRAIGHT, {"F", "B", "L", "R"}, MoveKind.JUMP),
        (PieceType.JUMPER_DIAGONAL, {"FL", "FR", "BL", "BR"}, MoveKind.JUMP),
    ],
)
def test_directions_per_type(
    piece_type: PieceType, directions: set[str], kind: MoveKind
) -> None:
    rule = PIECE_CATALOG[piece_type]
    assert {direction.value for direction in rule.directions} == directions
    assert rule.kind == kind


def test_runner_moves_a_single_cell() -> None:
    for drow, dcol in PIECE_CATALOG[PieceType.RUNNER].vectors.values():
        assert abs(drow) + abs(dcol) == 1


def test_jumpers_always_move_two_rows_or_two_columns() -> None:
    """The cell jumped over always lies strictly between origin and destination"""
    for piece_type in (PieceType.JUMPER_STRAIGHT, PieceType.JUMPER_DIAGONAL):
        for drow, dcol in PIECE_CATALOG[piece_type].vectors.values():
            assert abs(drow) == 2 or abs(dcol) == 2


def test_diagonal_jumper_moves_one_column_two_rows() -> None:
    for drow, dcol in PIECE_CATALOG[PieceType.JUMPER_DIAGONAL].vectors.values():
        assert (abs(drow), abs(dcol)) == (2, 1)


@pytest.mark.parametrize(
    "direction, owner, expected",
    [
        (Direction.FORWARD, 0, (2, 0)),
        (Direction.FORWARD, 1, (-2, 0)),
        (Direction.BACK, 0, (-2, 0)),
        (Direction.BACK, 1, (2, 0)),
        (Direction.LEFT, 1, (0, -2)),
        (Direction.RIGHT, 1, (0, 2)),
    ],
)
def test_forward_is_towards_the_opponent(
    direction: Direction, owner: int, expected: tuple[int, int]
) -> None:
    rule = PIECE_CATALOG[PieceType.JUMPER_STRAIGHT]
    assert board_vector(rule, direction, owner) == expected
