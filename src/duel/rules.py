"""
The rule engine: decides whether a single move is legal on the given board and what it would capture.

Nothing in here mutates the board. The match applies the returned MoveResolution.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import (
    BlockedByOwnPieceError,
    DestinationOccupiedError,
    IllegalDirectionError,
    OutOfBoundsError,
)
from src.core.shared_types import Direction
from src.duel.board import Board
from src.duel.catalog import PIECE_CATALOG, MovementRule, board_vector
from src.duel.pieces import Piece, PieceKey
from src.duel.square import Square


@dataclass(frozen=True)
class MoveResolution:
    """Everything that happens when the move is executed"""

    piece: PieceKey
    direction: Direction
    origin: Square
    destination: Square
    midpoint: Optional[Square] = None
    destination_capture: Optional[PieceKey] = None
    midpoint_capture: Optional[PieceKey] = None

    @property
    def captured(self) -> list[PieceKey]:
        """Both captures can happen on the same jump"""
        return [
            key
            for key in (self.destination_capture, self.midpoint_capture)
            if key is not None
        ]


def validate_and_resolve(
    board: Board, piece: Piece, direction: Direction | str
) -> MoveResolution:
    """
    Check the move and compute its side effects
    -----

    1. direction must belong to the piece type
    2. destination must be on the board
    3. jumps: the cell jumped over may not hold one of your own pieces
    4. destination may not hold one of your own pieces
    5. opponent pieces on the destination / the cell jumped over get captured

    Raises one of the IllegalMoveError / MalformedMoveError subclasses when the move is rejected.
    """
    rule = PIECE_CATALOG[piece.type]
    token = _parse_direction(rule, piece, direction)

    drow, dcol = board_vector(rule, token, piece.owner)
    destination = piece.square.shifted(drow, dcol)
    if not destination.is_within_bounds():
        raise OutOfBoundsError(
            f"{piece.name} cannot move {token.value}: ({destination.row}, {destination.col}) is off the board."
        )

    midpoint: Optional[Square] = None
    midpoint_capture: Optional[PieceKey] = None
    if rule.is_jump:
        midpoint = jump_midpoint(piece.square, destination)
        midpoint_occupant = board.occupant(midpoint)
        if midpoint_occupant is not None:
            if midpoint_occupant.owner == piece.owner:
                raise BlockedByOwnPieceError(
                    f"{piece.name} cannot jump over its own piece {midpoint_occupant.name}."
                )
            midpoint_capture = midpoint_occupant

    destination_capture = board.occupant(destination)
    if destination_capture is not None and destination_capture.owner == piece.owner:
        raise DestinationOccupiedError(
            f"{piece.name} cannot land on its own piece {destination_capture.name}."
        )

    return MoveResolution(
        piece=piece.key,
        direction=token,
        origin=piece.square,
        destination=destination,
        midpoint=midpoint,
        destination_capture=destination_capture,
        midpoint_capture=midpoint_capture,
    )


def legal_directions(board: Board, piece: Piece) -> list[Direction]:
    """All directions the piece could move in right now (in catalog order)"""
    rule = PIECE_CATALOG[piece.type]
    directions: list[Direction] = []
    for direction in rule.vectors:
        try:
            validate_and_resolve(board, piece, direction)
        except (OutOfBoundsError, BlockedByOwnPieceError, DestinationOccupiedError):
            continue
        directions.append(direction)
    return directions


def jump_midpoint(origin: Square, destination: Square) -> Square:
    """
    The cell being jumped over.
    ---

    Integer midpoint of origin and destination (rounded down on each axis).
    Straight jumps move by 2 so this is the exact midpoint.
    The diagonal jump moves a single column: the cell jumped over is then the one in the lower of the two columns.
    """
    return Square(
        (origin.row + destination.row) // 2, (origin.col + destination.col) // 2
    )


def _parse_direction(
    rule: MovementRule, piece: Piece, direction: Direction | str
) -> Direction:
    try:
        token = Direction(direction)
    except ValueError:
        raise IllegalDirectionError(f"Unknown direction {direction!r}.") from None

    if not rule.allows(token):
        allowed = ", ".join(d.value for d in rule.vectors)
        raise IllegalDirectionError(
            f"{piece.name} ({piece.type}) cannot move {token.value}. Allowed: {allowed}"
        )
    return token
