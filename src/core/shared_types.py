"""
Type definitions used across layers
"""

from enum import StrEnum

# The two sides of a match. First connection plays slot 0, second connection slot 1.
PLAYER_SLOTS: tuple[int, int] = (0, 1)


class Status(StrEnum):
    AWAITING_MOVE = "awaiting move"
    FINISHED = "finished"


class PieceType(StrEnum):
    RUNNER = "runner"
    JUMPER_STRAIGHT = "jumper_straight"
    JUMPER_DIAGONAL = "jumper_diagonal"


class Direction(StrEnum):
    """Wire tokens for moves. Forward/back are relative to the moving player, left/right are board columns."""

    FORWARD = "F"
    BACK = "B"
    LEFT = "L"
    RIGHT = "R"
    FORWARD_LEFT = "FL"
    FORWARD_RIGHT = "FR"
    BACK_LEFT = "BL"
    BACK_RIGHT = "BR"


class RejectionReason(StrEnum):
    UNKNOWN_PIECE = "unknown piece"
    ILLEGAL_DIRECTION = "illegal direction for type"
    OUT_OF_BOUNDS = "out of bounds"
    BLOCKED_BY_OWN_PIECE = "blocked by own piece"
    DESTINATION_OCCUPIED = "destination occupied by own piece"
    NOT_YOUR_TURN = "not your turn"
    GAME_OVER = "game over"


def opponent_of(slot: int) -> int:
    return 1 - slot
