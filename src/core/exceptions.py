"""
Custom exceptions for all layers.

Every move-level error carries the RejectionReason that is reported back to the player.
None of these are fatal: a rejected request leaves the match untouched.
"""

from src.core.shared_types import RejectionReason


class GameError(Exception):
    """Top-level exception. Anything raised on purpose by this application derives from it."""


class InvalidRequestError(GameError):
    """Incoming payload cannot be interpreted (raised from the pydantic validators)."""


class InvalidLayoutError(GameError):
    """A board layout string does not describe a valid 5x5 setup."""


class GameStateError(GameError):
    """Request does not fit the current state of the session (not tied to a single move)."""


class MatchFullError(GameStateError):
    """Both player slots have already been handed out."""


# --- MOVE REJECTIONS ---
class MoveRejectedError(GameError):
    reason: RejectionReason


class MalformedMoveError(MoveRejectedError):
    """The move names something that does not exist for this player/piece."""


class UnknownPieceError(MalformedMoveError):
    reason = RejectionReason.UNKNOWN_PIECE


class IllegalDirectionError(MalformedMoveError):
    reason = RejectionReason.ILLEGAL_DIRECTION


class IllegalMoveError(MoveRejectedError):
    """Well-formed move that the rules do not allow."""


class OutOfBoundsError(IllegalMoveError):
    reason = RejectionReason.OUT_OF_BOUNDS


class BlockedByOwnPieceError(IllegalMoveError):
    reason = RejectionReason.BLOCKED_BY_OWN_PIECE


class DestinationOccupiedError(IllegalMoveError):
    reason = RejectionReason.DESTINATION_OCCUPIED


class ProtocolViolationError(MoveRejectedError):
    """Move submitted at the wrong moment."""


class NotYourTurnError(ProtocolViolationError):
    reason = RejectionReason.NOT_YOUR_TURN


class GameOverError(ProtocolViolationError):
    reason = RejectionReason.GAME_OVER
