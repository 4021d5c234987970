"""Requests, Responses and websocket messages"""

from typing import Literal, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Direction, PieceType, RejectionReason

PieceName = str
AVAILABLE_DIRECTIONS = [direction.value for direction in Direction]


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    # "character_name" is what the first browser clients sent
    piece_name: str = Field(
        validation_alias=AliasChoices("piece_name", "character_name")
    )
    direction: str

    @field_validator("piece_name")
    @classmethod
    def validate_piece_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("A move must name the piece to move.")
        return value

    @field_validator("direction")
    @classmethod
    def validate_direction(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in AVAILABLE_DIRECTIONS:
            raise InvalidRequestError(
                f"Cannot interpret direction: {value!r}. Pick one from {','.join(AVAILABLE_DIRECTIONS)}"
            )
        return value


# --- RESPONSE MODELS ---
class CellState(BaseModel):
    name: PieceName
    type: PieceType
    owner: int


class GameStateResponse(BaseModel):
    match_id: UUID
    board: list[list[Optional[CellState]]]
    current_player: int
    game_over: bool
    winner: Optional[int]
    live_pieces: dict[int, int]


class MoveResponse(BaseModel):
    accepted: bool
    reason: Optional[RejectionReason] = None
    detail: Optional[str] = None
    state: GameStateResponse


class LegalMovesResponse(BaseModel):
    match_id: UUID
    slot: int
    legal_moves: dict[PieceName, list[Direction]]


# --- WEBSOCKET MESSAGES (server -> client) ---
class StateMessage(BaseModel):
    type: Literal["state"] = "state"
    slot: Optional[int] = None
    state: GameStateResponse


class RejectionMessage(BaseModel):
    type: Literal["rejected"] = "rejected"
    reason: str
    detail: str
