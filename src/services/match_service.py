"""
Orchestration of communication from the transport layer to the match (and the reverse direction).

The session coordinator: hands out player slots in connection order and forwards moves to the match.
"""

import logging
import threading
from typing import Optional

from src.api.models import (
    CellState,
    GameStateResponse,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
)
from src.core.exceptions import InvalidRequestError, MatchFullError
from src.core.models import MatchModel
from src.core.shared_types import PLAYER_SLOTS, PieceType, Status
from src.duel.match import Applied, Match, Move
from src.duel.square import BOARD_DIMENSIONS

logger = logging.getLogger(__name__)


class MatchService:
    """Orchestration of layers for a single match."""

    def __init__(self, match: Match) -> None:
        self.match = match
        self._slots: dict[str, int] = {}
        self._next_slot = 0
        self._lock = threading.Lock()

    # -- Session logic ---
    def connect(self, connection_id: str) -> int:
        """
        Assign the next free slot to a new connection.
        ---

        First connection gets slot 0, the second slot 1. Slots are never handed out twice,
        so once both are taken every further connection is refused (also after a disconnect).
        """
        with self._lock:
            if self._next_slot >= len(PLAYER_SLOTS):
                raise MatchFullError(
                    f"Match {self.match.match_id} already has two players."
                )
            slot = PLAYER_SLOTS[self._next_slot]
            self._next_slot += 1
            self._slots[connection_id] = slot
        logger.info("Connection %s plays as player %d", connection_id, slot)
        return slot

    def disconnect(self, connection_id: str) -> Optional[int]:
        with self._lock:
            slot = self._slots.pop(connection_id, None)
        if slot is not None:
            logger.info("Player %d (connection %s) left", slot, connection_id)
        return slot

    # -- Game logic ---
    def make_move(self, slot: int, request: MoveRequest) -> MoveResponse:
        """Forward the move to the match. A rejection is not an error: the match just stays as it was."""
        self._assert_valid_slot(slot)
        outcome = self.match.apply(Move(request.piece_name, request.direction), slot)

        if isinstance(outcome, Applied):
            return MoveResponse(
                accepted=True, state=self._create_state_response(outcome.state)
            )

        logger.warning(
            "Rejected move %s %s by player %d: %s",
            request.piece_name,
            request.direction,
            slot,
            outcome.detail,
        )
        return MoveResponse(
            accepted=False,
            reason=outcome.reason,
            detail=outcome.detail,
            state=self.game_state(),
        )

    def game_state(self) -> GameStateResponse:
        """Current public snapshot. Sent at connect time and after every accepted move."""
        return self._create_state_response(self.match.to_model())

    def legal_moves(self, slot: int) -> LegalMovesResponse:
        self._assert_valid_slot(slot)
        return LegalMovesResponse(
            match_id=self.match.match_id,
            slot=slot,
            legal_moves=self.match.legal_moves(slot),
        )

    # -- Internal helpers --
    def _create_state_response(self, model: MatchModel) -> GameStateResponse:
        """Convert info in MatchModel to a GameStateResponse (with the full 5x5 grid)."""
        num_rows, num_cols = BOARD_DIMENSIONS
        board: list[list[Optional[CellState]]] = [
            [None] * num_cols for _ in range(num_rows)
        ]
        live_pieces = {slot: 0 for slot in PLAYER_SLOTS}
        for piece in model.pieces:
            board[piece.row][piece.col] = CellState(
                name=piece.name, type=PieceType(piece.type), owner=piece.owner
            )
            live_pieces[piece.owner] += 1

        return GameStateResponse(
            match_id=model.match_id,
            board=board,
            current_player=model.current_player,
            game_over=model.status == Status.FINISHED,
            winner=model.winner,
            live_pieces=live_pieces,
        )

    def _assert_valid_slot(self, slot: int) -> None:
        if slot not in PLAYER_SLOTS:
            raise InvalidRequestError(f"There is no player slot {slot}.")
