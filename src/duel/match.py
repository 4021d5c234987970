"""
The Match is the entrypoint into the domain layer for the service layer.
It owns the board and both players, decides whose turn it is, applies validated moves, and detects the end of the game.

All public methods that read or change the match are serialized by the match's own lock:
checking whose turn it is and applying the move happen as one unit.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, Self
from uuid import UUID, uuid4

from src.core.exceptions import (
    GameOverError,
    GameStateError,
    InvalidLayoutError,
    InvalidRequestError,
    MoveRejectedError,
    NotYourTurnError,
)
from src.core.models import MatchModel, PieceModel
from src.core.shared_types import (
    PLAYER_SLOTS,
    Direction,
    PieceType,
    RejectionReason,
    Status,
    opponent_of,
)
from src.duel.board import Board
from src.duel.layout import STARTING_LAYOUT, parse_layout
from src.duel.pieces import Piece, PieceKey, Player
from src.duel.rules import MoveResolution, legal_directions, validate_and_resolve
from src.duel.square import Square

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A move request: which of your pieces, in which direction. Never stored."""

    piece_name: str
    direction: Direction | str


@dataclass(frozen=True)
class Applied:
    state: MatchModel
    resolution: MoveResolution


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    detail: str


MoveOutcome = Applied | Rejected


@dataclass
class Match:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[int, Player]
    current_player: int
    status: Status
    winner: Optional[int] = None
    match_id: UUID = field(default_factory=uuid4)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @classmethod
    def new_match(
        cls, layout: Optional[str] = None, match_id: Optional[UUID] = None
    ) -> Self:
        """Set up the pieces given by the layout (standard setup if not given). Slot 0 moves first."""
        layout = layout or STARTING_LAYOUT
        pieces = parse_layout(layout)
        match = cls._from_pieces(pieces, current_player=0, match_id=match_id)
        # both sides start with at least one piece
        empty_sides = [slot for slot, player in match.players.items() if player.has_lost()]
        if empty_sides:
            raise InvalidLayoutError(
                f"Layout {layout} leaves player {empty_sides[0]} without pieces."
            )
        return match

    @classmethod
    def from_model(cls, model: MatchModel) -> Self:
        """Define how to construct a Match from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        if model.current_player not in PLAYER_SLOTS:
            raise GameStateError(f"Invalid current player: {model.current_player}")
        piece_types = {piece_type.value for piece_type in PieceType}
        for piece in model.pieces:
            if piece.type not in piece_types:
                raise GameStateError(
                    f"Invalid piece type for {piece.name}: {piece.type!r}. \nPick one from {','.join(piece_type.value for piece_type in PieceType)}"
                )

        pieces = [
            Piece(
                type=PieceType(piece.type),
                name=piece.name,
                owner=piece.owner,
                square=Square(piece.row, piece.col),
            )
            for piece in model.pieces
        ]
        match = cls._from_pieces(
            pieces,
            current_player=model.current_player,
            match_id=UUID(model.match_id),
        )
        match.status = Status(model.status)
        match.winner = model.winner
        match._assert_consistent_result()
        return match

    def to_model(self) -> MatchModel:
        """Encode into the format the Service layer uses (the public snapshot)"""
        with self._lock:
            return self._snapshot()

    @property
    def game_over(self) -> bool:
        return self.status == Status.FINISHED

    def apply(self, move: Move, slot: int) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. the match must still be running
        2. it must be your turn
        3. the piece must be one of your live pieces
        4. the rule engine must accept the move
        5. execute the captures and the displacement
        6. end the match or pass the turn

        A rejected move changes nothing.
        """
        with self._lock:
            try:
                resolution = self._resolve(move, slot)
            except MoveRejectedError as exc:
                return Rejected(reason=exc.reason, detail=str(exc))

            self._execute(resolution)
            self._update_status(mover=slot)
            logger.debug(
                "Match %s: player %d moved %s %s to (%d, %d), captured %s",
                self.match_id,
                slot,
                resolution.piece.name,
                resolution.direction.value,
                resolution.destination.row,
                resolution.destination.col,
                [key.name for key in resolution.captured] or "nothing",
            )
            return Applied(state=self._snapshot(), resolution=resolution)

    def legal_moves(self, slot: int) -> dict[str, list[Direction]]:
        """
        Every direction each of your live pieces could move in right now.
        ----
        Empty if the match is over or it is not your turn.
        """
        self._assert_valid_slot(slot)
        with self._lock:
            if self.game_over or slot != self.current_player:
                return {}
            return {
                name: legal_directions(self.board, piece)
                for name, piece in self.players[slot].pieces.items()
            }

    # -- PRIVATE HELPERS ---
    @classmethod
    def _from_pieces(
        cls, pieces: list[Piece], current_player: int, match_id: Optional[UUID]
    ) -> Self:
        board = Board.empty()
        players = {slot: Player(slot) for slot in PLAYER_SLOTS}
        for piece in pieces:
            if piece.owner not in PLAYER_SLOTS or not piece.square.is_within_bounds():
                raise GameStateError(f"Cannot place piece {piece} on this board.")
            if not board.is_empty(piece.square):
                raise GameStateError(
                    f"Two pieces on square ({piece.square.row}, {piece.square.col})."
                )
            if piece.name in players[piece.owner].pieces:
                raise GameStateError(
                    f"Player {piece.owner} has two pieces named {piece.name}."
                )
            players[piece.owner].add(piece)
            board.place(piece.key, piece.square)
        return cls(
            board=board,
            players=players,
            current_player=current_player,
            status=Status.AWAITING_MOVE,
            match_id=match_id or uuid4(),
        )

    def _resolve(self, move: Move, slot: int) -> MoveResolution:
        self._assert_in_progress()
        self._assert_your_turn(slot)
        piece = self.players[slot].piece(move.piece_name)
        return validate_and_resolve(self.board, piece, move.direction)

    def _assert_valid_slot(self, slot: int) -> None:
        if slot not in PLAYER_SLOTS:
            raise InvalidRequestError(f"There is no player slot {slot}.")

    def _assert_consistent_result(self) -> None:
        """A running match has no winner and pieces on both sides. A finished one was won by the player whose opponent has no pieces left."""
        if not self.game_over:
            if self.winner is not None:
                raise GameStateError(
                    f"Match is still running but player {self.winner} is recorded as winner."
                )
            if any(player.has_lost() for player in self.players.values()):
                raise GameStateError("Match is still running but one side has no pieces left.")
            return
        if self.winner not in PLAYER_SLOTS:
            raise GameStateError(f"Match is finished without a valid winner: {self.winner}")
        if not self.players[opponent_of(self.winner)].has_lost():
            raise GameStateError(
                f"Player {self.winner} is recorded as winner but the opponent still has pieces."
            )

    def _assert_in_progress(self) -> None:
        if self.game_over:
            raise GameOverError(
                f"Match is finished. Player {self.winner} won. No more moves accepted."
            )

    def _assert_your_turn(self, slot: int) -> None:
        """You must wait for your turn before making a move."""
        if slot != self.current_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.current_player} to make a move first."
            )

    def _execute(self, resolution: MoveResolution) -> None:
        """
        Board and player updates, in order:
        ---

        1. capture whatever opponent piece stands on the destination
        2. move the piece
        3. capture whatever opponent piece stood on the cell jumped over
        """
        if resolution.destination_capture is not None:
            self._capture(resolution.destination_capture, resolution.destination)

        piece = self.players[resolution.piece.owner].pieces[resolution.piece.name]
        self.board.clear(resolution.origin)
        self.board.place(piece.key, resolution.destination)
        piece.square = resolution.destination

        if resolution.midpoint_capture is not None:
            # for the type checker: a midpoint capture only exists for jumps
            assert resolution.midpoint is not None
            self._capture(resolution.midpoint_capture, resolution.midpoint)

    def _capture(self, key: PieceKey, square: Square) -> None:
        """Removed from its owner's collection and from the board at the same time."""
        self.players[key.owner].remove(key.name)
        self.board.clear(square)

    def _update_status(self, mover: int) -> None:
        """Finish the match when either side has run out of pieces, otherwise pass the turn."""
        loser = next(
            (slot for slot, player in self.players.items() if player.has_lost()),
            None,
        )
        if loser is None:
            self.current_player = opponent_of(mover)
            return

        self.status = Status.FINISHED
        self.winner = opponent_of(loser)
        logger.info("Match %s finished. Player %d wins.", self.match_id, self.winner)

    def _snapshot(self) -> MatchModel:
        return MatchModel(
            match_id=str(self.match_id),
            pieces=[
                PieceModel(
                    name=piece.name,
                    type=piece.type.value,
                    owner=piece.owner,
                    row=piece.square.row,
                    col=piece.square.col,
                )
                for slot in PLAYER_SLOTS
                for piece in self.players[slot].pieces.values()
            ],
            current_player=self.current_player,
            status=self.status.value,
            winner=self.winner,
        )
