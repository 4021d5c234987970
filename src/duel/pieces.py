"""Defines the pieces and the players that own them"""

from dataclasses import dataclass, field
from typing import Self

from src.core.exceptions import UnknownPieceError
from src.core.shared_types import PieceType
from src.duel.square import Square

LAYOUT_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.RUNNER,
    "h": PieceType.JUMPER_STRAIGHT,
    "d": PieceType.JUMPER_DIAGONAL,
}

PIECE_TO_LAYOUT: dict[PieceType, str] = {
    value: key for key, value in LAYOUT_TO_PIECE.items()
}


@dataclass(frozen=True)
class PieceKey:
    """What a board cell holds: enough to find the piece in its owner's collection, but not the piece itself."""

    owner: int
    name: str


@dataclass
class Piece:
    type: PieceType
    name: str
    owner: int
    square: Square

    @property
    def key(self) -> PieceKey:
        return PieceKey(self.owner, self.name)

    @classmethod
    def from_layout(cls, character: str, square: Square) -> Self:
        # upper case: slot 0, lower case: slot 1
        owner = 0 if character.isupper() else 1
        piece_type = LAYOUT_TO_PIECE[character.lower()]
        return cls(piece_type, default_name(piece_type, square), owner, square)

    def to_layout(self) -> str:
        code = PIECE_TO_LAYOUT[self.type]
        return code.upper() if self.owner == 0 else code


def default_name(piece_type: PieceType, square: Square) -> str:
    """Pieces are named after their type code and the (1-based) column they start in: P1, H2, ..."""
    return f"{PIECE_TO_LAYOUT[piece_type].upper()}{square.col + 1}"


@dataclass
class Player:
    slot: int
    pieces: dict[str, Piece] = field(default_factory=dict)

    @property
    def live_count(self) -> int:
        return len(self.pieces)

    def has_lost(self) -> bool:
        return self.live_count == 0

    def piece(self, name: str) -> Piece:
        if name not in self.pieces:
            raise UnknownPieceError(
                f"Player {self.slot} has no live piece named {name!r}. Live pieces: {', '.join(self.pieces) or 'none'}"
            )
        return self.pieces[name]

    def add(self, piece: Piece) -> None:
        self.pieces[piece.name] = piece

    def remove(self, name: str) -> Piece:
        return self.pieces.pop(name)
