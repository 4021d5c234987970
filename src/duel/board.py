"""The board only records which piece sits where. All rules live in `rules.py` and `match.py`"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import OutOfBoundsError
from src.duel.pieces import PieceKey
from src.duel.square import Square, all_squares


@dataclass
class Board:
    cells: dict[Square, Optional[PieceKey]]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: None for square in all_squares()})

    def occupant(self, square: Square) -> Optional[PieceKey]:
        self._assert_on_board(square)
        return self.cells[square]

    def is_empty(self, square: Square) -> bool:
        return self.occupant(square) is None

    def place(self, key: PieceKey, square: Square) -> None:
        """Raw mutator: legality must already have been checked by the caller"""
        self._assert_on_board(square)
        self.cells[square] = key

    def clear(self, square: Square) -> None:
        self._assert_on_board(square)
        self.cells[square] = None

    def occupied_squares(self) -> dict[Square, PieceKey]:
        return {square: key for square, key in self.cells.items() if key is not None}

    def _assert_on_board(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(
                f"Square ({square.row}, {square.col}) is not on the board."
            )
