"""
Layout notation: a compact string for a board setup, modelled on the position part of a FEN string.

ex) The starting layout
PHPDP/5/5/5/phpdp
means:
* rows are separated by slashes, row 0 comes first
* a letter is a piece: P = runner, H = straight jumper, D = diagonal jumper
* upper case letters belong to slot 0, lower case letters to slot 1
* a digit denotes that many empty cells after each other
"""

from src.core.exceptions import InvalidLayoutError
from src.duel.pieces import LAYOUT_TO_PIECE, Piece
from src.duel.square import BOARD_DIMENSIONS, Square

STARTING_LAYOUT = "PHPDP/5/5/5/phpdp"
EMPTY_LAYOUT = "/".join(["5"] * BOARD_DIMENSIONS[0])
EMPTY_RUN_DIGITS = "".join(str(n) for n in range(1, BOARD_DIMENSIONS[1] + 1))


def is_valid_layout(layout: str) -> bool:
    """Only checks the structure: right characters, right amount of rows and columns."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_layouts = layout.split("/")
    if len(row_layouts) != num_rows:
        return False

    for row_layout in row_layouts:
        col_count = 0
        for character in row_layout:
            if character in EMPTY_RUN_DIGITS:
                col_count += int(character)
            elif character.lower() in LAYOUT_TO_PIECE:
                col_count += 1
            else:
                return False

        if col_count != num_cols:
            return False
    return True


def parse_layout(layout: str) -> list[Piece]:
    """Create the pieces described by the layout (in reading order)"""
    if not is_valid_layout(layout):
        raise InvalidLayoutError(f"Cannot interpret supplied string as layout: {layout}")

    pieces: list[Piece] = []
    taken_names: set[tuple[int, str]] = set()
    for row, row_layout in enumerate(layout.split("/")):
        col = 0
        for character in row_layout:
            if character in EMPTY_RUN_DIGITS:
                col += int(character)
                continue

            piece = Piece.from_layout(character, Square(row, col))
            if (piece.owner, piece.name) in taken_names:
                raise InvalidLayoutError(
                    f"Layout {layout} gives player {piece.owner} two pieces named {piece.name}."
                )
            taken_names.add((piece.owner, piece.name))
            pieces.append(piece)
            col += 1
    return pieces


def to_layout(pieces: list[Piece]) -> str:
    """Reverse operation. Names are not part of the notation."""
    by_square = {piece.square: piece for piece in pieces}
    return "/".join(
        _row_to_layout(row, by_square) for row in range(BOARD_DIMENSIONS[0])
    )


def _row_to_layout(row: int, by_square: dict[Square, Piece]) -> str:
    characters: list[str] = []
    empty_count = 0
    for col in range(BOARD_DIMENSIONS[1]):
        piece = by_square.get(Square(row, col))
        if piece is None:
            empty_count += 1
            continue
        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(piece.to_layout())

    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)
