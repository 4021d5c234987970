"""
Movement rules per piece type

Key idea: a single static table (PIECE_CATALOG) tells, for each piece type, which direction tokens it accepts,
where each token takes it, and whether it steps or jumps over the cell in between.

Legality against the actual board is checked later by the rule engine.
"""

from dataclasses import dataclass
from enum import Enum, auto

from src.core.shared_types import Direction, PieceType

# (delta row, delta column). Delta row is counted "forward", i.e. towards the opponent's home row.
Vector = tuple[int, int]


class MoveKind(Enum):
    STEP = auto()
    JUMP = auto()


@dataclass(frozen=True)
class MovementRule:
    kind: MoveKind
    vectors: dict[Direction, Vector]

    @property
    def directions(self) -> frozenset[Direction]:
        return frozenset(self.vectors)

    @property
    def is_jump(self) -> bool:
        return self.kind == MoveKind.JUMP

    def allows(self, direction: Direction) -> bool:
        return direction in self.vectors


# --- THE CATALOG ---
PIECE_CATALOG: dict[PieceType, MovementRule] = {
    PieceType.RUNNER: MovementRule(
        kind=MoveKind.STEP,
        vectors={
            Direction.FORWARD: (1, 0),
            Direction.BACK: (-1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        },
    ),
    PieceType.JUMPER_STRAIGHT: MovementRule(
        kind=MoveKind.JUMP,
        vectors={
            Direction.FORWARD: (2, 0),
            Direction.BACK: (-2, 0),
            Direction.LEFT: (0, -2),
            Direction.RIGHT: (0, 2),
        },
    ),
    PieceType.JUMPER_DIAGONAL: MovementRule(
        kind=MoveKind.JUMP,
        vectors={
            Direction.FORWARD_LEFT: (2, -1),
            Direction.FORWARD_RIGHT: (2, 1),
            Direction.BACK_LEFT: (-2, -1),
            Direction.BACK_RIGHT: (-2, 1),
        },
    ),
}


def forward_sign(owner: int) -> int:
    """Slot 0 starts on row 0 and moves down the rows, slot 1 starts on row 4 and moves up."""
    return 1 if owner == 0 else -1


def board_vector(rule: MovementRule, direction: Direction, owner: int) -> Vector:
    """Translate the catalog vector (relative to the owner) into a displacement on the board"""
    drow, dcol = rule.vectors[direction]
    return drow * forward_sign(owner), dcol
