"""Core enumerations for chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: +1 for white, -1 for black."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_row(self) -> int:
        """Row of the king and rooks in the starting position."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_row(self) -> int:
        """Row the pawns start on (the only row allowing a two-step advance)."""
        return 1 if self == Color.WHITE else 6

    @property
    def back_row(self) -> int:
        """Promotion row for this color's pawns."""
        return 7 if self == Color.WHITE else 0

    @property
    def symbol(self) -> str:
        """Diagram prefix: ``w`` or ``b``."""
        return "w" if self == Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def is_valid_for_promotion(self) -> bool:
        return self in PROMOTION_TYPES


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
