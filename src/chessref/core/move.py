"""Move value object, geometric predicates and long (coordinate) notation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from chessref.core.enums import Color, PieceType
from chessref.core.pos import Pos

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_CHARS_REV: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}

_LONG_NOTATION_RE = re.compile(r"^([a-h][1-8])([a-h][1-8])([qrbnQRBN])?$")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single ply.

    Coordinates are validated by :class:`Pos`; an invalid promotion piece is
    rejected here. Both are programmer errors (``ValueError``).
    """

    from_sq: Pos
    to_sq: Pos
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is not None and not self.promotion.is_valid_for_promotion:
            raise ValueError(f"Invalid promotion piece type: {self.promotion.name}")

    @classmethod
    def from_coords(
        cls,
        from_col: int,
        from_row: int,
        to_col: int,
        to_row: int,
        promotion: PieceType | None = None,
    ) -> Move:
        return cls(Pos(from_col, from_row), Pos(to_col, to_row), promotion)

    @classmethod
    def from_long_notation(cls, text: str) -> Move:
        return parse_long_notation(text)

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def col_delta(self) -> int:
        return self.to_sq.col - self.from_sq.col

    @property
    def row_delta(self) -> int:
        return self.to_sq.row - self.from_sq.row

    @property
    def is_null(self) -> bool:
        return self.from_sq == self.to_sq

    def is_diagonal(self) -> bool:
        return abs(self.col_delta) == abs(self.row_delta)

    def is_straight(self) -> bool:
        return self.from_sq.col == self.to_sq.col or self.from_sq.row == self.to_sq.row

    def is_pawn_step(self, color: Color) -> bool:
        """Same file, one step forward or two from the pawn's starting row.

        Only the shape is checked; see :meth:`is_pawn_move` for promotion.
        """
        if self.col_delta != 0:
            return False
        if self.row_delta == color.forward:
            return True
        return (
            self.row_delta == 2 * color.forward
            and self.from_sq.row == color.pawn_row
        )

    def is_pawn_move(self, color: Color) -> bool:
        """Pawn push shape with a promotion piece iff it lands on the back rank."""
        if not self.is_pawn_step(color):
            return False
        reaches_back_rank = self.to_sq.row == color.back_row
        return reaches_back_rank == (self.promotion is not None)

    def is_pawn_capture(self, color: Color) -> bool:
        """One file over, one row forward for *color*."""
        return abs(self.col_delta) == 1 and self.row_delta == color.forward

    def is_knight_move(self) -> bool:
        return sorted((abs(self.col_delta), abs(self.row_delta))) == [1, 2]

    def is_regular_king_move(self) -> bool:
        """Chebyshev distance of at most one (castling is handled separately)."""
        return abs(self.col_delta) <= 1 and abs(self.row_delta) <= 1

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return format_long_notation(self)

    def __repr__(self) -> str:
        return f"Move({format_long_notation(self)})"


# ── Long notation ────────────────────────────────────────────────────────────


def is_long_notation(text: str) -> bool:
    """Whether *text* is well-formed long notation (pre-screen for user input)."""
    return _LONG_NOTATION_RE.match(text) is not None


def parse_long_notation(text: str) -> Move:
    """Parse 'e2e4' / 'e7e8Q' into a :class:`Move`.

    Malformed text is a caller error; interactive input should be checked
    with :func:`is_long_notation` first.
    """
    match = _LONG_NOTATION_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid move notation: {text!r}")
    from_name, to_name, promo_char = match.groups()
    promotion = _PROMO_CHARS_REV[promo_char.lower()] if promo_char else None
    return Move(Pos.from_notation(from_name), Pos.from_notation(to_name), promotion)


def format_long_notation(move: Move) -> str:
    base = f"{move.from_sq}{move.to_sq}"
    if move.promotion is not None:
        base += _PROMO_CHARS[move.promotion]
    return base
