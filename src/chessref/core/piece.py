"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessref.core.enums import Color, PieceType

# Diagram type letter ↔ PieceType (pawns are lowercase, the rest uppercase)
_TYPE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_CHAR_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_CHARS.items()}
_CHAR_COLORS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    A board square holds either a ``Piece`` or ``None``; there is no way to
    express a color without a piece.
    """

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Two-character diagram token, e.g. 'wK' or 'bp'."""
        return self.color.symbol + _TYPE_CHARS[self.piece_type]

    @classmethod
    def from_token(cls, token: str) -> Piece:
        """Create piece from a diagram token, e.g. 'bN' → black knight."""
        if len(token) != 2:
            raise ValueError(f"Invalid piece token: {token!r}")
        color = _CHAR_COLORS.get(token[0])
        if color is None:
            raise ValueError(f"Invalid piece color {token[0]!r}")
        piece_type = _CHAR_TYPES.get(token[1])
        if piece_type is None:
            raise ValueError(f"Invalid piece type {token[1]!r}")
        return cls(color, piece_type)
