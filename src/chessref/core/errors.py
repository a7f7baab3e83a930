"""Recoverable, caller-facing errors.

Contract violations (out-of-range coordinates, malformed long notation handed
straight to the parser, asking for check on a board without that king) are
not part of this hierarchy: they raise ``ValueError`` and signal a bug in the
caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessref.core.move import Move
    from chessref.core.pos import Pos


class ChessError(Exception):
    """Base class for errors a caller is expected to handle."""


# ── Board diagrams ───────────────────────────────────────────────────────────


class BoardParseError(ChessError):
    """A board diagram could not be parsed.

    ``line`` is the 1-based index among the non-blank lines; ``pos`` is the
    square the offending token maps to, when there is one.
    """

    def __init__(
        self, message: str, *, line: int | None = None, pos: Pos | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.pos = pos


# ── Move legality ────────────────────────────────────────────────────────────


class MoveError(ChessError):
    """A move was rejected by the legality oracle."""

    def __init__(self, message: str, move: Move | None = None) -> None:
        super().__init__(message)
        self.move = move


class OutOfBoundsError(MoveError):
    pass


class NullMoveError(MoveError):
    pass


class EmptySquareError(MoveError):
    pass


class WrongSideToMoveError(MoveError):
    pass


class OwnPieceBlockedError(MoveError):
    pass


class InvalidPieceGeometryError(MoveError):
    """The piece cannot move that way (shape, blocked path, castling rights)."""


class InvalidPromotionError(MoveError):
    pass


class KingInCheckError(MoveError):
    """The move would leave the mover's own king in check."""


class GameOverError(MoveError):
    pass


# ── Notation ─────────────────────────────────────────────────────────────────


class NotationError(ChessError):
    """Text could not be read as a move."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class AmbiguousNotationError(NotationError):
    def __init__(self, message: str, text: str, candidates: list[Move]) -> None:
        super().__init__(message, text)
        self.candidates = candidates


class NoLegalMoveError(NotationError):
    pass
