"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessref.core.board import Board
from chessref.core.enums import Color, PieceType

_LETTER_TYPES: dict[str, PieceType] = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}


def _board_from_rows(*rows: str) -> Board:
    """Board from eight 8-character rows, rank 8 first.

    '.' is an empty square; uppercase letters are white pieces and lowercase
    letters black ones, as in FEN.
    """
    assert len(rows) == 8
    board = Board()
    for line_idx, line in enumerate(rows):
        assert len(line) == 8, line
        for col, ch in enumerate(line):
            if ch == ".":
                continue
            color = Color.WHITE if ch.isupper() else Color.BLACK
            board.set(col, 7 - line_idx, _LETTER_TYPES[ch.upper()], color)
    return board


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Build a board from compact FEN-like rows."""
    return _board_from_rows


# Black to move; rooks on a8/h8 and king on e8 untouched, path clear.
CASTLING_BASE_DIAGRAM = """
8  bR :: -- :: bK :: -- bR
7  :: -- :: -- :: -- bp --
6  -- :: -- :: -- :: -- ::
5  :: -- :: -- :: -- :: --
4  -- :: wp :: -- :: -- ::
3  :: -- :: -- wK -- :: --
2  -- :: -- :: -- :: -- ::
1  :: -- :: -- :: -- :: --
    a  b  c  d  e  f  g  h
"""


@pytest.fixture
def castling_board() -> Board:
    return Board.from_string(CASTLING_BASE_DIAGRAM)
