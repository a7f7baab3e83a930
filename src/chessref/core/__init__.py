"""Core domain layer: pure chess rules with no external dependencies.

Quick start::

    from chessref.core import Board, Move

    board = Board.initial()
    board.make_move(Move.from_long_notation("e2e4"))
    print(board.to_string(with_coordinates=True))
"""

from chessref.core.board import Board
from chessref.core.enums import PROMOTION_TYPES, Color, PieceType
from chessref.core.errors import (
    AmbiguousNotationError,
    BoardParseError,
    ChessError,
    EmptySquareError,
    GameOverError,
    InvalidPieceGeometryError,
    InvalidPromotionError,
    KingInCheckError,
    MoveError,
    NoLegalMoveError,
    NotationError,
    NullMoveError,
    OutOfBoundsError,
    OwnPieceBlockedError,
    WrongSideToMoveError,
)
from chessref.core.move import (
    Move,
    format_long_notation,
    is_long_notation,
    parse_long_notation,
)
from chessref.core.move_generator import MoveGenerator
from chessref.core.piece import Piece
from chessref.core.pos import Pos

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "PROMOTION_TYPES",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Pos",
    # Long notation
    "format_long_notation",
    "is_long_notation",
    "parse_long_notation",
    # Errors
    "AmbiguousNotationError",
    "BoardParseError",
    "ChessError",
    "EmptySquareError",
    "GameOverError",
    "InvalidPieceGeometryError",
    "InvalidPromotionError",
    "KingInCheckError",
    "MoveError",
    "NoLegalMoveError",
    "NotationError",
    "NullMoveError",
    "OutOfBoundsError",
    "OwnPieceBlockedError",
    "WrongSideToMoveError",
]
