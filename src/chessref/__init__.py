"""chessref: a dependency-free chess rules arbiter."""

from chessref.core import (
    Board,
    ChessError,
    Color,
    Move,
    MoveError,
    NotationError,
    PieceType,
    Pos,
)
from chessref.game import Game, GameHistory, GameResult

__all__ = [
    "Board",
    "ChessError",
    "Color",
    "Game",
    "GameHistory",
    "GameResult",
    "Move",
    "MoveError",
    "NotationError",
    "PieceType",
    "Pos",
]
