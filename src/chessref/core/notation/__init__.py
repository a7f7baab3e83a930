"""Notation package: board diagrams, short notation and PGN."""

from chessref.core.notation.diagram import board_from_diagram, board_to_diagram
from chessref.core.notation.models import ParsedPgn
from chessref.core.notation.pgn import (
    PGN_RESULT_TOKENS,
    build_pgn,
    parse_pgn_game,
    pgn_movetext_from_sans,
)
from chessref.core.notation.san import move_to_san, parse_san

__all__ = [
    "PGN_RESULT_TOKENS",
    "ParsedPgn",
    "board_from_diagram",
    "board_to_diagram",
    "build_pgn",
    "move_to_san",
    "parse_pgn_game",
    "parse_san",
    "pgn_movetext_from_sans",
]
