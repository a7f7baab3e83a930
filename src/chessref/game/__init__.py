"""Game layer: the rules arbiter for a whole game.

Quick start::

    from chessref.core import Color
    from chessref.game import Game

    game = Game()
    for san in ("f3", "e5", "g4", "Qh4#"):
        game.make_move(game.parse_short_notation(san))
    assert game.result is not None and game.result.winner == Color.BLACK
"""

from chessref.game.game import Game
from chessref.game.history import GameHistory, GameResult
from chessref.game.replay import (
    game_from_pgn,
    game_result_from_pgn,
    game_to_pgn,
    game_to_sans,
    pgn_result_token,
    replay_sans,
)

__all__ = [
    "Game",
    "GameHistory",
    "GameResult",
    "game_from_pgn",
    "game_result_from_pgn",
    "game_to_pgn",
    "game_to_sans",
    "pgn_result_token",
    "replay_sans",
]
