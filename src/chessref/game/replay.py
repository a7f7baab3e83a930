"""Replaying games from short notation and PGN, and writing them back."""

from __future__ import annotations

from collections.abc import Iterable

from chessref.core.enums import Color
from chessref.core.notation.pgn import build_pgn, parse_pgn_game
from chessref.core.notation.san import move_to_san
from chessref.game.game import Game
from chessref.game.history import GameResult


def pgn_result_token(result: GameResult | None) -> str:
    """PGN result token for *result*; ``*`` while the game is in progress."""
    if result is None:
        return "*"
    if result.winner == Color.WHITE:
        return "1-0"
    if result.winner == Color.BLACK:
        return "0-1"
    return "1/2-1/2"


def game_result_from_pgn(token: str) -> GameResult | None:
    """Inverse of :func:`pgn_result_token`."""
    if token == "1-0":
        return GameResult(Color.WHITE)
    if token == "0-1":
        return GameResult(Color.BLACK)
    if token == "1/2-1/2":
        return GameResult(None)
    return None


def replay_sans(sans: Iterable[str], game: Game | None = None) -> Game:
    """Play short-notation moves in order, starting from *game* or the standard start.

    The first unreadable or illegal move raises; moves before it stay played.
    """
    if game is None:
        game = Game()
    for san in sans:
        game.make_move(game.parse_short_notation(san))
    return game


def game_from_pgn(pgn_text: str) -> Game:
    """Replay the mainline of a single PGN game from the standard start."""
    return replay_sans(parse_pgn_game(pgn_text).sans)


def game_to_sans(game: Game) -> list[str]:
    """Short notation for every move in *game*'s history.

    Moves are replayed on a fresh game from the recorded initial position,
    since formatting depends on the position each move was played in.
    """
    history = game.history
    if history.initial_board is None:
        replay = Game()
    else:
        replay = Game.from_board(
            history.initial_board.copy(), history.initial_turn or Color.WHITE
        )
    sans: list[str] = []
    for move in history:
        sans.append(move_to_san(replay, move))
        replay.make_move(move)
    return sans


def game_to_pgn(game: Game, headers: dict[str, str] | None = None) -> str:
    """Single-game PGN for *game*; the ``Result`` tag follows the game state."""
    result_token = pgn_result_token(game.result)
    tags = dict(headers or {})
    tags["Result"] = result_token
    return build_pgn(tags, game_to_sans(game), result_token)
