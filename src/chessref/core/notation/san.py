"""Short algebraic notation: resolving and formatting moves."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chessref.core.enums import PieceType
from chessref.core.errors import (
    AmbiguousNotationError,
    MoveError,
    NoLegalMoveError,
    NotationError,
)
from chessref.core.move import Move
from chessref.core.pos import Pos

if TYPE_CHECKING:
    from chessref.game.game import Game

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_SHORT_CASTLE = frozenset({"O-O", "0-0", "o-o"})
_LONG_CASTLE = frozenset({"O-O-O", "0-0-0", "o-o-o"})
_SUFFIX_CHARS = "+#!?"

_SAN_RE = re.compile(
    r"""
    ^
    (?P<piece>[KQRBN])?
    (?P<file>[a-h])?
    (?P<rank>[1-8])?
    (?P<capture>[x:])?
    (?P<dest>[a-h][1-8])
    (?:
        =(?P<promo_eq>[QRBNqrbn])
      | /(?P<promo_slash>[QRBNqrbn])
      | \((?P<promo_paren>[QRBNqrbn])\)
      | (?P<promo_bare>[QRBNqrbn])
    )?
    [+#]?
    [!?]*
    $
    """,
    re.VERBOSE,
)


def parse_san(game: Game, san: str) -> Move:
    """Resolve a short-notation string into the unique legal :class:`Move`.

    Castling tokens are handled first. Otherwise every piece of the named
    type (pawn by default) belonging to the side to move and matching the
    disambiguators is tried; a candidate survives only if the capture marker
    agrees with the destination and the game accepts the move. A pawn changes
    file only with a capture marker, and a king reaches its castling squares
    only through a castling token.
    """
    text = san.strip()
    clean = text.rstrip(_SUFFIX_CHARS)

    if clean in _SHORT_CASTLE or clean in _LONG_CASTLE:
        return _parse_castle(game, text, clean in _SHORT_CASTLE)

    match = _SAN_RE.match(text)
    if match is None:
        raise NotationError(f"Cannot parse move: {text!r}", text)

    piece_type = _SAN_PIECE_REV.get(match["piece"] or "", PieceType.PAWN)
    dest = Pos.from_notation(match["dest"])
    from_file = ord(match["file"]) - ord("a") if match["file"] else None
    from_rank = int(match["rank"]) - 1 if match["rank"] else None
    is_capture = match["capture"] is not None
    promo_char = (
        match["promo_eq"]
        or match["promo_slash"]
        or match["promo_paren"]
        or match["promo_bare"]
    )
    promotion = _SAN_PIECE_REV[promo_char.upper()] if promo_char else None

    board = game.board
    dest_occupied = board[dest] is not None
    candidates: list[Move] = []
    for origin in board.pieces(game.turn, piece_type):
        if from_file is not None and origin.col != from_file:
            continue
        if from_rank is not None and origin.row != from_rank:
            continue
        if origin == dest:
            continue
        mv = Move(origin, dest, promotion)
        if piece_type == PieceType.KING and board.is_castle_move(mv) is not None:
            continue  # castling is only spelled O-O / O-O-O
        if (
            not is_capture
            and piece_type == PieceType.PAWN
            and origin.col != dest.col
        ):
            continue
        if is_capture != dest_occupied:
            en_passant = (
                is_capture
                and piece_type == PieceType.PAWN
                and board.is_en_passant_move(mv) is not None
            )
            if not en_passant:
                continue
        if game.is_legal(mv):
            candidates.append(mv)

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise NoLegalMoveError(f"No legal move found for {text!r}", text)
    raise AmbiguousNotationError(
        f"Ambiguous move: {text!r} → {candidates}", text, candidates
    )


def _parse_castle(game: Game, text: str, kingside: bool) -> Move:
    row = game.turn.home_row
    mv = Move(Pos(4, row), Pos(6 if kingside else 2, row))
    try:
        game.validate_move(mv)
    except MoveError as exc:
        raise NoLegalMoveError(f"Illegal castling {text!r}: {exc}", text) from exc
    return mv


def move_to_san(game: Game, move: Move) -> str:
    """Convert a legal *move* to short notation in the current position.

    Raises the :class:`MoveError` from validation if *move* is not legal.
    """
    game.validate_move(move)
    board = game.board
    piece = board[move.from_sq]
    assert piece is not None

    if board.is_castle_move(move) is not None:
        san = "O-O" if move.to_sq.col == 6 else "O-O-O"
    elif piece.piece_type == PieceType.PAWN:
        san = ""
        is_capture = (
            board[move.to_sq] is not None
            or board.is_en_passant_move(move) is not None
        )
        if is_capture:
            san += "abcdefgh"[move.from_sq.col] + "x"
        san += str(move.to_sq)
        if move.promotion is not None:
            san += "=" + _SAN_PIECE[move.promotion]
    else:
        san = _SAN_PIECE[piece.piece_type]

        # Disambiguation
        rivals = [
            m.from_sq
            for m in game.legal_moves
            if m.to_sq == move.to_sq
            and m.from_sq != move.from_sq
            and board[m.from_sq] == piece
        ]
        if rivals:
            same_file = any(sq.col == move.from_sq.col for sq in rivals)
            same_rank = any(sq.row == move.from_sq.row for sq in rivals)
            if not same_file:
                san += "abcdefgh"[move.from_sq.col]
            elif not same_rank:
                san += str(move.from_sq.row + 1)
            else:
                san += str(move.from_sq)

        if board[move.to_sq] is not None:
            san += "x"
        san += str(move.to_sq)

    # Check / checkmate suffix
    after = game.copy()
    after.make_move(move)
    if after.is_check():
        san += "#" if after.result is not None else "+"

    return san
