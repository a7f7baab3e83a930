"""Per-square legal move enumeration."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessref.core.board import KING_OFFSETS, KNIGHT_OFFSETS
from chessref.core.enums import Color, PieceType
from chessref.core.move import Move
from chessref.core.pos import Pos, all_positions

if TYPE_CHECKING:
    from chessref.game.game import Game


ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_CASTLE_TARGET_COLS: tuple[int, ...] = (6, 2)

_ALL_POSITIONS = tuple(all_positions())


class MoveGenerator:
    """Generates legal moves for the side to move of a :class:`Game`.

    Candidates are produced from per-piece patterns and every one of them is
    passed through ``Game.validate_move`` before being yielded, so callers
    never see an illegal move. The generator only reads the game; validation
    never calls back into generation.
    """

    __slots__ = ("_game",)

    def __init__(self, game: Game) -> None:
        self._game = game

    # -- Public API ---------------------------------------------------------

    def legal_moves(self) -> list[Move]:
        """All legal moves for the side to move, sorted by origin square."""
        board = self._game.board
        color = self._game.turn
        moves: list[Move] = []
        for pos in _ALL_POSITIONS:
            if board.is_occupied_by(pos, color):
                moves.extend(self.moves_from(pos))
        return moves

    def moves_from(self, pos: Pos) -> Iterator[Move]:
        """Lazily yield the legal moves of the piece on *pos*.

        Each call returns a fresh iterator; an empty square yields nothing.
        """
        piece = self._game.board[pos]
        if piece is None:
            return
        for mv in self._candidates(pos, piece.piece_type, piece.color):
            if self._game.is_legal(mv):
                yield mv

    # -- Pseudo-legal candidates (private) ----------------------------------

    def _candidates(
        self, pos: Pos, piece_type: PieceType, color: Color
    ) -> Iterator[Move]:
        if piece_type == PieceType.PAWN:
            return self._gen_pawn(pos, color)
        if piece_type == PieceType.KNIGHT:
            return self._gen_offsets(pos, KNIGHT_OFFSETS)
        if piece_type == PieceType.BISHOP:
            return self._gen_sliding(pos, color, BISHOP_DIRS)
        if piece_type == PieceType.ROOK:
            return self._gen_sliding(pos, color, ROOK_DIRS)
        if piece_type == PieceType.QUEEN:
            return self._gen_sliding(pos, color, QUEEN_DIRS)
        return self._gen_king(pos, color)

    def _gen_pawn(self, pos: Pos, color: Color) -> Iterator[Move]:
        forward = color.forward
        targets = [pos.offset(0, forward)]
        if pos.row == color.pawn_row:
            targets.append(pos.offset(0, 2 * forward))
        targets.append(pos.offset(1, forward))
        targets.append(pos.offset(-1, forward))

        for to_sq in targets:
            if to_sq is None:
                continue
            if to_sq.row == color.back_row:
                # Only the queen is offered; the other promotion pieces are
                # legal exactly when this one is.
                yield Move(pos, to_sq, PieceType.QUEEN)
            else:
                yield Move(pos, to_sq)

    def _gen_offsets(
        self, pos: Pos, offsets: tuple[tuple[int, int], ...]
    ) -> Iterator[Move]:
        for dcol, drow in offsets:
            to_sq = pos.offset(dcol, drow)
            if to_sq is not None:
                yield Move(pos, to_sq)

    def _gen_sliding(
        self,
        pos: Pos,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> Iterator[Move]:
        board = self._game.board
        for dcol, drow in directions:
            to_sq = pos.offset(dcol, drow)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    yield Move(pos, to_sq)
                    to_sq = to_sq.offset(dcol, drow)
                    continue
                if target.color != color:
                    yield Move(pos, to_sq)
                break

    def _gen_king(self, pos: Pos, color: Color) -> Iterator[Move]:
        yield from self._gen_offsets(pos, KING_OFFSETS)

        # Castling destinations; rights and safety are the validator's job.
        if pos != Pos(4, color.home_row):
            return
        for col in _CASTLE_TARGET_COLS:
            yield Move(pos, Pos(col, color.home_row))
