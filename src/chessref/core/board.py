"""Board - piece placement on an 8x8 board and capture geometry."""

from __future__ import annotations

from chessref.core.enums import Color, PieceType
from chessref.core.move import Move
from chessref.core.piece import Piece
from chessref.core.pos import Pos

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

_KING_COL = 4
_SHORT_CASTLE_COL = 6
_LONG_CASTLE_COL = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(col: int, row: int) -> int:
    if not Pos.in_bounds(col, row):
        raise ValueError(
            f"Column and row must be between 0 and 7, got ({col}, {row})"
        )
    return row * 8 + col


class Board:
    """64 squares stored rank by rank (a1..h1, a2..h2, ..., a8..h8).

    The board knows geometry only: no side to move, no history and no full
    legality. Copies are independent snapshots, which is how "what if" checks
    are done without any undo logic.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def at(self, col: int, row: int) -> Piece | None:
        return self._squares[_index(col, row)]

    def set(self, col: int, row: int, piece_type: PieceType, color: Color) -> None:
        self._squares[_index(col, row)] = Piece(color, piece_type)

    def clear(self, col: int, row: int) -> None:
        self._squares[_index(col, row)] = None

    def __getitem__(self, pos: Pos) -> Piece | None:
        return self._squares[pos.row * 8 + pos.col]

    def __setitem__(self, pos: Pos, piece: Piece | None) -> None:
        self._squares[pos.row * 8 + pos.col] = piece

    def is_empty(self, pos: Pos) -> bool:
        return self[pos] is None

    def is_occupied_by(self, pos: Pos, color: Color) -> bool:
        piece = self[pos]
        return piece is not None and piece.color == color

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Pos]:
        """Squares occupied by *color*'s *piece_type*, in row-major order."""
        wanted = Piece(color, piece_type)
        return [
            Pos(idx & 7, idx >> 3)
            for idx, piece in enumerate(self._squares)
            if piece == wanted
        ]

    def find_king(self, color: Color) -> Pos | None:
        wanted = Piece(color, PieceType.KING)
        for idx, piece in enumerate(self._squares):
            if piece == wanted:
                return Pos(idx & 7, idx >> 3)
        return None

    # -- Capture geometry ---------------------------------------------------

    def is_possible_rook_capture(self, mv: Move) -> bool:
        """Straight line with nothing strictly between source and target.

        Colors, checks and turn order are not considered here.
        """
        return mv.is_straight() and self._is_path_clear(mv)

    def is_possible_bishop_capture(self, mv: Move) -> bool:
        return mv.is_diagonal() and self._is_path_clear(mv)

    def is_possible_queen_capture(self, mv: Move) -> bool:
        return self.is_possible_rook_capture(mv) or self.is_possible_bishop_capture(mv)

    def _is_path_clear(self, mv: Move) -> bool:
        # Only called for straight or diagonal moves.
        dcol = (mv.col_delta > 0) - (mv.col_delta < 0)
        drow = (mv.row_delta > 0) - (mv.row_delta < 0)
        steps = max(abs(mv.col_delta), abs(mv.row_delta))
        col, row = mv.from_sq.col, mv.from_sq.row
        for _ in range(steps - 1):
            col += dcol
            row += drow
            if self._squares[row * 8 + col] is not None:
                return False
        return True

    # -- Special moves ------------------------------------------------------

    def is_en_passant_move(self, mv: Move) -> Pos | None:
        """Square of the pawn captured en passant, if *mv* has that shape.

        A pawn capturing diagonally onto an empty square; the victim sits on
        the destination file and the source rank. History is not consulted.
        """
        piece = self[mv.from_sq]
        if piece is None or piece.piece_type != PieceType.PAWN:
            return None
        if not mv.is_pawn_capture(piece.color):
            return None
        if self[mv.to_sq] is not None:
            return None
        return Pos(mv.to_sq.col, mv.from_sq.row)

    def is_castle_move(self, mv: Move) -> tuple[Pos, Pos] | None:
        """Rook squares (before, after) if *mv* is a king castling from e1/e8.

        Only the squares and the king's identity are checked: not the rook,
        not history, not attacked squares.
        """
        piece = self[mv.from_sq]
        if piece is None or piece.piece_type != PieceType.KING:
            return None
        row = piece.color.home_row
        if mv.from_sq != Pos(_KING_COL, row) or mv.to_sq.row != row:
            return None
        if mv.to_sq.col == _SHORT_CASTLE_COL:
            return Pos(7, row), Pos(5, row)
        if mv.to_sq.col == _LONG_CASTLE_COL:
            return Pos(0, row), Pos(3, row)
        return None

    def is_possible_castle_move(self, mv: Move) -> tuple[Pos, Pos] | None:
        """:meth:`is_castle_move` plus rook presence, empty path and safety.

        Whether king or rook moved before is unknown to the board; the game
        checks that against its history.
        """
        rooks = self.is_castle_move(mv)
        if rooks is None:
            return None
        rook_pos, _ = rooks
        king = self[mv.from_sq]
        assert king is not None
        if self[rook_pos] != Piece(king.color, PieceType.ROOK):
            return None

        row = mv.from_sq.row
        if mv.to_sq.col == _SHORT_CASTLE_COL:
            crossed, between = range(4, 7), range(5, 7)
        else:
            crossed, between = range(2, 5), range(1, 4)
        for col in between:
            if self.at(col, row) is not None:
                return None
        opponent = king.color.opposite
        for col in crossed:
            if self.is_under_attack(Pos(col, row), opponent):
                return None
        return rooks

    # -- Attack detection ---------------------------------------------------

    def is_under_attack(self, target: Pos, attacker: Color) -> bool:
        """Is *target* attacked by any piece of *attacker*?"""
        for idx, piece in enumerate(self._squares):
            if piece is None or piece.color != attacker:
                continue
            source = Pos(idx & 7, idx >> 3)
            if source == target:
                continue
            mv = Move(source, target)
            pt = piece.piece_type
            if pt == PieceType.PAWN:
                hit = mv.is_pawn_capture(attacker)
            elif pt == PieceType.KNIGHT:
                hit = mv.is_knight_move()
            elif pt == PieceType.BISHOP:
                hit = self.is_possible_bishop_capture(mv)
            elif pt == PieceType.ROOK:
                hit = self.is_possible_rook_capture(mv)
            elif pt == PieceType.QUEEN:
                hit = self.is_possible_queen_capture(mv)
            else:
                hit = mv.is_regular_king_move()
            if hit:
                return True
        return False

    def is_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? A missing king is a caller error."""
        king = self.find_king(color)
        if king is None:
            raise ValueError(f"No {color.name} king on board")
        return self.is_under_attack(king, color.opposite)

    # -- Mutation / copying -------------------------------------------------

    def make_move(self, mv: Move) -> None:
        """Apply *mv* without any legality check.

        En passant captures and castling rook moves are recognised from the
        board as it stands before the move.
        """
        piece = self[mv.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {mv.from_sq}")
        en_passant_victim = self.is_en_passant_move(mv)
        castle_rooks = self.is_castle_move(mv)

        placed = piece if mv.promotion is None else Piece(piece.color, mv.promotion)
        self[mv.from_sq] = None
        self[mv.to_sq] = placed

        if en_passant_victim is not None:
            self[en_passant_victim] = None
        if castle_rooks is not None:
            rook_from, rook_to = castle_rooks
            self[rook_from] = None
            self[rook_to] = Piece(piece.color, PieceType.ROOK)

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory / text -----------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b.set(col, 1, PieceType.PAWN, Color.WHITE)
            b.set(col, 6, PieceType.PAWN, Color.BLACK)
        for col, pt in enumerate(_BACK_RANK):
            b.set(col, 0, pt, Color.WHITE)
            b.set(col, 7, pt, Color.BLACK)
        return b

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Parse a board diagram (see :mod:`chessref.core.notation.diagram`)."""
        from chessref.core.notation.diagram import board_from_diagram

        return board_from_diagram(text)

    def to_string(self, with_coordinates: bool = False) -> str:
        from chessref.core.notation.diagram import board_to_diagram

        return board_to_diagram(self, with_coordinates)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        return self.to_string(with_coordinates=True)
