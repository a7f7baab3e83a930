"""Game state and the legality oracle."""

from __future__ import annotations

import logging

from chessref.core.board import Board
from chessref.core.enums import PROMOTION_TYPES, Color, PieceType
from chessref.core.errors import (
    EmptySquareError,
    GameOverError,
    InvalidPieceGeometryError,
    InvalidPromotionError,
    KingInCheckError,
    MoveError,
    NullMoveError,
    OutOfBoundsError,
    OwnPieceBlockedError,
    WrongSideToMoveError,
)
from chessref.core.move import Move
from chessref.core.move_generator import MoveGenerator
from chessref.core.notation.san import parse_san
from chessref.core.piece import Piece
from chessref.core.pos import Pos
from chessref.game.history import GameHistory, GameResult

_LOGGER = logging.getLogger(__name__)


class Game:
    """A chess game from some starting position.

    The game owns copies of the board and history it is given and mutates
    only through :meth:`make_move`. After every move it recomputes the check flag and the
    full list of legal moves; when the side to move has none, the game is
    over (checkmate if in check, stalemate otherwise).

    Castling and en-passant rights are derived from the history each time
    they are needed. A game built from an arbitrary board with an empty
    history therefore assumes no king or rook has ever moved.
    """

    __slots__ = (
        "_board",
        "_history",
        "_turn",
        "_is_check",
        "_legal_moves",
        "_result",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        history: GameHistory | None = None,
    ) -> None:
        if board is None:
            board = Board.initial()
        if history is None:
            history = GameHistory()
            if board != Board.initial() or turn != Color.WHITE:
                history.initial_board = board.copy()
                history.initial_turn = turn
        else:
            history = history.copy()

        self._board = board.copy()
        self._history = history
        self._turn = turn
        self._is_check = False
        self._legal_moves: list[Move] = []
        self._result: GameResult | None = None
        self._refresh()

    @classmethod
    def from_board(cls, board: Board, turn: Color) -> Game:
        """Start from an arbitrary position with an empty history."""
        return cls(board, turn)

    @classmethod
    def from_board_with_history(
        cls, board: Board, turn: Color, history: GameHistory
    ) -> Game:
        """Start from *board*, taking *history* as the moves that led to it."""
        return cls(board, turn, history)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The live board.

        Treat it as read-only: the cached check flag and legal moves follow
        :meth:`make_move` only.
        """
        return self._board

    @property
    def history(self) -> GameHistory:
        """A snapshot of the moves played so far."""
        return self._history.copy()

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def result(self) -> GameResult | None:
        return self._result

    @property
    def is_over(self) -> bool:
        return self._result is not None

    @property
    def legal_moves(self) -> tuple[Move, ...]:
        """All legal moves for the side to move, sorted by origin square."""
        return tuple(self._legal_moves)

    def is_check(self) -> bool:
        """Is the side to move in check?"""
        return self._is_check

    # ── Moves ────────────────────────────────────────────────────────────

    def make_move(self, mv: Move) -> None:
        """Validate and play *mv*. On error the game is left untouched."""
        if self._result is not None:
            raise GameOverError("Game is over", mv)
        try:
            self.validate_move(mv)
        except MoveError as exc:
            _LOGGER.debug("Rejected %s: %s", mv, exc)
            raise

        self._board.make_move(mv)
        self._history.append(mv)
        self._turn = self._turn.opposite
        self._refresh()
        _LOGGER.debug("Played %s, %s to move", mv, self._turn)

        if not self._legal_moves:
            winner = self._turn.opposite if self._is_check else None
            self._result = GameResult(winner)
            _LOGGER.info(
                "Game over after %d plies: %s", len(self._history), self._result
            )

    def parse_short_notation(self, text: str) -> Move:
        """Resolve short algebraic notation (e.g. 'Nbd7', 'exd6', 'O-O')."""
        return parse_san(self, text)

    def get_moves_from(self, pos: Pos) -> list[Move]:
        """Legal moves of the piece on *pos* (empty for other squares)."""
        start: int | None = None
        for idx, mv in enumerate(self._legal_moves):
            if mv.from_sq == pos:
                if start is None:
                    start = idx
            elif start is not None:
                return self._legal_moves[start:idx]
        if start is None:
            return []
        return self._legal_moves[start:]

    # ── Legality oracle ──────────────────────────────────────────────────

    def is_legal(self, mv: Move) -> bool:
        try:
            self.validate_move(mv)
        except MoveError:
            return False
        return True

    def validate_move(self, mv: Move) -> None:
        """Raise the matching :class:`MoveError` if *mv* is illegal now.

        Never mutates the game.
        """
        for col, row in (mv.from_sq.as_tuple(), mv.to_sq.as_tuple()):
            if not Pos.in_bounds(col, row):
                raise OutOfBoundsError("Out of bounds", mv)

        if mv.is_null:
            raise NullMoveError("Can't move to the same square", mv)

        board = self._board
        piece = board[mv.from_sq]
        if piece is None:
            raise EmptySquareError(f"No piece at {mv.from_sq}", mv)
        color = piece.color
        if color != self._turn:
            raise WrongSideToMoveError("Cannot move the opponent's piece", mv)
        if board.is_occupied_by(mv.to_sq, color):
            raise OwnPieceBlockedError("Cannot move onto your own piece", mv)

        if not self._is_valid_piece_move(mv, piece):
            raise InvalidPieceGeometryError(
                f"Invalid move for the {piece.piece_type.name.lower()}", mv
            )
        self._validate_promotion(mv, piece)

        scratch = board.copy()
        scratch.make_move(mv)
        if scratch.is_check(color):
            raise KingInCheckError("King would be under attack", mv)

    # ── Piece rules (private) ────────────────────────────────────────────

    def _is_valid_piece_move(self, mv: Move, piece: Piece) -> bool:
        board = self._board
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._is_valid_pawn_move(mv, piece.color)
        if pt == PieceType.KNIGHT:
            return mv.is_knight_move()
        if pt == PieceType.BISHOP:
            return board.is_possible_bishop_capture(mv)
        if pt == PieceType.ROOK:
            return board.is_possible_rook_capture(mv)
        if pt == PieceType.QUEEN:
            return board.is_possible_queen_capture(mv)
        return mv.is_regular_king_move() or self._is_legal_castle_move(mv)

    def _is_valid_pawn_move(self, mv: Move, color: Color) -> bool:
        board = self._board
        if mv.is_pawn_step(color):
            if board[mv.to_sq] is not None:
                return False
            if abs(mv.row_delta) == 2:
                return board.at(mv.from_sq.col, mv.from_sq.row + color.forward) is None
            return True

        if mv.is_pawn_capture(color):
            if board[mv.to_sq] is not None:
                return True
            victim = board.is_en_passant_move(mv)
            return victim is not None and self._is_en_passant_allowed(victim, color)

        return False

    def _is_en_passant_allowed(self, victim: Pos, color: Color) -> bool:
        """The previous ply must be the victim's two-step advance."""
        last = self._history.last_move
        if last is None:
            return False
        opponent = color.opposite
        return (
            last.to_sq == victim
            and last.from_sq == Pos(victim.col, opponent.pawn_row)
            and self._board[victim] == Piece(opponent, PieceType.PAWN)
        )

    def _is_legal_castle_move(self, mv: Move) -> bool:
        rooks = self._board.is_possible_castle_move(mv)
        if rooks is None:
            return False
        if self._is_check:
            return False
        rook_home, _ = rooks
        return not any(
            past.from_sq == mv.from_sq or past.from_sq == rook_home
            for past in self._history
        )

    def _validate_promotion(self, mv: Move, piece: Piece) -> None:
        reaches_back_rank = (
            piece.piece_type == PieceType.PAWN
            and mv.to_sq.row == piece.color.back_row
        )
        if reaches_back_rank:
            if mv.promotion is None:
                raise InvalidPromotionError("Pawn must promote on the last rank", mv)
            if mv.promotion not in PROMOTION_TYPES:
                raise InvalidPromotionError(
                    f"Cannot promote to {mv.promotion.name.lower()}", mv
                )
        elif mv.promotion is not None:
            raise InvalidPromotionError(
                "Only a pawn reaching the last rank can promote", mv
            )

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        # Castling validation reads the check flag.
        self._is_check = self._board.is_check(self._turn)
        self._legal_moves = MoveGenerator(self).legal_moves()

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent snapshot of this game."""
        game = Game(self._board, self._turn, self._history)
        game._result = self._result
        return game

    def __repr__(self) -> str:
        if self._result is not None:
            state = str(self._result)
        else:
            state = f"{self._turn!s} to move"
        return f"<Game {state}, {len(self._history)} plies>"
