"""Game history and result value types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessref.core.enums import Color

if TYPE_CHECKING:
    from chessref.core.board import Board
    from chessref.core.move import Move


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome of a concluded game; ``winner`` is ``None`` for a draw."""

    winner: Color | None = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "draw"
        return f"{self.winner!s} wins"


class GameHistory:
    """Append-only log of the moves played in a game.

    ``initial_board`` / ``initial_turn`` are only set when the game did not
    start from the standard position. Castling and en-passant rights are
    derived from this log on demand, never cached.
    """

    __slots__ = ("_moves", "initial_board", "initial_turn")

    def __init__(
        self,
        moves: Iterable[Move] = (),
        initial_board: Board | None = None,
        initial_turn: Color | None = None,
    ) -> None:
        self._moves: list[Move] = list(moves)
        self.initial_board = initial_board
        self.initial_turn = initial_turn

    @classmethod
    def with_moves(cls, moves: Iterable[Move]) -> GameHistory:
        return cls(moves)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def append(self, move: Move) -> None:
        self._moves.append(move)

    def copy(self) -> GameHistory:
        initial = self.initial_board.copy() if self.initial_board is not None else None
        return GameHistory(self._moves, initial, self.initial_turn)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __repr__(self) -> str:
        return f"GameHistory({' '.join(str(m) for m in self._moves)})"
