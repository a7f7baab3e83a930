"""Pos value type and coordinate helpers.

Coordinates are ``(col, row)`` with col 0–7 for files a–h and row 0–7 for
ranks 1–8, so ``Pos(0, 0)`` is a1 and ``Pos(7, 7)`` is h8.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True, init=False)
class Pos:
    """Immutable board coordinate.

    Ordering is row-major (rank first, then file), which is the board scan
    order used by move generation.
    """

    row: int
    col: int

    def __init__(self, col: int, row: int) -> None:
        if not Pos.in_bounds(col, row):
            raise ValueError(
                f"Column and row must be between 0 and 7, got ({col}, {row})"
            )
        object.__setattr__(self, "col", col)
        object.__setattr__(self, "row", row)

    @staticmethod
    def in_bounds(col: int, row: int) -> bool:
        """Whether ``(col, row)`` lies on the board."""
        return 0 <= col < 8 and 0 <= row < 8

    @classmethod
    def from_notation(cls, name: str) -> Pos:
        """Parse square name, e.g. 'e4' → Pos(4, 3)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def offset(self, dcol: int, drow: int) -> Pos | None:
        """Shifted coordinate, or ``None`` when it falls off the board."""
        col = self.col + dcol
        row = self.row + drow
        if not Pos.in_bounds(col, row):
            return None
        return Pos(col, row)

    def as_tuple(self) -> tuple[int, int]:
        return (self.col, self.row)

    @property
    def is_dark(self) -> bool:
        """a1 is dark; colors alternate along ranks and files."""
        return (self.col + self.row) % 2 == 0

    def __str__(self) -> str:
        return _FILES[self.col] + _RANKS[self.row]

    def __repr__(self) -> str:
        return f"Pos({str(self)})"


def all_positions() -> list[Pos]:
    """All 64 squares in row-major order (a1, b1, ..., h8)."""
    return [Pos(col, row) for row in range(8) for col in range(8)]
