"""Board diagram parsing and serialization.

A diagram has one line per rank, rank 8 first::

    8  -- :: -- bK -- :: -- ::
    7  :: -- :: -- bR -- :: --
    6  -- :: -- :: -- :: -- ::
    5  :: -- :: -- :: -- :: --
    4  -- :: -- :: -- :: -- ::
    3  :: -- :: -- :: -- :: --
    2  -- :: -- :: wp :: -- ::
    1  :: -- :: wK :: -- :: --
        a  b  c  d  e  f  g  h

Pieces are ``<color><type>`` with color ``w``/``b`` and type one of
``p R N B Q K``. Empty squares are ``--`` (light) or ``::`` (dark), and must
match the square color. The leading rank numbers and the trailing file
letters are optional and ignored.
"""

from __future__ import annotations

from chessref.core.board import Board
from chessref.core.errors import BoardParseError
from chessref.core.piece import Piece
from chessref.core.pos import Pos

EMPTY_LIGHT = "--"
EMPTY_DARK = "::"
_FILE_LETTERS_ROW = "    a  b  c  d  e  f  g  h"


def board_from_diagram(text: str) -> Board:
    """Parse a diagram into a :class:`Board`."""
    board = Board()
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]

    for line_idx, line in enumerate(lines):
        if line_idx >= 9:
            raise BoardParseError("Too many lines in board string", line=line_idx + 1)
        if line_idx == 8:
            continue  # file letters
        row = 7 - line_idx

        tokens = line.split()
        if len(tokens) > 9:
            raise BoardParseError("Too many squares in a line", line=line_idx + 1)
        if len(tokens) == 9:
            tokens = tokens[1:]  # rank number

        for col, token in enumerate(tokens):
            pos = Pos(col, row)
            if token == EMPTY_DARK:
                if not pos.is_dark:
                    raise BoardParseError(
                        f"Invalid empty dark square position at {pos}",
                        line=line_idx + 1,
                        pos=pos,
                    )
            elif token == EMPTY_LIGHT:
                if pos.is_dark:
                    raise BoardParseError(
                        f"Invalid empty light square position at {pos}",
                        line=line_idx + 1,
                        pos=pos,
                    )
            else:
                try:
                    board[pos] = Piece.from_token(token)
                except ValueError as exc:
                    raise BoardParseError(
                        f"Invalid square {token!r} at {pos}: {exc}",
                        line=line_idx + 1,
                        pos=pos,
                    ) from None

    return board


def board_to_diagram(board: Board, with_coordinates: bool = False) -> str:
    """Serialise *board* as a diagram that :func:`board_from_diagram` accepts."""
    rows: list[str] = []
    for row in range(7, -1, -1):
        tokens: list[str] = []
        for col in range(8):
            piece = board.at(col, row)
            if piece is not None:
                tokens.append(str(piece))
            elif (col + row) % 2 == 0:
                tokens.append(EMPTY_DARK)
            else:
                tokens.append(EMPTY_LIGHT)
        line = " ".join(tokens)
        rows.append(f"{row + 1}  {line}" if with_coordinates else line)
    if with_coordinates:
        rows.append(_FILE_LETTERS_ROW)
    return "\n".join(rows)
