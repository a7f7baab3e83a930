"""Tests for board diagram parsing and printing."""

import pytest

from chessref.core.board import Board
from chessref.core.enums import Color, PieceType
from chessref.core.errors import BoardParseError, ChessError
from chessref.core.move import parse_long_notation
from chessref.core.notation.diagram import board_from_diagram, board_to_diagram
from chessref.core.piece import Piece
from chessref.core.pos import Pos

PLAIN = """
-- :: -- bK -- :: -- ::
:: -- :: -- bR -- :: --
-- :: -- :: -- :: -- ::
:: -- :: -- :: -- :: --
-- :: -- :: -- :: -- ::
:: -- :: -- :: -- :: --
-- :: -- :: wp :: -- ::
:: -- :: wK :: -- :: --
"""

WITH_COORDINATES = """
8  -- :: -- bK -- :: -- ::
7  :: -- :: -- bR -- :: --
6  -- :: -- :: -- :: -- ::
5  :: -- :: -- :: -- :: --
4  -- :: -- :: -- :: -- ::
3  :: -- :: -- :: -- :: --
2  -- :: -- :: wp :: -- ::
1  :: -- :: wK :: -- :: --
    a  b  c  d  e  f  g  h
"""

EMPTY_ROWS = [
    "-- :: -- :: -- :: -- ::",
    ":: -- :: -- :: -- :: --",
]


def _expected() -> Board:
    board = Board()
    board.set(3, 7, PieceType.KING, Color.BLACK)
    board.set(4, 6, PieceType.ROOK, Color.BLACK)
    board.set(4, 1, PieceType.PAWN, Color.WHITE)
    board.set(3, 0, PieceType.KING, Color.WHITE)
    return board


def _empty_diagram() -> list[str]:
    return [EMPTY_ROWS[i % 2] for i in range(8)]


class TestParse:
    def test_plain(self) -> None:
        assert board_from_diagram(PLAIN) == _expected()

    def test_with_coordinates(self) -> None:
        assert Board.from_string(WITH_COORDINATES) == _expected()

    def test_blank_lines_and_indentation_ignored(self) -> None:
        text = "\n\n".join("   " + line + "  " for line in PLAIN.strip().splitlines())
        assert board_from_diagram(text) == _expected()

    def test_wrong_dark_square_marker(self) -> None:
        lines = _empty_diagram()
        lines[0] = ":: :: -- :: -- :: -- ::"
        with pytest.raises(BoardParseError) as excinfo:
            board_from_diagram("\n".join(lines))
        assert excinfo.value.pos == Pos.from_notation("a8")
        assert excinfo.value.line == 1

    def test_wrong_light_square_marker(self) -> None:
        lines = _empty_diagram()
        lines[7] = "-- -- :: -- :: -- :: --"
        with pytest.raises(BoardParseError) as excinfo:
            board_from_diagram("\n".join(lines))
        assert excinfo.value.pos == Pos.from_notation("a1")

    @pytest.mark.parametrize("token", ["xx", "wk", "rK", "wKK", "w"])
    def test_invalid_piece_token(self, token: str) -> None:
        lines = _empty_diagram()
        lines[4] = f"{token} :: -- :: -- :: -- ::"
        with pytest.raises(BoardParseError) as excinfo:
            board_from_diagram("\n".join(lines))
        assert excinfo.value.pos == Pos.from_notation("a4")

    def test_too_many_squares(self) -> None:
        lines = _empty_diagram()
        lines[2] = "6  " + lines[2] + " --"
        with pytest.raises(BoardParseError) as excinfo:
            board_from_diagram("\n".join(lines))
        assert excinfo.value.line == 3

    def test_too_many_lines(self) -> None:
        lines = _empty_diagram() + ["a b c d e f g h", "extra"]
        with pytest.raises(BoardParseError) as excinfo:
            board_from_diagram("\n".join(lines))
        assert excinfo.value.line == 10

    def test_parse_error_is_recoverable(self) -> None:
        with pytest.raises(ChessError):
            board_from_diagram("zz")

    def test_short_diagram_leaves_rest_empty(self) -> None:
        board = board_from_diagram("-- :: -- bK")
        assert board.at(3, 7) == Piece(Color.BLACK, PieceType.KING)
        assert board.find_king(Color.WHITE) is None


class TestPrint:
    def test_plain(self) -> None:
        assert board_to_diagram(_expected()) == PLAIN.strip()

    def test_with_coordinates(self) -> None:
        text = _expected().to_string(with_coordinates=True)
        assert text.splitlines() == WITH_COORDINATES.strip("\n").splitlines()

    def test_initial_board(self) -> None:
        lines = Board.initial().to_string().splitlines()
        assert lines[0] == "bR bN bB bQ bK bB bN bR"
        assert lines[1] == "bp bp bp bp bp bp bp bp"
        assert lines[2] == "-- :: -- :: -- :: -- ::"
        assert lines[5] == ":: -- :: -- :: -- :: --"
        assert lines[7] == "wR wN wB wQ wK wB wN wR"

    @pytest.mark.parametrize("with_coordinates", [False, True])
    def test_round_trip(self, with_coordinates: bool) -> None:
        board = Board.initial()
        board.make_move(parse_long_notation("e2e4"))
        text = board.to_string(with_coordinates=with_coordinates)
        assert Board.from_string(text) == board

    def test_repr_has_coordinates(self) -> None:
        assert repr(Board()).startswith("8  -- ::")
