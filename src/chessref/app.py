"""Console entry point: a read-eval loop around :class:`Game`."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chessref.core.errors import ChessError
from chessref.core.move import Move, is_long_notation, parse_long_notation
from chessref.game.game import Game

_LOGGER = logging.getLogger(__name__)
_QUIT_COMMANDS = frozenset({"quit", "exit"})


def _read_move(game: Game, command: str, short_notation: bool) -> Move:
    if short_notation:
        return game.parse_short_notation(command)
    if not is_long_notation(command):
        raise ChessError(f"Expected a move like 'e2e4' or 'e7e8q', got {command!r}")
    return parse_long_notation(command)


def run_console(
    game: Game,
    stdin: TextIO,
    stdout: TextIO,
    *,
    short_notation: bool = False,
    show_coordinates: bool = True,
) -> int:
    """Play *game* from lines of *stdin* until it ends or input runs out."""
    while True:
        stdout.write(game.board.to_string(with_coordinates=show_coordinates) + "\n")
        if game.is_check():
            stdout.write("Check!\n")
        stdout.write(f"{str(game.turn).capitalize()} to move: ")
        stdout.flush()

        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return 0
        command = line.strip()
        if not command:
            continue
        if command.lower() in _QUIT_COMMANDS:
            return 0

        try:
            game.make_move(_read_move(game, command, short_notation))
        except ChessError as exc:
            stdout.write(f"Error: {exc}\n")
            continue

        result = game.result
        if result is not None:
            stdout.write(game.board.to_string(with_coordinates=show_coordinates) + "\n")
            stdout.write("Game over!\n")
            if result.winner is None:
                stdout.write("It's a draw!\n")
            else:
                stdout.write(f"Winner: {result.winner!s}\n")
            return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessref", description="Play chess on the console."
    )
    parser.add_argument(
        "--short",
        action="store_true",
        help="read moves in short algebraic notation (e.g. Nf3, exd5, O-O)",
    )
    parser.add_argument(
        "--no-coordinates",
        action="store_true",
        help="print the board without rank numbers and file letters",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch a two-player console game."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Starting console game (short notation: %s)", args.short)
    return run_console(
        Game(),
        sys.stdin,
        sys.stdout,
        short_notation=args.short,
        show_coordinates=not args.no_coordinates,
    )


if __name__ == "__main__":
    sys.exit(main())
