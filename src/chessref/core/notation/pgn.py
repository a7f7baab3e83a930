"""PGN parsing and serialization helpers.

Only the mainline is kept: comments, variations and numeric annotation
glyphs are skipped.
"""

from __future__ import annotations

import re

from chessref.core.errors import NotationError
from chessref.core.notation.models import ParsedPgn

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
PGN_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")
_MOVETEXT_TOKEN_RE = re.compile(r"\{[^}]*\}?|;[^\n]*|\(|\)|[^\s{}();]+")


def pgn_movetext_from_sans(sans: list[str], result_token: str) -> str:
    """Number short-notation moves into PGN movetext ending in *result_token*."""
    parts: list[str] = []
    for ply, san in enumerate(sans):
        if ply % 2 == 0:
            parts.append(f"{ply // 2 + 1}.")
        parts.append(san)
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(headers: dict[str, str], sans: list[str], result_token: str) -> str:
    """Build a single-game PGN document."""
    lines = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext_from_sans(sans, result_token))
    lines.append("")
    return "\n".join(lines)


def _mainline_tokens(movetext: str) -> tuple[list[str], str]:
    sans: list[str] = []
    result_token = "*"
    depth = 0
    for token in _MOVETEXT_TOKEN_RE.findall(movetext):
        if token == "(":
            depth += 1
        elif token == ")":
            depth = max(0, depth - 1)
        elif depth or token[0] in "{;$":
            continue
        elif token in PGN_RESULT_TOKENS:
            result_token = token
        else:
            san = _MOVE_NUMBER_RE.sub("", token)
            if san:
                sans.append(san)
    return sans, result_token


def parse_pgn_game(pgn_text: str) -> ParsedPgn:
    """Parse a single PGN game into headers, mainline moves and result."""
    parsed = ParsedPgn()
    movetext: list[str] = []

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("%"):
            continue
        if line.startswith("[") and not movetext:
            match = _PGN_HEADER_RE.match(line)
            if match is None:
                raise NotationError(f"Invalid PGN header line: {line}", line)
            key, raw_value = match.groups()
            parsed.headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            continue
        movetext.append(line)

    parsed.sans, parsed.result_token = _mainline_tokens("\n".join(movetext))
    header_result = parsed.headers.get("Result")
    if parsed.result_token == "*" and header_result in PGN_RESULT_TOKENS:
        parsed.result_token = header_result
    return parsed
