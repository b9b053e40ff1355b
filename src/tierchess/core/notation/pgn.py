"""PGN text: tag pairs plus mainline movetext."""

from __future__ import annotations

import re

from tierchess.core.enums import GameResult
from tierchess.core.notation.models import ParsedPgn

_TAG_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]$')
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+$")
_NUMBERED_MOVE_RE = re.compile(r"^\d+\.+(\S+)$")
# Comments in braces, rest-of-line comments and the parentheses of variations.
_MOVETEXT_TOKEN_RE = re.compile(r"\{[^}]*\}?|;[^\n]*|[()]|[^\s{};()]+")

_RESULTS: dict[str, GameResult] = {
    "1-0": GameResult.WHITE_WINS,
    "0-1": GameResult.BLACK_WINS,
    "1/2-1/2": GameResult.DRAW,
    "*": GameResult.IN_PROGRESS,
}
_TOKENS: dict[GameResult, str] = {v: k for k, v in _RESULTS.items()}


def pgn_result_token(result: GameResult) -> str:
    """``GameResult.WHITE_WINS`` -> ``'1-0'`` etc."""
    return _TOKENS[result]


def game_result_from_pgn(token: str) -> GameResult:
    """Inverse of :func:`pgn_result_token`; unknown tokens mean in progress."""
    return _RESULTS.get(token, GameResult.IN_PROGRESS)


def pgn_movetext(sans: list[str], result_token: str) -> str:
    """``['e4', 'e5']`` -> ``'1. e4 e5 *'``."""
    parts: list[str] = []
    for ply, san in enumerate(sans):
        if ply % 2 == 0:
            parts.append(f"{ply // 2 + 1}.")
        parts.append(san)
    parts.append(result_token)
    return " ".join(parts)


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _unescape(value: str) -> str:
    return value.replace('\\"', '"').replace("\\\\", "\\")


def build_pgn(headers: dict[str, str], sans: list[str], result_token: str) -> str:
    """Single-game PGN document: tag section, blank line, movetext."""
    lines = [f'[{key} "{_escape(value)}"]' for key, value in headers.items()]
    lines.append("")
    lines.append(pgn_movetext(sans, result_token))
    lines.append("")
    return "\n".join(lines)


def _mainline(movetext: str) -> tuple[list[str], str]:
    sans: list[str] = []
    result_token = "*"
    depth = 0
    for token in _MOVETEXT_TOKEN_RE.findall(movetext):
        if token == "(":
            depth += 1
            continue
        if token == ")":
            depth = max(0, depth - 1)
            continue
        if depth or token[0] in "{;" or token.startswith("$"):
            continue
        if token in _RESULTS:
            result_token = token
            continue
        if _MOVE_NUMBER_RE.match(token):
            continue
        numbered = _NUMBERED_MOVE_RE.match(token)
        san = numbered.group(1) if numbered else token.lstrip(".")
        if san:
            sans.append(san)
    return sans, result_token


def parse_pgn_game(text: str) -> ParsedPgn:
    """Parse one game; raises :class:`ValueError` on a malformed tag line."""
    parsed = ParsedPgn()
    movetext: list[str] = []
    in_tags = True

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            if parsed.headers:
                in_tags = False
            continue
        if in_tags and line.startswith("["):
            match = _TAG_RE.match(line)
            if match is None:
                raise ValueError(f"Invalid PGN tag line: {line}")
            key, value = match.groups()
            parsed.headers[key] = _unescape(value)
            continue
        in_tags = False
        if line.startswith("%"):
            continue
        movetext.append(line)

    parsed.sans, parsed.result_token = _mainline("\n".join(movetext))
    if parsed.result_token == "*" and parsed.headers.get("Result") in _RESULTS:
        parsed.result_token = parsed.headers["Result"]
    return parsed
