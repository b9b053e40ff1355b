"""Notation package: square names, SAN and PGN text."""

from tierchess.core.notation.models import ParsedPgn
from tierchess.core.notation.pgn import (
    build_pgn,
    game_result_from_pgn,
    parse_pgn_game,
    pgn_movetext,
    pgn_result_token,
)
from tierchess.core.notation.san import (
    coordinate_to_notation,
    move_to_san,
    notation_to_coordinate,
    parse_san,
)

__all__ = [
    "ParsedPgn",
    "build_pgn",
    "coordinate_to_notation",
    "game_result_from_pgn",
    "move_to_san",
    "notation_to_coordinate",
    "parse_pgn_game",
    "parse_san",
    "pgn_movetext",
    "pgn_result_token",
]
