"""Save and load games as PGN files with session metadata.

Besides the usual tag pairs a saved game carries ``GameMode``, ``AILevel``
and ``PlayerWhite`` so the session can be rebuilt with the same players.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from tierchess.core.board import Board
from tierchess.core.enums import Color
from tierchess.core.move import Move
from tierchess.core.notation import (
    build_pgn,
    move_to_san,
    parse_pgn_game,
    parse_san,
    pgn_result_token,
)
from tierchess.core.rules import RuleEngine
from tierchess.game.interfaces import GameMode
from tierchess.game.player import build_players
from tierchess.game.state import ChessGame

_LOGGER = logging.getLogger(__name__)

DEFAULT_GAME_MODE = GameMode.HUMAN_VS_HUMAN
DEFAULT_AI_LEVEL = 5
DEFAULT_PLAYER_WHITE = True


@dataclass(frozen=True, slots=True)
class SavedGame:
    """A game restored from disk plus the session metadata it was saved with."""

    game: ChessGame
    game_mode: str
    ai_level: int
    player_white: bool


def _replay_sans(moves: Sequence[Move]) -> tuple[list[str], Board]:
    board = Board.initial()
    sans: list[str] = []
    for move in moves:
        sans.append(move_to_san(board, move))
        if not board.apply(move):
            raise ValueError(f"Cannot replay {move.detailed_log()}")
    return sans, board


def save_game(
    moves: Sequence[Move],
    path: str | Path,
    game_mode: GameMode | str,
    ai_level: int,
    player_white: bool,
) -> Path:
    """Write *moves* (played from the standard start) to a ``.pgn`` file.

    Returns the path actually written; a ``.pgn`` suffix is added when
    missing.
    """
    save_path = Path(path)
    if save_path.suffix.lower() != ".pgn":
        save_path = save_path.with_suffix(".pgn")

    sans, final = _replay_sans(moves)
    side_to_move = Color.WHITE if len(sans) % 2 == 0 else Color.BLACK
    result_token = pgn_result_token(RuleEngine(final).game_result(side_to_move))
    white, black = build_players(game_mode, ai_level, player_white)

    headers: dict[str, str] = {
        "Event": "Casual Game",
        "Site": "tierchess",
        "Date": datetime.now().strftime("%Y.%m.%d"),
        "White": white.name,
        "Black": black.name,
        "Result": result_token,
        "GameMode": str(game_mode),
        "AILevel": str(ai_level),
        "PlayerWhite": "true" if player_white else "false",
    }
    save_path.write_text(build_pgn(headers, sans, result_token), encoding="utf-8")
    _LOGGER.info("Saved %d plies to %s", len(sans), save_path)
    return save_path


def _parse_level(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_AI_LEVEL
    try:
        return int(raw.strip())
    except ValueError:
        return DEFAULT_AI_LEVEL


def _parse_flag(raw: str | None) -> bool:
    if raw is None:
        return DEFAULT_PLAYER_WHITE
    return raw.strip().lower() == "true"


def load_game(path: str | Path, rng: random.Random | None = None) -> SavedGame | None:
    """Rebuild a saved game; ``None`` when the file is missing or unusable.

    Every stored move is replayed through :meth:`ChessGame.make_move`, so a
    file with an unknown or illegal move is rejected as a whole.
    """
    file_path = Path(path)
    try:
        parsed = parse_pgn_game(file_path.read_text(encoding="utf-8"))
        headers = parsed.headers
        game_mode = headers.get("GameMode", str(DEFAULT_GAME_MODE))
        ai_level = _parse_level(headers.get("AILevel"))
        player_white = _parse_flag(headers.get("PlayerWhite"))

        game = ChessGame(build_players(game_mode, ai_level, player_white, rng))
        for san in parsed.sans:
            move = parse_san(game.board, game.current_player.color, san)
            if not game.make_move(move):
                raise ValueError(f"Illegal move in saved game: {san}")
    except (OSError, ValueError) as exc:
        _LOGGER.warning("Could not load game from %s: %s", file_path, exc)
        return None

    _LOGGER.info("Loaded %d plies from %s", game.ply_count, file_path)
    return SavedGame(game, game_mode, ai_level, player_white)
