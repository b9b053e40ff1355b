"""Console entry point: play a computer-vs-computer game to the end.

Usage::

    python -m tierchess [--white-level N] [--black-level N] [--seed N]
        [--max-plies N] [--log-level LEVEL] [--save FILE]

Defaults come from :meth:`tierchess.config.Settings.from_env`.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from dataclasses import replace

from tierchess.config import Settings
from tierchess.core.enums import Color, GameResult
from tierchess.core.notation import pgn_result_token
from tierchess.game.interfaces import GameMode
from tierchess.game.pgn_io import save_game
from tierchess.game.player import AIPlayer
from tierchess.game.state import ChessGame

_LOGGER = logging.getLogger(__name__)

_OUTCOMES: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White wins by checkmate",
    GameResult.BLACK_WINS: "Black wins by checkmate",
    GameResult.DRAW: "Draw by stalemate",
    GameResult.IN_PROGRESS: "Unfinished",
}


def configure_logging(level: int | str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tierchess",
        description="Play a game between two computer players.",
    )
    parser.add_argument(
        "--white-level",
        type=int,
        default=settings.ai_level,
        help="White AI tier (1-10)",
    )
    parser.add_argument(
        "--black-level",
        type=int,
        default=settings.ai_level,
        help="Black AI tier (1-10)",
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument(
        "--max-plies",
        type=int,
        default=settings.max_plies,
        help="Stop an undecided game after this many plies",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
    )
    parser.add_argument("--save", metavar="FILE", help="Write the game as PGN")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one game; returns the process exit code."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    args = _build_parser(settings).parse_args(argv)
    settings = replace(settings, log_level=args.log_level)
    configure_logging(settings.logging_level)

    rng = random.Random(args.seed)
    game = ChessGame(
        [
            AIPlayer("White", Color.WHITE, args.white_level, rng),
            AIPlayer("Black", Color.BLACK, args.black_level, rng),
        ]
    )
    _LOGGER.info(
        "Starting game: White tier %d vs Black tier %d",
        args.white_level,
        args.black_level,
    )
    result = game.play(max_plies=args.max_plies)

    print(game.board)
    print()
    outcome = _OUTCOMES[result]
    print(f"{pgn_result_token(result)} {outcome} after {game.ply_count} plies")

    if args.save:
        path = save_game(
            game.move_history,
            args.save,
            GameMode.AI_VS_AI,
            args.white_level,
            player_white=True,
        )
        print(f"Saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
