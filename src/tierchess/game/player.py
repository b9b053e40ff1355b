"""Concrete player implementations."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from tierchess.core.enums import Color, switch_color
from tierchess.core.rules import RuleEngine
from tierchess.engine.evaluation import escape_check
from tierchess.engine.strategies import Difficulty, MoveSelector
from tierchess.game.interfaces import GameMode, Player

if TYPE_CHECKING:
    from tierchess.core.board import Board
    from tierchess.core.move import Move

_LOGGER = logging.getLogger(__name__)


class HumanPlayer(Player):
    """A human participant; moves come from the UI.

    ``make_move`` always returns ``None``; :meth:`available_moves` gives the
    menu of legal moves the UI offers.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, name: str, color: Color | str) -> None:
        self._color = Color(color)
        self._name = name or f"Player ({self._color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def make_move(self, board: Board) -> Move | None:
        return None

    def available_moves(self, board: Board) -> list[Move]:
        return RuleEngine(board).legal_moves(self._color)


class AIPlayer(Player):
    """A computer participant choosing moves through a :class:`MoveSelector`.

    Args:
        name: Display name.
        color: Side the AI plays.
        difficulty_level: Tier of the strategy ladder. Any integer is
            accepted; values outside 1..10 are clamped when a move is chosen.
            While in check every tier answers with :func:`escape_check`.
        rng: Randomness for the random tiers.
    """

    __slots__ = ("_name", "_difficulty_level", "_selector")

    def __init__(
        self,
        name: str,
        color: Color | str,
        difficulty_level: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        self._name = name or "Computer"
        self._difficulty_level = int(difficulty_level)
        self._selector = MoveSelector(color, rng)

    @property
    def color(self) -> Color:
        return self._selector.color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty_level(self) -> int:
        return self._difficulty_level

    @difficulty_level.setter
    def difficulty_level(self, level: int) -> None:
        self._difficulty_level = int(level)

    @property
    def difficulty(self) -> Difficulty:
        """The tier actually used for :attr:`difficulty_level`."""
        return Difficulty.clamp(self._difficulty_level)

    @property
    def selector(self) -> MoveSelector:
        return self._selector

    def switch_color(self, color: Color | str) -> Color:
        """Opposite of *color*, used when reasoning about the other side."""
        return switch_color(color)

    def generate_valid_moves(self, board: Board) -> list[Move]:
        """Every legal move for this player; empty on a terminal position."""
        return RuleEngine(board).legal_moves(self.color)

    def make_move(self, board: Board) -> Move | None:
        moves = self.generate_valid_moves(board)
        if not moves:
            _LOGGER.debug("%s has no legal move", self._name)
            return None
        answer = escape_check(board, self.color)
        if answer is not None:
            _LOGGER.debug("%s answers check with %s", self._name, answer)
            return answer
        return self._selector.select(self._difficulty_level, board, moves)


def build_players(
    game_mode: GameMode | str,
    ai_level: int = 5,
    player_white: bool = True,
    rng: random.Random | None = None,
) -> tuple[Player, Player]:
    """White and black players for a session.

    In ``Human vs AI`` *player_white* says whether the human takes White.
    Unknown modes fall back to two humans.
    """
    try:
        mode = GameMode(game_mode)
    except ValueError:
        _LOGGER.warning("Unknown game mode %r, using two humans", game_mode)
        mode = GameMode.HUMAN_VS_HUMAN

    if mode is GameMode.AI_VS_AI:
        return (
            AIPlayer("White", Color.WHITE, ai_level, rng),
            AIPlayer("Black", Color.BLACK, ai_level, rng),
        )
    if mode is GameMode.HUMAN_VS_AI:
        if player_white:
            return (
                HumanPlayer("White", Color.WHITE),
                AIPlayer("Computer", Color.BLACK, ai_level, rng),
            )
        return (
            AIPlayer("Computer", Color.WHITE, ai_level, rng),
            HumanPlayer("Black", Color.BLACK),
        )
    return HumanPlayer("White", Color.WHITE), HumanPlayer("Black", Color.BLACK)
