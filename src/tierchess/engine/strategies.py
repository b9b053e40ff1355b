"""Difficulty-tiered move selection.

Each tier is one heuristic over the same legal-move list, from a uniform
random pick (tier 1) to a one-ply lookahead weighing material, center
control, hanging pieces, checks and mates (tier 10). Every strategy
re-checks its candidates with :class:`RuleEngine` and returns ``None`` only
when none of them is legal. Among equally scored candidates the first one in
the list wins.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from enum import IntEnum
from typing import TYPE_CHECKING

from tierchess.core.enums import Color
from tierchess.core.rules import RuleEngine
from tierchess.engine.evaluation import (
    center_bonus,
    gives_check,
    hanging_value,
    is_piece_lost,
    material_balance,
    piece_value,
    simulate,
)

if TYPE_CHECKING:
    from tierchess.core.board import Board
    from tierchess.core.move import Move

_LOGGER = logging.getLogger(__name__)

SAFE_MOVE_BONUS = 5
LOOKAHEAD_SAFE_BONUS = 3
HANGING_PENALTY = 2
CHECK_BONUS = 5
CHECKMATE_BONUS = 1000

Strategy = Callable[["Board", Sequence["Move"]], "Move | None"]


class Difficulty(IntEnum):
    """The ten tiers of the strategy ladder, weakest first."""

    RANDOM = 1
    CAPTURE_ANY = 2
    CAPTURE_HIGH_VALUE = 3
    VERY_BEGINNER = 4
    AVOID_LOOSE_PIECE = 5
    CENTER_CONTROL = 6
    ONE_STEP_LOOKAHEAD = 7
    DEFENSIVE_LOOKAHEAD = 8
    CHECK_GIVING = 9
    HARDEST = 10

    @classmethod
    def clamp(cls, level: int) -> Difficulty:
        """Map any integer onto the ladder: below 1 -> 1, above 10 -> 10."""
        return cls(min(max(int(level), cls.RANDOM), cls.HARDEST))


class MoveSelector:
    """Picks one move for *color* according to a difficulty tier.

    Args:
        color: Side the selector plays for.
        rng: Source of randomness for the random tiers; pass a seeded
            ``random.Random`` for reproducible games.
    """

    __slots__ = ("_color", "_rng", "_strategies")

    def __init__(self, color: Color | str, rng: random.Random | None = None) -> None:
        self._color = Color(color)
        self._rng = rng if rng is not None else random.Random()
        self._strategies: dict[Difficulty, Strategy] = {
            Difficulty.RANDOM: self.generate_random_move,
            Difficulty.CAPTURE_ANY: self.capture_any_piece,
            Difficulty.CAPTURE_HIGH_VALUE: self.capture_high_value_piece,
            Difficulty.VERY_BEGINNER: self.very_beginner_play,
            Difficulty.AVOID_LOOSE_PIECE: self.avoid_move_to_loose_piece,
            Difficulty.CENTER_CONTROL: self.populate_board_center,
            Difficulty.ONE_STEP_LOOKAHEAD: self.look_one_step_forward,
            Difficulty.DEFENSIVE_LOOKAHEAD: self.one_step_ahead_defensive_play,
            Difficulty.CHECK_GIVING: self.check_giving_moves,
            Difficulty.HARDEST: self.hardest_ai_move,
        }

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color | str) -> None:
        self._color = Color(value)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def strategy_for(self, level: int) -> Strategy:
        return self._strategies[Difficulty.clamp(level)]

    def select(self, level: int, board: Board, moves: Sequence[Move]) -> Move | None:
        """Run the strategy for *level* (clamped onto the ladder)."""
        tier = Difficulty.clamp(level)
        move = self._strategies[tier](board, moves)
        if move is not None:
            _LOGGER.debug("%s tier %s chose %s", self._color, tier.name, move)
        return move

    # ── Tiers 1-4: random and greedy captures ────────────────────────────

    def generate_random_move(self, board: Board, moves: Sequence[Move]) -> Move | None:
        legal = self._legal(board, moves)
        return self._random(legal)

    def capture_any_piece(self, board: Board, moves: Sequence[Move]) -> Move | None:
        legal = self._legal(board, moves)
        return self._random_capture(legal) or self._random(legal)

    def capture_high_value_piece(
        self, board: Board, moves: Sequence[Move]
    ) -> Move | None:
        legal = self._legal(board, moves)
        return self._best_capture(legal) or self._random(legal)

    def very_beginner_play(self, board: Board, moves: Sequence[Move]) -> Move | None:
        """Grab the richest capture, otherwise play like a novice.

        With nothing to take, the first move that walks onto a square the
        opponent covers is played; failing that, any move.
        """
        legal = self._legal(board, moves)
        capture = self._best_capture(legal)
        if capture is not None:
            return capture
        opponent = self._color.opposite
        for move in legal:
            if simulate(board, move).is_square_attacked(move.to, opponent):
                return move
        return self._random(legal)

    # ── Tiers 5-6: safety and center control ─────────────────────────────

    def avoid_move_to_loose_piece(
        self, board: Board, moves: Sequence[Move]
    ) -> Move | None:
        legal = self._legal(board, moves)
        return self._avoid_loose(board, legal)

    def populate_board_center(self, board: Board, moves: Sequence[Move]) -> Move | None:
        """A safe capture when one is offered, otherwise the most central move."""
        legal = self._legal(board, moves)
        if not legal:
            return None
        capture = self._best_capture(legal)
        if capture is not None and not is_piece_lost(board, capture):
            return capture

        def score(move: Move) -> int:
            value = center_bonus(move.to) * 3 + piece_value(move.captured_piece)
            if not is_piece_lost(board, move):
                value += SAFE_MOVE_BONUS
            return value

        return max(legal, key=score)

    # ── Tiers 7-10: one-ply lookahead ────────────────────────────────────

    def look_one_step_forward(self, board: Board, moves: Sequence[Move]) -> Move | None:
        legal = self._legal(board, moves)
        if not legal:
            return None
        return max(legal, key=lambda move: self._lookahead_score(board, move))

    def one_step_ahead_defensive_play(
        self, board: Board, moves: Sequence[Move]
    ) -> Move | None:
        legal = self._legal(board, moves)
        if not legal:
            return None
        return max(legal, key=lambda move: self._defensive_score(board, move))

    def check_giving_moves(self, board: Board, moves: Sequence[Move]) -> Move | None:
        legal = self._legal(board, moves)
        checks = [move for move in legal if gives_check(board, move)]
        candidates = checks or legal
        if not candidates:
            return None
        return max(candidates, key=lambda move: self._defensive_score(board, move))

    def hardest_ai_move(self, board: Board, moves: Sequence[Move]) -> Move | None:
        legal = self._legal(board, moves)
        if not legal:
            return None

        def score(move: Move) -> int:
            after = simulate(board, move)
            value = self._defensive_score(board, move, after)
            rules = RuleEngine(after)
            opponent = self._color.opposite
            if rules.is_king_in_check(opponent):
                value += CHECK_BONUS
                if not rules.has_any_legal_moves(opponent):
                    value += CHECKMATE_BONUS
            return value + 2 * piece_value(move.captured_piece)

        return max(legal, key=score)

    # -- Helpers ------------------------------------------------------------

    def _legal(self, board: Board, moves: Sequence[Move]) -> list[Move]:
        rules = RuleEngine(board)
        return [move for move in moves if rules.is_move_legal(move)]

    def _random(self, moves: Sequence[Move]) -> Move | None:
        return self._rng.choice(moves) if moves else None

    def _random_capture(self, moves: Sequence[Move]) -> Move | None:
        return self._random([move for move in moves if move.is_capture])

    def _best_capture(self, moves: Sequence[Move]) -> Move | None:
        """Capture of the most valuable piece; the first one on ties."""
        best: Move | None = None
        for move in moves:
            if not move.is_capture:
                continue
            if best is None or piece_value(move.captured_piece) > piece_value(
                best.captured_piece
            ):
                best = move
        return best

    def _avoid_loose(self, board: Board, legal: list[Move]) -> Move | None:
        capture = self._best_capture(legal)
        if capture is not None and not is_piece_lost(board, capture):
            return capture
        safe = [move for move in legal if not is_piece_lost(board, move)]
        if safe:
            return self._random_capture(safe) or self._random(safe)
        return capture or self._random(legal)

    def _lookahead_score(
        self, board: Board, move: Move, after: Board | None = None
    ) -> int:
        if after is None:
            after = simulate(board, move)
        score = material_balance(after, self._color) + center_bonus(move.to) * 2
        if not is_piece_lost(board, move):
            score += LOOKAHEAD_SAFE_BONUS
        return score

    def _defensive_score(
        self, board: Board, move: Move, after: Board | None = None
    ) -> int:
        if after is None:
            after = simulate(board, move)
        return self._lookahead_score(board, move, after) - HANGING_PENALTY * (
            hanging_value(after, self._color)
        )
