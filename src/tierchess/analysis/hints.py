"""Human-readable move suggestions.

The advisor reads the board it is given and never changes it; every "what
if" is answered on a copy through the same evaluation helpers the computer
opponent uses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tierchess.core.enums import Color
from tierchess.core.piece import Bishop, King, Knight, Pawn
from tierchess.core.rules import RuleEngine
from tierchess.engine.evaluation import (
    escape_check,
    gives_check,
    is_central_square,
    is_piece_lost,
    is_square_safe,
    piece_value,
    simulate,
)

if TYPE_CHECKING:
    from tierchess.core.board import Board
    from tierchess.core.move import Move

_LOGGER = logging.getLogger(__name__)

GENERIC_HINT = (
    "Look for moves that improve your piece positions and control key squares."
)
CASTLING_HINT = "Consider castling to protect your king and activate your rook."
NO_ESCAPE_HINT = "Your king is in check! Find a way to escape."


class HintAdvisor:
    """Suggests a move for one side of *board*, in plain English."""

    __slots__ = ("_board", "_rules")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._rules = RuleEngine(board)

    @property
    def board(self) -> Board:
        return self._board

    def generate_hint(self, color: Color | str) -> str:
        """Hint for *color*, most urgent concern first.

        Priorities: getting out of check, a safe capture, rescuing an
        attacked piece, giving check, then general development advice.
        """
        side = Color(color)
        if self._rules.is_king_in_check(side):
            hint = self._check_escape_hint(side)
        elif (capture := self.find_best_capture(side)) is not None:
            hint = self._capture_hint(capture)
        elif (rescue := self.find_threatened_piece(side)) is not None:
            hint = (
                f"Your {rescue.moved_piece.name} at {rescue.from_.to_notation()} "
                f"is under attack! Move it to {rescue.to.to_notation()} for safety."
            )
        elif (check := self.find_check_move(side)) is not None:
            hint = (
                f"Attack! Move your {check.moved_piece.name} from "
                f"{check.from_.to_notation()} to {check.to.to_notation()} "
                "to give check to the opponent's king!"
            )
        else:
            hint = self._strategic_hint(side)
        _LOGGER.debug("Hint for %s: %s", side, hint)
        return hint

    # ── Searches ─────────────────────────────────────────────────────────

    def find_best_capture(self, color: Color) -> Move | None:
        """Most valuable capture whose capturing piece is not lost afterwards."""
        best: Move | None = None
        for move in self._rules.legal_moves(color):
            if not move.is_capture or is_piece_lost(self._board, move):
                continue
            if best is None or piece_value(move.captured_piece) > piece_value(
                best.captured_piece
            ):
                best = move
        return best

    def find_threatened_piece(self, color: Color) -> Move | None:
        """A move taking an attacked non-king piece to a square where it is safe."""
        legal = self._rules.legal_moves(color)
        for piece in self._board.get_all_pieces(color):
            if isinstance(piece, King) or is_square_safe(self._board, piece):
                continue
            for move in legal:
                if move.from_ != piece.position:
                    continue
                after = simulate(self._board, move)
                if not after.is_square_attacked(move.to, color.opposite):
                    return move
        return None

    def find_check_move(self, color: Color) -> Move | None:
        for move in self._rules.legal_moves(color):
            if gives_check(self._board, move):
                return move
        return None

    # ── Text ─────────────────────────────────────────────────────────────

    def _check_escape_hint(self, color: Color) -> str:
        move = escape_check(self._board, color)
        if move is None:
            return NO_ESCAPE_HINT
        if isinstance(move.moved_piece, King):
            escape = move.to.to_notation()
            return f"Your king is in check! Move it to {escape} to escape."
        route = f"from {move.from_.to_notation()} to {move.to.to_notation()}"
        if move.is_capture:
            return (
                f"Capture the checking piece! Move your {move.moved_piece.name} "
                f"{route}."
            )
        return f"Block the check! Move your {move.moved_piece.name} {route}"

    @staticmethod
    def _capture_hint(move: Move) -> str:
        captured = move.captured_piece
        assert captured is not None
        return (
            f"Capture opportunity! Move your {move.moved_piece.name} from "
            f"{move.from_.to_notation()} to {move.to.to_notation()} to capture the "
            f"opponent's {captured.name}."
        )

    def _strategic_hint(self, color: Color) -> str:
        pieces = self._board.get_all_pieces(color)
        for piece in pieces:
            if not isinstance(piece, (Knight, Bishop)) or piece.has_moved:
                continue
            targets = self._rules.legal_moves_for(piece)
            if not targets:
                continue
            start = piece.position.to_notation()
            central = [to for to in targets if is_central_square(to)]
            if central:
                return (
                    f"Develop your {piece.name} from {start} to "
                    f"{central[0].to_notation()} to control the center."
                )
            first = targets[0].to_notation()
            return f"Develop your {piece.name} from {start} to {first}"

        for piece in pieces:
            if (
                isinstance(piece, Pawn)
                and not piece.has_moved
                and piece.col in (3, 4)
                and self._rules.legal_moves_for(piece)
            ):
                return (
                    f"Advance your {piece.position.to_notation()} pawn "
                    "to control the center."
                )

        king = self._board.find_king(color)
        if king is not None and not king.has_moved:
            return CASTLING_HINT
        return GENERIC_HINT
