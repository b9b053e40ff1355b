"""RuleEngine - check, legality and terminal-state queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tierchess.core.enums import Color, GameResult
from tierchess.core.move import Move
from tierchess.core.piece import Pawn

if TYPE_CHECKING:
    from tierchess.core.board import Board
    from tierchess.core.piece import Piece
    from tierchess.core.types import Coordinate


class _HasColor(Protocol):
    @property
    def color(self) -> Color: ...


def _side_color(side: Color | str | _HasColor) -> Color:
    if isinstance(side, str):
        return Color(side)
    return side.color


class RuleEngine:
    """Rule checker bound to one board.

    Every hypothetical move is played on a copy; the wrapped board is only
    read. Queries never raise for ordinary positions, including boards with
    a missing king or no pieces at all.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Check --------------------------------------------------------------

    def is_king_in_check(self, color: Color | str) -> bool:
        """Whether *color*'s king is attacked; ``False`` when there is no king."""
        return _king_in_check(self._board, Color(color))

    def is_in_check(self, side: Color | str | _HasColor) -> bool:
        """:meth:`is_king_in_check` for a color or anything with ``.color``."""
        return self.is_king_in_check(_side_color(side))

    # -- Legality -----------------------------------------------------------

    def is_move_legal(self, move: Move) -> bool:
        """Pseudo-legal for the live piece and leaves its own king safe."""
        piece = self._board.get_piece_at(move.from_.row, move.from_.col)
        if piece is None or piece.color != move.moved_piece.color:
            return False
        if piece.piece_type is not move.moved_piece.piece_type:
            return False
        if move.to not in piece.legal_moves(self._board):
            return False
        return self._is_safe(move.from_, move.to, move.promotion, piece.color)

    def legal_moves_for(self, piece: Piece) -> list[Coordinate]:
        """Destinations of *piece* that do not leave its king in check."""
        return [
            to
            for to in piece.legal_moves(self._board)
            if self._is_safe(piece.position, to, None, piece.color)
        ]

    def legal_moves(self, color: Color | str) -> list[Move]:
        """Every legal move for *color*, in row-major piece order.

        A pawn reaching its last rank appears once, promoting to a Queen;
        underpromotions are built explicitly (see :func:`parse_san`).
        """
        moves: list[Move] = []
        for piece in self._board.get_all_pieces(Color(color)):
            destinations = self.legal_moves_for(piece)
            for to in destinations:
                target = self._capture_target(piece, to)
                promotes = isinstance(piece, Pawn) and piece.promotion_rank(to.row)
                promotion = "Q" if promotes else None
                moves.append(
                    Move(piece.position, to, piece, target, destinations, promotion)
                )
        return moves

    def has_any_legal_moves(self, color: Color | str) -> bool:
        for piece in self._board.get_all_pieces(Color(color)):
            for to in piece.legal_moves(self._board):
                if self._is_safe(piece.position, to, None, piece.color):
                    return True
        return False

    # -- Terminal states ----------------------------------------------------

    def is_checkmate(self, side: Color | str | _HasColor) -> bool:
        color = _side_color(side)
        return self.is_king_in_check(color) and not self.has_any_legal_moves(color)

    def is_stalemate(self, side: Color | str | _HasColor) -> bool:
        color = _side_color(side)
        if self._board.find_king(color) is None:
            return False
        return not self.is_king_in_check(color) and not self.has_any_legal_moves(color)

    def game_result(self, side_to_move: Color | str | _HasColor) -> GameResult:
        """Outcome from the point of view of the side about to move."""
        color = _side_color(side_to_move)
        if self.is_checkmate(color):
            if color is Color.WHITE:
                return GameResult.BLACK_WINS
            return GameResult.WHITE_WINS
        if self.is_stalemate(color):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    # -- Helpers ------------------------------------------------------------

    def _is_safe(
        self,
        from_: Coordinate,
        to: Coordinate,
        promotion: str | None,
        color: Color,
    ) -> bool:
        clone = self._board.copy()
        if not clone.move_piece(from_.row, from_.col, to.row, to.col, promotion):
            return False
        return not _king_in_check(clone, color)

    def _capture_target(self, piece: Piece, to: Coordinate) -> Piece | None:
        target = self._board.get_piece_at(to.row, to.col)
        if target is not None:
            return target
        # En passant: the captured pawn stands beside the mover.
        if isinstance(piece, Pawn) and to.col != piece.col:
            return self._board.get_piece_at(piece.row, to.col)
        return None


def _king_in_check(board: Board, color: Color) -> bool:
    king = board.find_king(color)
    if king is None:
        return False
    return board.is_square_attacked(king.position, color.opposite)
