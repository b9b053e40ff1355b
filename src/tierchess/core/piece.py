"""Piece hierarchy: one class per piece kind, sharing a single contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from tierchess.core.enums import Color, PieceType
from tierchess.core.types import (
    BISHOP_DIRS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    Coordinate,
)

if TYPE_CHECKING:
    from tierchess.core.board import Board

_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 1000,  # evaluation sentinel, never actually captured
}

_TYPES_BY_SYMBOL: dict[str, PieceType] = {v: k for k, v in _SYMBOLS.items()}

PROMOTION_SYMBOLS: tuple[str, ...] = ("Q", "R", "B", "N")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Piece(ABC):
    """A piece standing on the board.

    ``position`` and ``has_moved`` are mutable; everything else about a piece
    is fixed by its class.
    """

    __slots__ = ("color", "position", "has_moved")

    piece_type: ClassVar[PieceType]

    def __init__(
        self, color: Color | str, position: Coordinate, has_moved: bool = False
    ) -> None:
        self.color = Color(color)
        self.position = position
        self.has_moved = has_moved

    # -- Identity -----------------------------------------------------------

    @property
    def symbol(self) -> str:
        """One-letter code: K, Q, R, B, N or P."""
        return _SYMBOLS[self.piece_type]

    @property
    def value(self) -> int:
        """Material weight (Pawn=1 ... Queen=9, King=1000)."""
        return _VALUES[self.piece_type]

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col

    def is_same_color(self, other: Piece | None) -> bool:
        return other is not None and other.color == self.color

    def can_capture(self, other: Piece | None) -> bool:
        return other is not None and other.color != self.color

    def move_to(self, position: Coordinate) -> None:
        """Relocate and mark the piece as moved."""
        self.position = position
        self.has_moved = True

    def copy(self) -> Piece:
        """Independent clone with the same color, position and moved flag."""
        return type(self)(self.color, self.position, self.has_moved)

    # -- Movement -----------------------------------------------------------

    @abstractmethod
    def legal_moves(self, board: Board) -> list[Coordinate]:
        """Pseudo-legal destinations (own king safety is not considered)."""

    @abstractmethod
    def controls(self, board: Board, target: Coordinate) -> bool:
        """Whether this piece hits *target*, regardless of what stands there."""

    def is_attacking(self, board: Board, target: Coordinate) -> bool:
        """Whether this piece could capture on *target*.

        This is an attack map, not a subset of :meth:`legal_moves`: an empty
        square counts when a piece arriving there could be taken. A pawn
        attacks both forward diagonals even when they are empty and never
        attacks the squares it pushes to. Castling squares are never
        attacked.
        """
        if not target.on_board or target == self.position:
            return False
        if self.is_same_color(board.get_piece_at(target.row, target.col)):
            return False
        return self.controls(board, target)

    def defends(self, board: Board, target: Coordinate) -> bool:
        """Whether this piece protects a friendly piece standing on *target*."""
        if target == self.position:
            return False
        return self.is_same_color(
            board.get_piece_at(target.row, target.col)
        ) and self.controls(board, target)

    def _step_targets(
        self, board: Board, targets: tuple[Coordinate, ...]
    ) -> list[Coordinate]:
        moves: list[Coordinate] = []
        for to in targets:
            if not self.is_same_color(board.get_piece_at(to.row, to.col)):
                moves.append(to)
        return moves

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        """Uppercase symbol for white, lowercase for black."""
        return self.symbol if self.color is Color.WHITE else self.symbol.lower()

    def __repr__(self) -> str:
        return f"{self.name}({self.color}, {self.position})"


class _SlidingPiece(Piece):
    """Bishop, Rook and Queen: ray-casting movers."""

    __slots__ = ()

    directions: ClassVar[tuple[tuple[int, int], ...]]

    def legal_moves(self, board: Board) -> list[Coordinate]:
        moves: list[Coordinate] = []
        for d_row, d_col in self.directions:
            to = self.position.offset(d_row, d_col)
            while to.on_board:
                target = board.get_piece_at(to.row, to.col)
                if target is None:
                    moves.append(to)
                elif self.is_same_color(target):
                    break
                else:
                    moves.append(to)
                    break
                to = to.offset(d_row, d_col)
        return moves

    def controls(self, board: Board, target: Coordinate) -> bool:
        d_row = target.row - self.row
        d_col = target.col - self.col
        if (d_row, d_col) == (0, 0):
            return False
        if d_row != 0 and d_col != 0 and abs(d_row) != abs(d_col):
            return False
        step = (_sign(d_row), _sign(d_col))
        if step not in self.directions:
            return False
        square = self.position.offset(*step)
        while square != target:
            if board.get_piece_at(square.row, square.col) is not None:
                return False
            square = square.offset(*step)
        return True


class Pawn(Piece):
    __slots__ = ()

    piece_type = PieceType.PAWN

    def legal_moves(self, board: Board) -> list[Coordinate]:
        moves: list[Coordinate] = []
        direction = self.color.forward
        one_step = self.position.offset(direction, 0)

        if one_step.on_board and board.get_piece_at(one_step.row, one_step.col) is None:
            moves.append(one_step)
            two_step = one_step.offset(direction, 0)
            if (
                not self.has_moved
                and two_step.on_board
                and board.get_piece_at(two_step.row, two_step.col) is None
            ):
                moves.append(two_step)

        for d_col in (-1, 1):
            capture = self.position.offset(direction, d_col)
            if capture.on_board and self.can_capture(
                board.get_piece_at(capture.row, capture.col)
            ):
                moves.append(capture)

        en_passant = self.en_passant_target(board)
        if en_passant is not None:
            moves.append(en_passant)
        return moves

    def en_passant_target(self, board: Board) -> Coordinate | None:
        """Capture square when the last move was a double step beside us."""
        last = board.last_move
        if last is None or last.moved_piece.piece_type is not PieceType.PAWN:
            return None
        if abs(last.to.row - last.from_.row) != 2:
            return None
        if last.to.row != self.row or abs(last.to.col - self.col) != 1:
            return None
        neighbour = board.get_piece_at(last.to.row, last.to.col)
        if not isinstance(neighbour, Pawn) or self.is_same_color(neighbour):
            return None
        target = Coordinate(self.row + self.color.forward, last.to.col)
        if board.get_piece_at(target.row, target.col) is not None:
            return None
        return target

    def controls(self, board: Board, target: Coordinate) -> bool:
        return (
            target.row == self.row + self.color.forward
            and abs(target.col - self.col) == 1
        )

    def promotion_rank(self, row: int) -> bool:
        """Whether *row* is the last rank for this pawn."""
        return row == (7 if self.color is Color.WHITE else 0)


class Knight(Piece):
    __slots__ = ()

    piece_type = PieceType.KNIGHT

    def legal_moves(self, board: Board) -> list[Coordinate]:
        return self._step_targets(board, KNIGHT_TARGETS[self.position])

    def controls(self, board: Board, target: Coordinate) -> bool:
        return target in KNIGHT_TARGETS[self.position]


class Bishop(_SlidingPiece):
    __slots__ = ()

    piece_type = PieceType.BISHOP
    directions = BISHOP_DIRS


class Rook(_SlidingPiece):
    __slots__ = ()

    piece_type = PieceType.ROOK
    directions = ROOK_DIRS


class Queen(_SlidingPiece):
    __slots__ = ()

    piece_type = PieceType.QUEEN
    directions = QUEEN_DIRS


class King(Piece):
    """King: one step any direction, plus castling from its home square.

    Whether a step walks into check is decided by the rule engine; castling
    is the exception, since its "not through check" condition is part of the
    move itself.
    """

    __slots__ = ()

    piece_type = PieceType.KING

    def legal_moves(self, board: Board) -> list[Coordinate]:
        moves = self._step_targets(board, KING_TARGETS[self.position])
        moves.extend(self.castling_targets(board))
        return moves

    def controls(self, board: Board, target: Coordinate) -> bool:
        return target in KING_TARGETS[self.position]

    def castling_targets(self, board: Board) -> list[Coordinate]:
        row = self.color.home_row
        if self.has_moved or self.position != Coordinate(row, 4):
            return []
        opponent = self.color.opposite
        if board.is_square_attacked(self.position, opponent):
            return []

        targets: list[Coordinate] = []
        # (rook column, squares that must be empty, squares the king crosses)
        for rook_col, between, crossed in ((7, (5, 6), (5, 6)), (0, (1, 2, 3), (3, 2))):
            rook = board.get_piece_at(row, rook_col)
            if not isinstance(rook, Rook) or rook.has_moved:
                continue
            if not self.is_same_color(rook):
                continue
            if any(board.get_piece_at(row, col) is not None for col in between):
                continue
            if any(
                board.is_square_attacked(Coordinate(row, col), opponent)
                for col in crossed
            ):
                continue
            targets.append(Coordinate(row, crossed[-1]))
        return targets


_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.PAWN: Pawn,
    PieceType.KNIGHT: Knight,
    PieceType.BISHOP: Bishop,
    PieceType.ROOK: Rook,
    PieceType.QUEEN: Queen,
    PieceType.KING: King,
}

_PROMOTION_NAMES: dict[str, str] = {
    "QUEEN": "Q",
    "ROOK": "R",
    "BISHOP": "B",
    "KNIGHT": "N",
}


def piece_type_from_symbol(symbol: str) -> PieceType:
    """``'N'``/``'n'`` -> ``PieceType.KNIGHT``."""
    try:
        return _TYPES_BY_SYMBOL[symbol.upper()]
    except KeyError:
        raise ValueError(f"Invalid piece symbol: {symbol!r}") from None


def normalize_promotion(code: str) -> str:
    """Map ``'q'``, ``'Q'`` or ``'Queen'`` to the promotion symbol ``'Q'``."""
    upper = code.strip().upper()
    upper = _PROMOTION_NAMES.get(upper, upper)
    if upper not in PROMOTION_SYMBOLS:
        raise ValueError(f"Invalid promotion piece: {code!r}")
    return upper


def create_piece(
    kind: PieceType | str,
    color: Color | str,
    position: Coordinate,
    has_moved: bool = False,
) -> Piece:
    """Build a piece from its type or one-letter symbol."""
    piece_type = kind if isinstance(kind, PieceType) else piece_type_from_symbol(kind)
    return _CLASSES[piece_type](color, position, has_moved)
