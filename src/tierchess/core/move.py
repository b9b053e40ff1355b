"""Move - immutable record of a single ply."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tierchess.core.piece import Piece, normalize_promotion
from tierchess.core.types import Coordinate

if TYPE_CHECKING:
    from tierchess.core.enums import Color
    from tierchess.core.square import Square

_last_timestamp = 0


def _next_timestamp() -> int:
    """Wall-clock nanoseconds, bumped so consecutive calls strictly increase."""
    global _last_timestamp
    _last_timestamp = max(time.time_ns(), _last_timestamp + 1)
    return _last_timestamp


class Move:
    """Snapshot of one ply.

    The moving and captured pieces are copied on construction, so later board
    mutation never reaches a stored move. ``legal_moves`` records the mover's
    destinations at the time the move was generated.
    """

    __slots__ = (
        "_from",
        "_to",
        "_moved_piece",
        "_captured_piece",
        "_legal_moves",
        "_promotion",
        "_rook_from",
        "_rook_to",
        "_timestamp",
    )

    def __init__(
        self,
        from_: Coordinate,
        to: Coordinate,
        moved_piece: Piece,
        captured_piece: Piece | None = None,
        legal_moves: Iterable[Coordinate] = (),
        promotion: str | None = None,
        rook_from: Coordinate | None = None,
        rook_to: Coordinate | None = None,
    ) -> None:
        if not isinstance(from_, Coordinate) or not isinstance(to, Coordinate):
            raise TypeError("Move endpoints must be Coordinates")
        if not isinstance(moved_piece, Piece):
            raise TypeError("Move requires the moving piece")
        if captured_piece is not None and not isinstance(captured_piece, Piece):
            raise TypeError("captured_piece must be a Piece or None")
        if from_ == to:
            raise ValueError(f"Move cannot start and end on {from_}")
        if (rook_from is None) != (rook_to is None):
            raise ValueError("rook_from and rook_to must be given together")

        self._from = from_
        self._to = to
        self._moved_piece = moved_piece.copy()
        self._captured_piece = None if captured_piece is None else captured_piece.copy()
        self._legal_moves = tuple(legal_moves)
        self._promotion = None if promotion is None else normalize_promotion(promotion)
        self._rook_from = rook_from
        self._rook_to = rook_to
        self._timestamp = _next_timestamp()

    @classmethod
    def from_squares(cls, selected: Square, clicked: Square) -> Move:
        """Build a move from the square picked up and the square dropped on."""
        if selected.piece is None:
            raise TypeError("Selected square holds no piece")
        return cls(
            selected.coordinate,
            clicked.coordinate,
            selected.piece,
            clicked.piece,
        )

    # -- Accessors ----------------------------------------------------------

    @property
    def from_(self) -> Coordinate:
        return self._from

    @property
    def to(self) -> Coordinate:
        return self._to

    @property
    def moved_piece(self) -> Piece:
        return self._moved_piece

    @property
    def captured_piece(self) -> Piece | None:
        return self._captured_piece

    @property
    def legal_moves(self) -> tuple[Coordinate, ...]:
        return tuple(self._legal_moves)

    @property
    def promotion(self) -> str | None:
        return self._promotion

    @property
    def rook_from(self) -> Coordinate | None:
        return self._rook_from

    @property
    def rook_to(self) -> Coordinate | None:
        return self._rook_to

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def color(self) -> Color:
        return self._moved_piece.color

    @property
    def is_capture(self) -> bool:
        return self._captured_piece is not None

    @property
    def is_castling(self) -> bool:
        return self._rook_from is not None

    # -- Display ------------------------------------------------------------

    def detailed_log(self) -> str:
        """One-line description, e.g. ``White Knight from g1 to f3``."""
        piece = self._moved_piece
        text = (
            f"{piece.color} {piece.name} from {self._from.to_notation()} "
            f"to {self._to.to_notation()}"
        )
        if self._captured_piece is not None:
            captured = self._captured_piece
            text += f" capturing {captured.color} {captured.name}"
        if self._promotion is not None:
            text += f" promoting to {self._promotion}"
        if self.is_castling:
            text += " (castling)"
        return text

    def report(self) -> str:
        lines = [
            f"Move: {self.detailed_log()}",
            f"Timestamp: {self._timestamp}",
        ]
        if self._legal_moves:
            names = ", ".join(coord.to_notation() for coord in self._legal_moves)
            lines.append(f"Legal destinations: {names}")
        else:
            lines.append("Legal destinations: none recorded")
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def _key(self) -> tuple[object, ...]:
        return (
            self._from,
            self._to,
            self._promotion,
            self._moved_piece.piece_type,
            self._moved_piece.color,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = f"{self._from.to_notation()}{self._to.to_notation()}"
        if self._promotion is not None:
            text += self._promotion.lower()
        return text

    def __repr__(self) -> str:
        return f"Move({self._from}, {self._to}, {self._moved_piece!r})"
