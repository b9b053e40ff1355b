"""Square - one cell of the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierchess.core.types import Coordinate

if TYPE_CHECKING:
    from tierchess.core.piece import Piece


class Square:
    """A fixed board cell holding zero or one piece.

    Assigning ``piece`` is a plain overwrite; keeping the piece's own
    ``position`` in sync is the board's job.
    """

    __slots__ = ("_row", "_col", "piece")

    def __init__(self, row: int, col: int, piece: Piece | None = None) -> None:
        self._row = row
        self._col = col
        self.piece = piece

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self._row, self._col)

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def __repr__(self) -> str:
        return f"Square({self._row}, {self._col}, {self.piece!r})"
