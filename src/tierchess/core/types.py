"""Coordinate value type and board geometry tables.

Board layout: ``row`` 0 is White's back rank (rank 1), ``row`` 7 is Black's
(rank 8); ``col`` 0 is the a-file, ``col`` 7 the h-file.
"""

from __future__ import annotations

from dataclasses import dataclass

ROWS = 8
COLUMNS = 8

_FILES = "abcdefgh"
_RANKS = "12345678"

# (row delta, col delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


def is_valid_position(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < ROWS and 0 <= col < COLUMNS


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable ``(row, col)`` grid position."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"

    @property
    def on_board(self) -> bool:
        return is_valid_position(self.row, self.col)

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    def to_notation(self) -> str:
        """Algebraic square name, e.g. ``Coordinate(3, 4)`` -> ``'e4'``."""
        if not self.on_board:
            raise ValueError(f"Coordinate off the board: {self}")
        return _FILES[self.col] + _RANKS[self.row]

    @classmethod
    def from_notation(cls, name: str) -> Coordinate:
        """Parse a square name, e.g. ``'e4'`` -> ``Coordinate(3, 4)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]), _FILES.index(name[0]))


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Coordinate, tuple[Coordinate, ...]]:
    targets: dict[Coordinate, tuple[Coordinate, ...]] = {}
    for row in range(ROWS):
        for col in range(COLUMNS):
            targets[Coordinate(row, col)] = tuple(
                Coordinate(row + dr, col + dc)
                for dr, dc in offsets
                if is_valid_position(row + dr, col + dc)
            )
    return targets


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

CENTER_SQUARES: frozenset[Coordinate] = frozenset(
    Coordinate(row, col) for row in (3, 4) for col in (3, 4)
)


def all_coordinates() -> list[Coordinate]:
    """Every board coordinate in row-major order."""
    return [Coordinate(row, col) for row in range(ROWS) for col in range(COLUMNS)]
