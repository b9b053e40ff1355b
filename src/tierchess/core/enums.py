"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(StrEnum):
    """Side color. Values match the labels used in saved games."""

    WHITE = "White"
    BLACK = "Black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row direction pawns of this color advance in."""
        return 1 if self is Color.WHITE else -1

    @property
    def home_row(self) -> int:
        """Row holding this color's back rank at the start."""
        return 0 if self is Color.WHITE else 7


def switch_color(color: Color | str) -> Color:
    """Flip ``White`` <-> ``Black``; plain strings are accepted too."""
    return Color(color).opposite


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
