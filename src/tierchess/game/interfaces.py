"""Abstract interfaces for the game layer.

ChessGame talks to participants only through :class:`Player`, so human and
computer sides are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tierchess.core.board import Board
    from tierchess.core.enums import Color
    from tierchess.core.move import Move


# ── Session setup ────────────────────────────────────────────────────────────


class GameMode(StrEnum):
    """Who sits on each side. Values are the labels stored in saved games."""

    HUMAN_VS_HUMAN = "Human vs Human"
    HUMAN_VS_AI = "Human vs AI"
    AI_VS_AI = "AI vs AI"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class Player(ABC):
    """A game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def make_move(self, board: Board) -> Move | None:
        """Choose a move on *board*.

        ``None`` means this player produces no move by itself: a human whose
        move arrives from the UI, or a side with no legal move left.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.color})"
