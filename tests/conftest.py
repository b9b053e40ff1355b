"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from tierchess.core.board import Board
from tierchess.core.enums import Color
from tierchess.core.piece import Pawn, create_piece
from tierchess.core.types import Coordinate

BoardFactory = Callable[[str], Board]


def build_board(placement: str) -> Board:
    """Board from a FEN-style placement field, rank 8 first.

    Pawns off their starting rank are marked as moved; every other piece
    counts as unmoved.
    """
    board = Board()
    ranks = placement.split("/")
    assert len(ranks) == 8, placement
    for index, rank in enumerate(ranks):
        row = 7 - index
        col = 0
        for char in rank:
            if char.isdigit():
                col += int(char)
                continue
            color = Color.WHITE if char.isupper() else Color.BLACK
            piece = create_piece(char, color, Coordinate(row, col))
            if isinstance(piece, Pawn):
                piece.has_moved = row != (1 if color is Color.WHITE else 6)
            board.set_piece_at(row, col, piece)
            col += 1
        assert col == 8, rank
    return board


@pytest.fixture()
def make_board() -> BoardFactory:
    """``make_board("4k3/8/8/8/8/8/8/4K3")`` -> Board."""
    return build_board


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)
