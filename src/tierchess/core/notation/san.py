"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierchess.core.enums import Color
from tierchess.core.move import Move
from tierchess.core.piece import PROMOTION_SYMBOLS, King, Pawn
from tierchess.core.rules import RuleEngine
from tierchess.core.types import Coordinate

if TYPE_CHECKING:
    from tierchess.core.board import Board

_FILES = "abcdefgh"


def coordinate_to_notation(coord: Coordinate) -> str:
    """``Coordinate(0, 0)`` -> ``'a1'``."""
    return coord.to_notation()


def notation_to_coordinate(name: str) -> Coordinate:
    """``'e4'`` -> ``Coordinate(3, 4)``; raises :class:`ValueError`."""
    return Coordinate.from_notation(name.strip().lower())


def _san_body(board: Board, move: Move, legal: list[Move]) -> str:
    """SAN without the check suffix; *legal* is the mover's legal move list."""
    piece = board.get_piece_at(move.from_.row, move.from_.col)
    if piece is None:
        raise ValueError(f"No piece on {move.from_.to_notation()}")

    if isinstance(piece, King) and abs(move.to.col - move.from_.col) == 2:
        return "O-O" if move.to.col > move.from_.col else "O-O-O"

    destination = move.to.to_notation()
    if isinstance(piece, Pawn):
        san = destination
        if move.from_.col != move.to.col:
            san = f"{_FILES[move.from_.col]}x{destination}"
        if piece.promotion_rank(move.to.row):
            san += "=" + (move.promotion or "Q")
        return san

    san = piece.symbol
    rivals = [
        m.from_
        for m in legal
        if m.to == move.to
        and m.from_ != move.from_
        and m.moved_piece.piece_type is piece.piece_type
    ]
    if rivals:
        if all(r.col != move.from_.col for r in rivals):
            san += _FILES[move.from_.col]
        elif all(r.row != move.from_.row for r in rivals):
            san += str(move.from_.row + 1)
        else:
            san += move.from_.to_notation()
    if board.get_piece_at(move.to.row, move.to.col) is not None:
        san += "x"
    return san + destination


def _check_suffix(board: Board, move: Move) -> str:
    after = board.copy()
    after.move_piece(
        move.from_.row, move.from_.col, move.to.row, move.to.col, move.promotion
    )
    rules = RuleEngine(after)
    opponent = move.moved_piece.color.opposite
    if not rules.is_king_in_check(opponent):
        return ""
    return "+" if rules.has_any_legal_moves(opponent) else "#"


def move_to_san(board: Board, move: Move) -> str:
    """SAN for *move*, given the *board* before it is played."""
    legal = RuleEngine(board).legal_moves(move.moved_piece.color)
    return _san_body(board, move, legal) + _check_suffix(board, move)


def _with_promotions(moves: list[Move]) -> list[Move]:
    expanded: list[Move] = []
    for move in moves:
        if move.promotion is None:
            expanded.append(move)
            continue
        for symbol in PROMOTION_SYMBOLS:
            expanded.append(
                Move(
                    move.from_,
                    move.to,
                    move.moved_piece,
                    move.captured_piece,
                    move.legal_moves,
                    symbol,
                )
            )
    return expanded


def _clean(san: str) -> str:
    clean = san.strip().rstrip("+#!?")
    if clean.startswith("0-0"):
        clean = clean.replace("0", "O")
    return clean


def parse_san(board: Board, color: Color | str, san: str) -> Move:
    """Find the legal move of *color* written as *san*.

    Check marks, annotation glyphs and the ``0-0`` castling spelling are
    tolerated; a missing ``=Q`` on a promotion means a queen. Raises
    :class:`ValueError` when no legal move matches.
    """
    legal = RuleEngine(board).legal_moves(Color(color))
    by_san = {_san_body(board, m, legal): m for m in _with_promotions(legal)}
    clean = _clean(san)
    move = by_san.get(clean) or by_san.get(clean + "=Q")
    if move is None:
        raise ValueError(f"Illegal move for {Color(color)}: {san!r}")
    return move
