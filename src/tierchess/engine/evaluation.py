"""Static evaluation vocabulary shared by the move selector and the hint advisor.

All helpers are read-only: anything that needs the position after a move
works on :func:`simulate`'s copy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierchess.core.enums import Color
from tierchess.core.piece import King
from tierchess.core.rules import RuleEngine
from tierchess.core.types import CENTER_SQUARES, Coordinate

if TYPE_CHECKING:
    from tierchess.core.board import Board
    from tierchess.core.move import Move
    from tierchess.core.piece import Piece

CENTER_BONUS = 4
RING_BONUS = 2


def piece_value(piece: Piece | None) -> int:
    return 0 if piece is None else piece.value


def is_central_square(coord: Coordinate) -> bool:
    """d4, e4, d5 or e5."""
    return coord in CENTER_SQUARES


def center_bonus(coord: Coordinate) -> int:
    """4 on the central squares, 2 on the ring c3-f6 around them, else 0."""
    if coord in CENTER_SQUARES:
        return CENTER_BONUS
    if 2 <= coord.row <= 5 and 2 <= coord.col <= 5:
        return RING_BONUS
    return 0


def simulate(board: Board, move: Move) -> Board:
    """Copy of *board* with *move* played on it."""
    clone = board.copy()
    clone.move_piece(
        move.from_.row, move.from_.col, move.to.row, move.to.col, move.promotion
    )
    return clone


def material_balance(board: Board, color: Color) -> int:
    """Own material minus the opponent's, kings excluded."""
    score = 0
    for piece in board.get_all_pieces():
        if isinstance(piece, King):
            continue
        score += piece.value if piece.color == color else -piece.value
    return score


def attackers_of(board: Board, target: Coordinate, by_color: Color) -> list[Piece]:
    """Pieces of *by_color* that could capture on *target*."""
    return [
        piece
        for piece in board.get_all_pieces(by_color)
        if piece.is_attacking(board, target)
    ]


def defenders_of(board: Board, target: Coordinate) -> list[Piece]:
    """Friendly pieces protecting whatever stands on *target*."""
    occupant = board.get_piece_at(target.row, target.col)
    if occupant is None:
        return []
    return [
        piece
        for piece in board.get_all_pieces(occupant.color)
        if piece.defends(board, target)
    ]


def is_square_safe(board: Board, piece: Piece) -> bool:
    """Whether *piece* can stay where it stands without losing material."""
    attackers = attackers_of(board, piece.position, piece.color.opposite)
    if not attackers:
        return True
    if not defenders_of(board, piece.position):
        return False
    return piece.value < min(attacker.value for attacker in attackers)


def is_piece_lost(board: Board, move: Move) -> bool:
    """Whether the moved piece hangs once *move* is played.

    It hangs when an opposing piece attacks its landing square and it is
    either undefended there or worth at least its cheapest attacker.
    """
    after = simulate(board, move)
    moved = after.get_piece_at(move.to.row, move.to.col)
    if moved is None:
        return False
    return not is_square_safe(after, moved)


def hanging_value(board: Board, color: Color) -> int:
    """Highest value among *color*'s attacked non-king pieces."""
    opponent = color.opposite
    worst = 0
    for piece in board.get_all_pieces(color):
        if isinstance(piece, King):
            continue
        if piece.value > worst and board.is_square_attacked(piece.position, opponent):
            worst = piece.value
    return worst


def gives_check(board: Board, move: Move) -> bool:
    after = simulate(board, move)
    return RuleEngine(after).is_king_in_check(move.moved_piece.color.opposite)


def gives_checkmate(board: Board, move: Move) -> bool:
    after = simulate(board, move)
    return RuleEngine(after).is_checkmate(move.moved_piece.color.opposite)


def escape_check(board: Board, color: Color | str) -> Move | None:
    """Preferred answer to a check, or ``None`` when not in check (or mated).

    Order: capture the checking piece with something other than the king,
    block the line, capture with the king, step the king away. Within a
    group the cheapest piece moves first.
    """
    side = Color(color)
    rules = RuleEngine(board)
    if not rules.is_king_in_check(side):
        return None
    king = board.find_king(side)
    assert king is not None
    checkers = {p.position for p in attackers_of(board, king.position, side.opposite)}

    captures: list[Move] = []
    blocks: list[Move] = []
    king_captures: list[Move] = []
    king_steps: list[Move] = []
    for move in rules.legal_moves(side):
        if isinstance(move.moved_piece, King):
            (king_captures if move.is_capture else king_steps).append(move)
        elif move.captured_piece is not None and (
            move.captured_piece.position in checkers
        ):
            captures.append(move)
        else:
            blocks.append(move)

    for group in (captures, blocks, king_captures, king_steps):
        if group:
            return min(group, key=lambda m: piece_value(m.moved_piece))
    return None
