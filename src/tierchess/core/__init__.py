"""Core domain layer: board, pieces, moves and rules with no external dependencies.

Quick start::

    from tierchess.core import Board, Color, RuleEngine

    board = Board.initial()
    for move in RuleEngine(board).legal_moves(Color.WHITE):
        print(move.detailed_log())
"""

from tierchess.core.board import Board
from tierchess.core.enums import Color, GameResult, PieceType, switch_color
from tierchess.core.move import Move
from tierchess.core.notation import (
    move_to_san,
    notation_to_coordinate,
    parse_san,
)
from tierchess.core.piece import (
    Bishop,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
    create_piece,
)
from tierchess.core.rules import RuleEngine
from tierchess.core.square import Square
from tierchess.core.types import COLUMNS, ROWS, Coordinate, is_valid_position

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "switch_color",
    # Geometry
    "COLUMNS",
    "ROWS",
    "Coordinate",
    "is_valid_position",
    # Domain objects
    "Bishop",
    "Board",
    "King",
    "Knight",
    "Move",
    "Pawn",
    "Piece",
    "Queen",
    "Rook",
    "RuleEngine",
    "Square",
    "create_piece",
    # Notation
    "move_to_san",
    "notation_to_coordinate",
    "parse_san",
]
