"""Computer opponent: evaluation helpers and the difficulty-tiered selector."""

from tierchess.engine.evaluation import (
    center_bonus,
    escape_check,
    gives_check,
    gives_checkmate,
    hanging_value,
    is_piece_lost,
    material_balance,
    piece_value,
    simulate,
)
from tierchess.engine.strategies import Difficulty, MoveSelector

__all__ = [
    "Difficulty",
    "MoveSelector",
    "center_bonus",
    "escape_check",
    "gives_check",
    "gives_checkmate",
    "hanging_value",
    "is_piece_lost",
    "material_balance",
    "piece_value",
    "simulate",
]
