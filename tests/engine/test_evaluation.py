"""Tests for the static evaluation helpers."""

from tierchess.core.board import Board
from tierchess.core.enums import Color
from tierchess.core.move import Move
from tierchess.core.piece import Pawn, Queen
from tierchess.core.rules import RuleEngine
from tierchess.core.types import Coordinate
from tierchess.engine.evaluation import (
    attackers_of,
    center_bonus,
    defenders_of,
    escape_check,
    gives_check,
    gives_checkmate,
    hanging_value,
    is_central_square,
    is_piece_lost,
    material_balance,
    piece_value,
    simulate,
)

W = Color.WHITE
B = Color.BLACK


def _find(board: Board, from_: Coordinate, to: Coordinate) -> Move:
    piece = board.get_piece_at(from_.row, from_.col)
    assert piece is not None
    for move in RuleEngine(board).legal_moves(piece.color):
        if move.from_ == from_ and move.to == to:
            return move
    raise AssertionError(f"{from_} -> {to} is not legal")


class TestScores:
    def test_piece_value(self) -> None:
        assert piece_value(None) == 0
        assert piece_value(Queen(W, Coordinate(0, 3))) == 9

    def test_center_bonus(self) -> None:
        assert center_bonus(Coordinate(3, 3)) == 4
        assert center_bonus(Coordinate(4, 4)) == 4
        assert center_bonus(Coordinate(2, 2)) == 2
        assert center_bonus(Coordinate(5, 5)) == 2
        assert center_bonus(Coordinate(6, 3)) == 0
        assert center_bonus(Coordinate(0, 0)) == 0

    def test_central_squares(self) -> None:
        assert is_central_square(Coordinate(4, 3))
        assert not is_central_square(Coordinate(2, 2))

    def test_material_balance(self, make_board) -> None:
        assert material_balance(Board.initial(), W) == 0
        board = make_board("rnb1kbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        assert material_balance(board, W) == 9
        assert material_balance(board, B) == -9

    def test_material_ignores_kings(self, make_board) -> None:
        assert material_balance(make_board("4k3/8/8/8/8/8/8/4K3"), W) == 0


class TestSimulate:
    def test_original_untouched(self) -> None:
        board = Board.initial()
        move = _find(board, Coordinate(1, 4), Coordinate(3, 4))
        after = simulate(board, move)
        assert isinstance(after.get_piece_at(3, 4), Pawn)
        assert board.get_piece_at(3, 4) is None
        assert board == Board.initial()


class TestSafety:
    def test_attackers_and_defenders(self, make_board) -> None:
        board = make_board("4k3/8/8/3q4/8/1PP5/8/4K3")
        assert attackers_of(board, Coordinate(3, 2), B) == [board.get_piece_at(4, 3)]
        assert defenders_of(board, Coordinate(2, 2)) == []
        assert defenders_of(board, Coordinate(3, 3)) == []

    def test_undefended_piece_is_lost(self, make_board) -> None:
        board = make_board("4k3/8/8/3p4/8/8/8/2Q1K3")
        assert is_piece_lost(board, _find(board, Coordinate(0, 2), Coordinate(3, 2)))
        assert not is_piece_lost(
            board, _find(board, Coordinate(0, 2), Coordinate(2, 2))
        )

    def test_defended_cheap_piece_is_not_lost(self, make_board) -> None:
        board = make_board("4k3/8/8/3q4/8/1PP5/8/4K3")
        push = _find(board, Coordinate(2, 2), Coordinate(3, 2))
        assert not is_piece_lost(board, push)

    def test_defended_but_outvalued_piece_is_lost(self, make_board) -> None:
        board = make_board("4k3/8/2p5/3p4/8/8/8/3QK3")
        grab = _find(board, Coordinate(0, 3), Coordinate(4, 3))
        assert is_piece_lost(board, grab)

    def test_hanging_value(self, make_board) -> None:
        assert hanging_value(Board.initial(), W) == 0
        board = make_board("4k3/8/8/8/8/2b5/8/R3K3")
        assert hanging_value(board, W) == 5
        assert hanging_value(board, B) == 0


class TestChecks:
    def test_gives_check(self, make_board) -> None:
        board = make_board("4k3/8/8/8/8/8/8/R3K3")
        assert gives_check(board, _find(board, Coordinate(0, 0), Coordinate(7, 0)))
        assert not gives_check(
            board, _find(board, Coordinate(0, 0), Coordinate(6, 0))
        )

    def test_gives_checkmate(self, make_board) -> None:
        board = make_board("6k1/5ppp/8/8/8/8/8/R5K1")
        mate = _find(board, Coordinate(0, 0), Coordinate(7, 0))
        assert gives_checkmate(board, mate)
        assert not gives_checkmate(
            board, _find(board, Coordinate(0, 0), Coordinate(6, 0))
        )


class TestEscapeCheck:
    def test_not_in_check(self) -> None:
        assert escape_check(Board.initial(), W) is None

    def test_prefers_capturing_the_checker(self, make_board) -> None:
        board = make_board("4k3/8/8/8/4r3/8/2B5/4K3")
        move = escape_check(board, W)
        assert move is not None
        assert (move.from_, move.to) == (Coordinate(1, 2), Coordinate(3, 4))

    def test_block_before_king_step(self, make_board) -> None:
        board = make_board("4k3/8/8/8/4r3/8/8/2B1K3")
        move = escape_check(board, W)
        assert move is not None
        assert (move.from_, move.to) == (Coordinate(0, 2), Coordinate(2, 4))

    def test_king_captures(self, make_board) -> None:
        board = make_board("4k3/8/8/8/8/8/4r3/4K3")
        move = escape_check(board, W)
        assert move is not None
        assert move.to == Coordinate(1, 4)
        assert move.is_capture

    def test_mated(self) -> None:
        board = Board.initial()
        for move in ((1, 5, 2, 5), (6, 4, 4, 4), (1, 6, 3, 6), (7, 3, 3, 7)):
            assert board.move_piece(*move)
        assert escape_check(board, W) is None
