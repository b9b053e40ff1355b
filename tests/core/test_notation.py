"""Tests for square names, SAN and PGN text."""

import pytest

from tierchess.core.board import Board
from tierchess.core.enums import Color, GameResult
from tierchess.core.move import Move
from tierchess.core.notation import (
    ParsedPgn,
    build_pgn,
    coordinate_to_notation,
    game_result_from_pgn,
    move_to_san,
    notation_to_coordinate,
    parse_pgn_game,
    parse_san,
    pgn_movetext,
    pgn_result_token,
)
from tierchess.core.rules import RuleEngine
from tierchess.core.types import Coordinate

W = Color.WHITE
B = Color.BLACK


def _move(board: Board, from_: str, to: str, promotion: str | None = None) -> Move:
    """The legal move *from_* -> *to*, with an optional promotion piece."""
    start = notation_to_coordinate(from_)
    piece = board.get_piece_at(start.row, start.col)
    assert piece is not None
    for move in RuleEngine(board).legal_moves(piece.color):
        if move.from_ == start and move.to == notation_to_coordinate(to):
            if promotion is None:
                return move
            return Move(
                move.from_,
                move.to,
                move.moved_piece,
                move.captured_piece,
                promotion=promotion,
            )
    raise AssertionError(f"{from_}{to} is not legal")


class TestSquareNames:
    def test_round_trip(self) -> None:
        assert coordinate_to_notation(Coordinate(0, 0)) == "a1"
        assert notation_to_coordinate("h8") == Coordinate(7, 7)
        assert notation_to_coordinate(" E4 ") == Coordinate(3, 4)

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            notation_to_coordinate("z9")


class TestMoveToSan:
    def test_pawn_and_knight(self) -> None:
        board = Board.initial()
        assert move_to_san(board, _move(board, "e2", "e4")) == "e4"
        assert move_to_san(board, _move(board, "g1", "f3")) == "Nf3"

    def test_pawn_capture(self, make_board) -> None:
        board = make_board("4k3/8/8/3p4/4P3/8/8/4K3")
        assert move_to_san(board, _move(board, "e4", "d5")) == "exd5"

    def test_piece_capture(self, make_board) -> None:
        board = make_board("4k3/8/8/3p4/8/8/8/3QK3")
        assert move_to_san(board, _move(board, "d1", "d5")) == "Qxd5"

    def test_file_disambiguation(self, make_board) -> None:
        board = make_board("4k3/8/8/8/8/8/8/1N2KN2")
        assert move_to_san(board, _move(board, "b1", "d2")) == "Nbd2"
        assert move_to_san(board, _move(board, "f1", "d2")) == "Nfd2"

    def test_rank_disambiguation(self, make_board) -> None:
        board = make_board("4k3/8/8/R7/8/8/8/R3K3")
        assert move_to_san(board, _move(board, "a1", "a3")) == "R1a3"
        assert move_to_san(board, _move(board, "a5", "a3")) == "R5a3"

    def test_castling(self, make_board) -> None:
        board = make_board("r3k2r/8/8/8/8/8/8/R3K2R")
        assert move_to_san(board, _move(board, "e1", "g1")) == "O-O"
        assert move_to_san(board, _move(board, "e1", "c1")) == "O-O-O"

    def test_promotion(self, make_board) -> None:
        board = make_board("8/P7/4k3/8/8/8/8/4K3")
        assert move_to_san(board, _move(board, "a7", "a8")) == "a8=Q"
        assert move_to_san(board, _move(board, "a7", "a8", "N")) == "a8=N"

    def test_check_and_mate_suffix(self, make_board) -> None:
        board = make_board("4k3/8/8/8/8/8/8/R3K3")
        assert move_to_san(board, _move(board, "a1", "a8")) == "Ra8+"

        board = Board.initial()
        for from_, to in (("f2", "f3"), ("e7", "e5"), ("g2", "g4")):
            board.apply(_move(board, from_, to))
        assert move_to_san(board, _move(board, "d8", "h4")) == "Qh4#"


class TestParseSan:
    def test_simple(self) -> None:
        board = Board.initial()
        move = parse_san(board, W, "Nf3")
        assert move.from_ == Coordinate(0, 6)
        assert move.to == Coordinate(2, 5)
        assert parse_san(board, "White", "e4").to == Coordinate(3, 4)

    def test_annotations_tolerated(self) -> None:
        board = Board.initial()
        assert parse_san(board, W, "e4!?").to == Coordinate(3, 4)
        assert parse_san(board, W, "Nc3+").to == Coordinate(2, 2)

    def test_zero_castling(self, make_board) -> None:
        board = make_board("r3k2r/8/8/8/8/8/8/R3K2R")
        assert parse_san(board, W, "0-0").to == Coordinate(0, 6)
        assert parse_san(board, B, "O-O-O").to == Coordinate(7, 2)

    def test_promotion(self, make_board) -> None:
        board = make_board("8/P7/4k3/8/8/8/8/4K3")
        assert parse_san(board, W, "a8").promotion == "Q"
        assert parse_san(board, W, "a8=R").promotion == "R"

    def test_disambiguated(self, make_board) -> None:
        board = make_board("4k3/8/8/8/8/8/8/1N2KN2")
        assert parse_san(board, W, "Nfd2").from_ == Coordinate(0, 5)

    @pytest.mark.parametrize("san", ["e5", "Nf6", "Ke2", "xyz", ""])
    def test_illegal_raises(self, san: str) -> None:
        with pytest.raises(ValueError):
            parse_san(Board.initial(), W, san)

    def test_round_trip_over_a_game(self) -> None:
        board = Board.initial()
        color = W
        for san in ("e4", "e5", "Nf3", "Nc6", "Bb5", "a6", "O-O", "Nf6"):
            move = parse_san(board, color, san)
            assert move_to_san(board, move) == san
            assert board.apply(move)
            color = color.opposite


class TestPgnResult:
    @pytest.mark.parametrize(
        ("result", "token"),
        [
            (GameResult.WHITE_WINS, "1-0"),
            (GameResult.BLACK_WINS, "0-1"),
            (GameResult.DRAW, "1/2-1/2"),
            (GameResult.IN_PROGRESS, "*"),
        ],
    )
    def test_tokens(self, result: GameResult, token: str) -> None:
        assert pgn_result_token(result) == token
        assert game_result_from_pgn(token) == result

    def test_unknown_token(self) -> None:
        assert game_result_from_pgn("2-0") == GameResult.IN_PROGRESS


class TestPgnText:
    def test_movetext(self) -> None:
        assert pgn_movetext(["e4", "e5", "Nf3"], "*") == "1. e4 e5 2. Nf3 *"
        assert pgn_movetext([], "1/2-1/2") == "1/2-1/2"

    def test_build_escapes_tags(self) -> None:
        text = build_pgn({"Event": 'The "Big" one'}, ["e4"], "*")
        assert text.splitlines()[0] == '[Event "The \\"Big\\" one"]'
        assert text.splitlines()[1] == ""
        assert text.splitlines()[2] == "1. e4 *"

    def test_parse_round_trip(self) -> None:
        headers = {"Event": 'The "Big" one', "White": "A", "Black": "B"}
        parsed = parse_pgn_game(build_pgn(headers, ["e4", "e5"], "1-0"))
        assert parsed == ParsedPgn(headers, ["e4", "e5"], "1-0")

    def test_parse_skips_comments_variations_and_nags(self) -> None:
        text = (
            '[Event "Test"]\n'
            "\n"
            "1. e4 {best by test} e5 (1... c5 2. Nf3) 2.Nf3 $1 Nc6; aside\n"
            "3. Bb5 1-0\n"
        )
        parsed = parse_pgn_game(text)
        assert parsed.headers == {"Event": "Test"}
        assert parsed.sans == ["e4", "e5", "Nf3", "Nc6", "Bb5"]
        assert parsed.result_token == "1-0"

    def test_black_move_numbers(self) -> None:
        parsed = parse_pgn_game("1. e4 1... e5 2. Nf3 ...Nc6 *")
        assert parsed.sans == ["e4", "e5", "Nf3", "Nc6"]
        assert parsed.headers == {}

    def test_result_from_header(self) -> None:
        parsed = parse_pgn_game('[Result "0-1"]\n\n1. f3 e5\n')
        assert parsed.result_token == "0-1"

    def test_bad_tag_line(self) -> None:
        with pytest.raises(ValueError):
            parse_pgn_game("[Event Test]\n\n1. e4 *\n")
