"""Board - piece placement on an 8x8 grid of squares, with move history."""

from __future__ import annotations

from collections.abc import Iterable

from tierchess.core.enums import Color, PieceType
from tierchess.core.move import Move
from tierchess.core.piece import (
    Bishop,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
    create_piece,
    normalize_promotion,
)
from tierchess.core.square import Square
from tierchess.core.types import COLUMNS, ROWS, Coordinate, is_valid_position

_BACK_RANK: tuple[type[Piece], ...] = (
    Rook,
    Knight,
    Bishop,
    Queen,
    King,
    Bishop,
    Knight,
    Rook,
)


class Board:
    """Mutable 8x8 board that owns its squares and the pieces on them.

    ``move_piece`` is raw relocation: it knows the mechanics of en passant,
    castling and promotion but not whether a move is legal. Legality lives in
    :class:`~tierchess.core.rules.RuleEngine`.
    """

    __slots__ = ("_squares", "_history", "_redo")

    def __init__(self) -> None:
        self._squares: list[list[Square]] = [
            [Square(row, col) for col in range(COLUMNS)] for row in range(ROWS)
        ]
        self._history: list[Move] = []
        self._redo: list[Move] = []

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        board = cls()
        board.initialize_board()
        return board

    def initialize_board(self) -> None:
        """Reset to the standard starting position with an empty history."""
        self.clear()
        for col, piece_class in enumerate(_BACK_RANK):
            self.set_piece_at(0, col, piece_class(Color.WHITE, Coordinate(0, col)))
            self.set_piece_at(7, col, piece_class(Color.BLACK, Coordinate(7, col)))
        for col in range(COLUMNS):
            self.set_piece_at(1, col, Pawn(Color.WHITE, Coordinate(1, col)))
            self.set_piece_at(6, col, Pawn(Color.BLACK, Coordinate(6, col)))

    # -- Element access -----------------------------------------------------

    def get_square(self, row: int, col: int) -> Square:
        if not is_valid_position(row, col):
            raise IndexError(f"Square off the board: ({row},{col})")
        return self._squares[row][col]

    def get_squares(self) -> list[list[Square]]:
        """Rows of squares, row 0 first. The outer lists are fresh copies."""
        return [list(row) for row in self._squares]

    def get_piece_at(self, row: int, col: int) -> Piece | None:
        if not is_valid_position(row, col):
            return None
        return self._squares[row][col].piece

    def set_piece_at(self, row: int, col: int, piece: Piece | None) -> None:
        """Place *piece* (or clear the square) without marking it moved."""
        square = self.get_square(row, col)
        if piece is not None:
            piece.position = Coordinate(row, col)
        square.piece = piece

    def remove_piece_at(self, row: int, col: int) -> Piece | None:
        square = self.get_square(row, col)
        piece = square.piece
        square.piece = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def get_all_pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces in row-major order, optionally only those of *color*."""
        pieces: list[Piece] = []
        for row in self._squares:
            for square in row:
                piece = square.piece
                if piece is not None and (color is None or piece.color == color):
                    pieces.append(piece)
        return pieces

    def find_king(self, color: Color) -> King | None:
        for piece in self.get_all_pieces(color):
            if isinstance(piece, King):
                return piece
        return None

    def is_square_attacked(self, target: Coordinate, by_color: Color) -> bool:
        """Whether any piece of *by_color* attacks *target*."""
        return any(
            piece.is_attacking(self, target) for piece in self.get_all_pieces(by_color)
        )

    # -- History ------------------------------------------------------------

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    # -- Mutation -----------------------------------------------------------

    def move_piece(
        self,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
        promotion: str | None = None,
        validate_bounds: bool = True,
    ) -> bool:
        """Relocate a piece and record the move.

        Returns ``False`` without touching the board when an endpoint is off
        the board, the source is empty or the destination holds a piece of the
        mover's color. With ``validate_bounds=False`` an off-board endpoint
        raises :class:`IndexError` instead.
        """
        on_board = is_valid_position(from_row, from_col) and is_valid_position(
            to_row, to_col
        )
        if not on_board:
            if validate_bounds:
                return False
            raise IndexError(
                f"Move off the board: ({from_row},{from_col}) -> ({to_row},{to_col})"
            )
        move = self._perform(
            Coordinate(from_row, from_col), Coordinate(to_row, to_col), promotion, ()
        )
        if move is None:
            return False
        self._redo.clear()
        return True

    def apply(self, move: Move) -> bool:
        """Play a :class:`Move` record; its legal-move snapshot is kept."""
        if not (move.from_.on_board and move.to.on_board):
            return False
        played = self._perform(move.from_, move.to, move.promotion, move.legal_moves)
        if played is None:
            return False
        self._redo.clear()
        return True

    def undo_last_move(self) -> Move | None:
        """Take back the last move; returns it, or ``None`` with no history."""
        if not self._history:
            return None
        move = self._history.pop()

        self.remove_piece_at(move.to.row, move.to.col)
        restored = move.moved_piece.copy()
        self.set_piece_at(move.from_.row, move.from_.col, restored)

        captured = move.captured_piece
        if captured is not None:
            self.set_piece_at(captured.row, captured.col, captured.copy())

        if move.rook_from is not None and move.rook_to is not None:
            rook = self.remove_piece_at(move.rook_to.row, move.rook_to.col)
            if rook is not None:
                rook.has_moved = False
                self.set_piece_at(move.rook_from.row, move.rook_from.col, rook)

        self._redo.append(move)
        return move

    def redo_last_move(self) -> Move | None:
        """Replay the most recently undone move."""
        if not self._redo:
            return None
        move = self._redo.pop()
        return self._perform(move.from_, move.to, move.promotion, move.legal_moves)

    def clear(self) -> None:
        for row in self._squares:
            for square in row:
                square.piece = None
        self._history.clear()
        self._redo.clear()

    def copy(self) -> Board:
        """Independent board: new squares, cloned pieces, copied history."""
        board = Board()
        for row in self._squares:
            for square in row:
                if square.piece is not None:
                    board._squares[square.row][square.col].piece = square.piece.copy()
        board._history = self._history.copy()
        board._redo = self._redo.copy()
        return board

    def _perform(
        self,
        from_: Coordinate,
        to: Coordinate,
        promotion: str | None,
        legal_moves: Iterable[Coordinate],
    ) -> Move | None:
        piece = self.get_piece_at(from_.row, from_.col)
        if piece is None or from_ == to:
            return None
        target = self.get_piece_at(to.row, to.col)
        if piece.is_same_color(target):
            return None

        captured = target
        en_passant_square: Coordinate | None = None
        if isinstance(piece, Pawn) and target is None and to.col != from_.col:
            beside = self.get_piece_at(from_.row, to.col)
            if isinstance(beside, Pawn) and piece.can_capture(beside):
                captured = beside
                en_passant_square = beside.position

        rook_from: Coordinate | None = None
        rook_to: Coordinate | None = None
        if isinstance(piece, King) and abs(to.col - from_.col) == 2:
            kingside = to.col > from_.col
            rook_from = Coordinate(from_.row, 7 if kingside else 0)
            rook_to = Coordinate(from_.row, 5 if kingside else 3)
            if not isinstance(self.get_piece_at(rook_from.row, rook_from.col), Rook):
                rook_from = rook_to = None

        promotion_symbol: str | None = None
        if isinstance(piece, Pawn) and piece.promotion_rank(to.row):
            promotion_symbol = normalize_promotion(promotion or "Q")

        # Built before mutation so the record keeps the pre-move piece state.
        move = Move(
            from_,
            to,
            piece,
            captured,
            legal_moves=legal_moves,
            promotion=promotion_symbol,
            rook_from=rook_from,
            rook_to=rook_to,
        )

        if en_passant_square is not None:
            self.remove_piece_at(en_passant_square.row, en_passant_square.col)
        self.remove_piece_at(from_.row, from_.col)
        if promotion_symbol is not None:
            piece = create_piece(promotion_symbol, piece.color, to, has_moved=True)
        else:
            piece.move_to(to)
        self._squares[to.row][to.col].piece = piece

        if rook_from is not None and rook_to is not None:
            rook = self.remove_piece_at(rook_from.row, rook_from.col)
            if rook is not None:
                rook.move_to(rook_to)
                self._squares[rook_to.row][rook_to.col].piece = rook

        self._history.append(move)
        return move

    # -- Dunder helpers -----------------------------------------------------

    def _placement(self) -> list[tuple[PieceType, Color, Coordinate]]:
        return [(p.piece_type, p.color, p.position) for p in self.get_all_pieces()]

    def __eq__(self, other: object) -> bool:
        """Boards are equal when the same pieces stand on the same squares."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._placement() == other._placement()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        rows: list[str] = []
        for row in range(ROWS - 1, -1, -1):
            cells = []
            for col in range(COLUMNS):
                piece = self._squares[row][col].piece
                cells.append(str(piece) if piece else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board(pieces={len(self.get_all_pieces())}, plies={len(self._history)})"
