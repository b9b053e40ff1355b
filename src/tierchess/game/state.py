"""ChessGame - turn bookkeeping, move history and outcome for one game."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tierchess.core.board import Board
from tierchess.core.enums import GameResult
from tierchess.core.move import Move
from tierchess.core.rules import RuleEngine
from tierchess.game.interfaces import Player

_LOGGER = logging.getLogger(__name__)


class ChessGame:
    """One game between two players.

    The first player moves first and is expected to play White. Moves go
    through :meth:`make_move`, which validates them with the rule engine
    before touching the board.
    """

    __slots__ = ("_players", "_board", "_rule_engine", "_move_history", "_turn")

    def __init__(self, players: Sequence[Player], board: Board | None = None) -> None:
        if len(players) != 2:
            raise ValueError(f"A game needs exactly two players, got {len(players)}")
        self._players: tuple[Player, Player] = (players[0], players[1])
        self._board = board if board is not None else Board.initial()
        self._rule_engine = RuleEngine(self._board)
        self._move_history: list[Move] = []
        self._turn = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def rule_engine(self) -> RuleEngine:
        return self._rule_engine

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._move_history)

    @property
    def current_player(self) -> Player:
        return self._players[self._turn]

    @property
    def ply_count(self) -> int:
        return len(self._move_history)

    # ── Moves ────────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> bool:
        """Apply *move* if it is legal for the side to move."""
        if move.moved_piece.color != self.current_player.color:
            _LOGGER.debug("Rejected %s: not %s's turn", move, move.moved_piece.color)
            return False
        if not self._rule_engine.is_move_legal(move):
            _LOGGER.debug("Rejected illegal move %s", move)
            return False
        if not self._board.apply(move):
            return False

        record = self._board.last_move
        assert record is not None
        self._move_history.append(record)
        _LOGGER.info("Ply %d: %s", len(self._move_history), record.detailed_log())
        self.change_turn()
        return True

    def play_turn(self) -> Move | None:
        """Ask the side to move for a move and play it.

        Returns the played move, or ``None`` when the player produced none
        (a human waiting on the UI, or no legal move left).
        """
        move = self.current_player.make_move(self._board)
        if move is None or not self.make_move(move):
            return None
        return self._move_history[-1]

    def play(self, max_plies: int | None = None) -> GameResult:
        """Play turns until the game ends, a player passes, or *max_plies*."""
        while not self.check_game_over():
            if max_plies is not None and self.ply_count >= max_plies:
                break
            if self.play_turn() is None:
                break
        return self.result()

    def undo_move(self) -> bool:
        """Take back the last ply; ``False`` when there is nothing to undo."""
        if not self._move_history:
            return False
        if self._board.undo_last_move() is None:
            return False
        undone = self._move_history.pop()
        _LOGGER.info("Undid %s", undone.detailed_log())
        self.change_turn()
        return True

    def add_move(self, move: Move) -> None:
        """Record *move* in the history without playing it."""
        self._move_history.append(move)

    def change_turn(self) -> None:
        self._turn = 1 - self._turn

    def set_board(self, board: Board) -> None:
        """Swap in another board (e.g. a loaded position)."""
        self._board = board
        self._rule_engine = RuleEngine(board)

    # ── Outcome ──────────────────────────────────────────────────────────

    def check_game_over(self) -> bool:
        player = self.current_player
        return self._rule_engine.is_checkmate(player) or self._rule_engine.is_stalemate(
            player
        )

    def result(self) -> GameResult:
        return self._rule_engine.game_result(self.current_player)

    def __repr__(self) -> str:
        white, black = self._players
        return f"ChessGame({white.name!r} vs {black.name!r}, plies={self.ply_count})"
