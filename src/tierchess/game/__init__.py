"""Game management layer: players, the game object and saved games.

Quick start::

    from tierchess.game import AIPlayer, ChessGame
    from tierchess.core import Color

    game = ChessGame(
        [AIPlayer("White", Color.WHITE, 3), AIPlayer("Black", Color.BLACK, 7)]
    )
    result = game.play(max_plies=200)
"""

from tierchess.game.interfaces import GameMode, Player
from tierchess.game.pgn_io import SavedGame, load_game, save_game
from tierchess.game.player import AIPlayer, HumanPlayer, build_players
from tierchess.game.state import ChessGame

__all__ = [
    # Interfaces
    "GameMode",
    "Player",
    # Concrete
    "AIPlayer",
    "ChessGame",
    "HumanPlayer",
    "build_players",
    # Persistence
    "SavedGame",
    "load_game",
    "save_game",
]
