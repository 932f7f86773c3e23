"""
Games module - board model, rules and the match engine.
"""

from tictacgrid.games.board import Board, validate_size
from tictacgrid.games.game_state import GameState
from tictacgrid.games.game_rules import (
    all_equal,
    get_rows,
    get_cols,
    get_diagonals,
    find_winner,
    evaluate,
)
from tictacgrid.games.engine import GameEngine

__all__ = [
    "Board",
    "GameState",
    "GameEngine",
    "validate_size",
    "all_equal",
    "get_rows",
    "get_cols",
    "get_diagonals",
    "find_winner",
    "evaluate",
]
