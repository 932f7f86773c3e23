"""
GameState - snapshot of a match for hosts.
"""

from __future__ import annotations

import numpy as np

from tictacgrid.core.types import Mark


class GameState:
    """
    Lightweight snapshot container.

    Holds its own copy of the int8 board (indexed [y, x]) and the number
    of accepted moves, so it never aliases a live engine.
    """
    __slots__ = ('board', 'turn_count')

    def __init__(self, board: np.ndarray, turn_count: int):
        self.board = board
        self.turn_count = turn_count

    @property
    def size(self) -> int:
        return self.board.shape[0]

    @property
    def player_to_move(self) -> Mark:
        return Mark.X if self.turn_count % 2 == 0 else Mark.O

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.turn_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.turn_count == other.turn_count and np.array_equal(self.board, other.board)

    __hash__ = None
