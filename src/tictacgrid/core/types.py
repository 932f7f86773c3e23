"""
Core types and constants.

This module contains the fundamental types used throughout the engine:
- Mark: the value held by a board cell
- Status / Outcome: the match result as a tagged value
- MoveResult: what an accepted move reports back to the host
- Board size limits
"""

from __future__ import annotations

import math
from enum import Enum, IntEnum, auto
from typing import NamedTuple


# ---------------------------------------------------------------------------
# Board size limits
# ---------------------------------------------------------------------------

# Cell count must fit a signed 32-bit counter
MAX_CELL_COUNT = 2**31 - 1

MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = math.isqrt(MAX_CELL_COUNT)  # 46340
DEFAULT_BOARD_SIZE = 5


class Mark(IntEnum):
    """
    Cell value. Stored as-is in the int8 board:
        0 = empty
        1 = X (moves first)
        2 = O
    """

    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return CELL_STRINGS[self]

    def opposite(self) -> "Mark":
        """Other player's mark. EMPTY has no opponent."""
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self is Mark.X else Mark.X


# Display string for each cell value
CELL_STRINGS = {Mark.EMPTY: "", Mark.X: "X", Mark.O: "O"}


class Status(Enum):
    IN_PROGRESS = auto()
    WIN = auto()
    DRAW = auto()


class Outcome(NamedTuple):
    """Match result. `winner` is only meaningful when status is WIN."""

    status: Status = Status.IN_PROGRESS
    winner: Mark = Mark.EMPTY

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        if mark is Mark.EMPTY:
            raise ValueError("A win needs a non-empty mark")
        return cls(Status.WIN, Mark(mark))

    @property
    def is_finished(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.status is Status.WIN

    @property
    def is_draw(self) -> bool:
        return self.status is Status.DRAW

    def __str__(self) -> str:
        if self.is_win:
            return f"WIN({self.winner.symbol})"
        return self.status.name


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


class MoveResult(NamedTuple):
    """An accepted move: where it went, who played it, and the outcome after it."""

    x: int
    y: int
    mark: Mark
    outcome: Outcome
    turn: int  # zero-based index of this move within the match
