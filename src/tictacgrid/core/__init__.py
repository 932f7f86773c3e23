"""
Core module - fundamental types, constants and errors.
"""

from tictacgrid.core.types import (
    Mark,
    Status,
    Outcome,
    MoveResult,
    IN_PROGRESS,
    DRAW,
    CELL_STRINGS,
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    DEFAULT_BOARD_SIZE,
    MAX_CELL_COUNT,
)
from tictacgrid.core.errors import (
    GameError,
    InvalidDimension,
    OutOfBounds,
    CellOccupied,
    GameAlreadyFinished,
)

__all__ = [
    # Types
    "Mark",
    "Status",
    "Outcome",
    "MoveResult",
    # Constants
    "IN_PROGRESS",
    "DRAW",
    "CELL_STRINGS",
    "MIN_BOARD_SIZE",
    "MAX_BOARD_SIZE",
    "DEFAULT_BOARD_SIZE",
    "MAX_CELL_COUNT",
    # Errors
    "GameError",
    "InvalidDimension",
    "OutOfBounds",
    "CellOccupied",
    "GameAlreadyFinished",
]
