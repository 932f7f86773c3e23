"""
Error taxonomy for the engine.

Every error is raised to the caller and never retried internally.
Retry policy, if any, belongs to the host.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictacgrid.core.types import Mark, Outcome


class GameError(Exception):
    """Base class for all engine errors."""


class InvalidDimension(GameError, ValueError):
    """Board side length outside the supported range."""

    def __init__(self, size: object, message: str):
        self.size = size
        super().__init__(message)


class OutOfBounds(GameError, ValueError):
    """Coordinates outside [0, size)."""

    def __init__(self, x: int, y: int, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"Cell ({x},{y}) is outside a {size}x{size} board")


class CellOccupied(GameError, ValueError):
    """Target cell already holds a mark."""

    def __init__(self, x: int, y: int, mark: "Mark"):
        self.x = x
        self.y = y
        self.mark = mark
        super().__init__(f"Cell ({x},{y}) is occupied by {mark.symbol}")


class GameAlreadyFinished(GameError, RuntimeError):
    """Match is over; call reset() before playing again."""

    def __init__(self, outcome: "Outcome"):
        self.outcome = outcome
        super().__init__(f"Game already finished ({outcome}); reset() to play again")
