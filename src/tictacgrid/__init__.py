"""
tictacgrid - N-in-a-row tic-tac-toe engine for N x N boards.

Tracks board state, sequences turns between X and O, and decides the
match by checking rows, columns and both diagonals after every move.

Quick Start:
    from tictacgrid import GameEngine, result_message

    engine = GameEngine(size=3)
    engine.submit_move(0, 0)       # X
    engine.submit_move(0, 1)       # O
    print(engine.outcome())
    print(result_message(engine.outcome()))

Modules:
    core   - Marks, outcomes, size limits and the error taxonomy
    games  - Board, line rules and the GameEngine state machine
    utils  - Configuration and factories
    api    - Console host loop
"""

from tictacgrid.core import (
    Mark,
    Status,
    Outcome,
    MoveResult,
    IN_PROGRESS,
    DRAW,
    GameError,
    InvalidDimension,
    OutOfBounds,
    CellOccupied,
    GameAlreadyFinished,
)
from tictacgrid.games import Board, GameEngine, GameState
from tictacgrid.utils import Config, DEFAULT_CONFIG, create_engine, result_message
from tictacgrid.api import play, play_match

__version__ = "1.0.0"

__all__ = [
    # Main API
    "GameEngine",
    "Board",
    "GameState",
    "create_engine",
    "result_message",
    "play",
    "play_match",
    "Config",
    "DEFAULT_CONFIG",
    # Types
    "Mark",
    "Status",
    "Outcome",
    "MoveResult",
    "IN_PROGRESS",
    "DRAW",
    # Errors
    "GameError",
    "InvalidDimension",
    "OutOfBounds",
    "CellOccupied",
    "GameAlreadyFinished",
]
