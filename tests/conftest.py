"""
Shared test fixtures for tictacgrid tests.

Design principles:
- Small boards (3x3) unless a test is about size
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, Iterable, List, Tuple

import pytest

from tictacgrid.core.types import MoveResult
from tictacgrid.games.board import Board
from tictacgrid.games.engine import GameEngine


# Final board (rows top to bottom):
#   X O X
#   X O O
#   O X X
# played in alternating turn order, no line at any point.
DRAW_SEQUENCE_3 = [
    (0, 0), (1, 0), (2, 0), (1, 1), (0, 1), (2, 1), (1, 2), (0, 2), (2, 2),
]


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty 3x3 board."""
    return Board(3)


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def engine() -> GameEngine:
    """Fresh 3x3 engine."""
    return GameEngine(size=3)


@pytest.fixture
def default_engine() -> GameEngine:
    """Fresh engine with the default board size."""
    return GameEngine()


@pytest.fixture
def play() -> Callable[[GameEngine, Iterable[Tuple[int, int]]], List[MoveResult]]:
    """Submit a sequence of (x, y) moves, returning each MoveResult."""
    def _play(engine: GameEngine, moves: Iterable[Tuple[int, int]]) -> List[MoveResult]:
        return [engine.submit_move(x, y) for x, y in moves]
    return _play


@pytest.fixture
def draw_sequence() -> List[Tuple[int, int]]:
    """Alternating 3x3 moves that fill the board without a line."""
    return list(DRAW_SEQUENCE_3)


@pytest.fixture
def drawn_engine(engine: GameEngine, play) -> GameEngine:
    """3x3 engine that has just finished in a draw."""
    play(engine, DRAW_SEQUENCE_3)
    return engine


@pytest.fixture
def won_engine(engine: GameEngine, play) -> GameEngine:
    """3x3 engine where X has just won the top row."""
    play(engine, [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0)])
    return engine
