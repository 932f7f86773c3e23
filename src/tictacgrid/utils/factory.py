"""
Factory functions for creating engines and host-facing helpers.
"""

from typing import Optional

from tictacgrid.core.types import Outcome
from tictacgrid.games.engine import GameEngine
from tictacgrid.utils.config import DEFAULT_CONFIG, DRAW_MESSAGE, WIN_MESSAGE, Config


def create_engine(config: Optional[Config] = None) -> GameEngine:
    """
    Create a fresh engine for one match.

    Every call builds its own board, so concurrently hosted matches never
    share state.

    Args:
        config: Match configuration (default: DEFAULT_CONFIG)

    Returns:
        Engine in the IN_PROGRESS state
    """
    config = config or DEFAULT_CONFIG
    return GameEngine(config.board_size)


def result_message(outcome: Outcome) -> str:
    """
    Text a host displays for a result: "X WIN !!!", "DRAWWW !!!",
    or "" while the match is still in progress.
    """
    if outcome.is_win:
        return WIN_MESSAGE.format(mark=outcome.winner.symbol)
    if outcome.is_draw:
        return DRAW_MESSAGE
    return ""
