"""
Configuration and defaults.
"""

from tictacgrid.core.types import DEFAULT_BOARD_SIZE
from tictacgrid.games.board import validate_size


# ---------------------------------------------------------------------------
# Result messages shown by hosts
# ---------------------------------------------------------------------------

WIN_MESSAGE = "{mark} WIN !!!"
DRAW_MESSAGE = "DRAWWW !!!"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Match configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        rounds: int = 1,
    ):
        self.board_size = validate_size(board_size)

        if rounds < 1:
            raise ValueError(f"rounds must be at least 1, got {rounds}")
        self.rounds = rounds

    @property
    def max_turns(self) -> int:
        return self.board_size * self.board_size

    def __repr__(self) -> str:
        return f"Config(board_size={self.board_size}, rounds={self.rounds})"


# Default configuration
DEFAULT_CONFIG = Config()
