"""
Tests for tictacgrid.utils.config
"""

import pytest

from tictacgrid.core.errors import InvalidDimension
from tictacgrid.core.types import DEFAULT_BOARD_SIZE
from tictacgrid.utils.config import DEFAULT_CONFIG, Config


class TestConfig:
    """Config tests."""

    def test_defaults(self):
        """Default config is a single 5x5 match."""
        assert DEFAULT_CONFIG.board_size == DEFAULT_BOARD_SIZE == 5
        assert DEFAULT_CONFIG.rounds == 1
        assert DEFAULT_CONFIG.max_turns == 25

    def test_custom(self):
        config = Config(board_size=3, rounds=4)
        assert config.board_size == 3
        assert config.rounds == 4
        assert config.max_turns == 9

    @pytest.mark.parametrize("size", [1, 46341])
    def test_invalid_size(self, size):
        """Board size is validated like Board itself."""
        with pytest.raises(InvalidDimension):
            Config(board_size=size)

    def test_invalid_rounds(self):
        with pytest.raises(ValueError):
            Config(rounds=0)
