"""
Tests for tictacgrid.games.game_rules

Boards are built directly as int8 arrays indexed [y, x]:
0 = empty, 1 = X, 2 = O.
"""

import numpy as np
import pytest

from tictacgrid.core.types import DRAW, IN_PROGRESS, Mark, Outcome
from tictacgrid.games.game_rules import (
    all_equal,
    diagonal_winner,
    evaluate,
    find_winner,
    get_cols,
    get_diagonals,
    get_rows,
    horizontal_winner,
    vertical_winner,
)


def grid(rows) -> np.ndarray:
    return np.array(rows, dtype=np.int8)


class TestLineExtraction:
    """Row/column/diagonal extraction tests."""

    def test_rows_and_cols(self):
        b = grid([[1, 2, 0], [0, 1, 2], [2, 0, 1]])
        assert [r.tolist() for r in get_rows(b)] == [[1, 2, 0], [0, 1, 2], [2, 0, 1]]
        assert [c.tolist() for c in get_cols(b)] == [[1, 0, 2], [2, 1, 0], [0, 2, 1]]

    def test_diagonals(self):
        """Main is (i, i); anti is (N-1-i, i) in (x, y)."""
        b = grid([[1, 0, 2], [0, 1, 0], [2, 0, 0]])
        main, anti = get_diagonals(b)
        assert main.tolist() == [1, 1, 0]
        assert anti.tolist() == [2, 1, 2]

    def test_lines_are_copies(self):
        b = grid([[0, 0], [0, 0]])
        get_rows(b)[0][0] = 1
        assert b[0, 0] == 0


class TestAllEqual:
    def test_all_equal(self):
        assert all_equal(grid([1, 1, 1]))
        assert not all_equal(grid([1, 1, 2]))

    def test_empty_line_never_equal(self):
        assert not all_equal(grid([0, 0, 0]))
        assert not all_equal(np.array([], dtype=np.int8))


class TestWinners:
    """Per-direction winner tests."""

    @pytest.mark.parametrize("rows, expected", [
        ([[1, 1, 1], [2, 2, 0], [0, 0, 0]], Mark.X),
        ([[1, 2, 1], [2, 2, 2], [1, 1, 0]], Mark.O),
        ([[1, 2, 1], [2, 1, 2], [1, 1, 1]], Mark.X),
    ])
    def test_horizontal(self, rows, expected):
        assert horizontal_winner(grid(rows)) is expected

    @pytest.mark.parametrize("rows, expected", [
        ([[1, 2, 0], [1, 2, 0], [1, 0, 0]], Mark.X),
        ([[1, 2, 1], [1, 2, 0], [2, 2, 1]], Mark.O),
    ])
    def test_vertical(self, rows, expected):
        assert vertical_winner(grid(rows)) is expected

    def test_main_diagonal(self):
        assert diagonal_winner(grid([[2, 1, 0], [1, 2, 0], [0, 1, 2]])) is Mark.O

    def test_anti_diagonal(self):
        assert diagonal_winner(grid([[0, 2, 1], [2, 1, 0], [1, 0, 0]])) is Mark.X

    def test_no_winner(self):
        b = grid([[1, 2, 1], [1, 2, 2], [2, 1, 1]])
        assert horizontal_winner(b) is None
        assert vertical_winner(b) is None
        assert diagonal_winner(b) is None
        assert find_winner(b) is None


class TestScanOrder:
    """Priority and early-stop behaviour of the scans."""

    def test_row_scan_stops_at_empty_leading_cell(self):
        """A complete row below a row with an empty first cell is not seen."""
        b = grid([[0, 2, 2], [1, 1, 1], [0, 0, 0]])
        assert horizontal_winner(b) is None

    def test_column_scan_stops_at_empty_leading_cell(self):
        """A complete column right of a column with an empty top cell is not seen."""
        b = grid([[0, 1, 0], [2, 1, 0], [2, 1, 0]])
        assert vertical_winner(b) is None

    def test_first_complete_row_wins(self):
        """Rows are scanned top to bottom."""
        b = grid([[2, 2, 2], [1, 1, 1], [0, 0, 0]])
        assert find_winner(b) is Mark.O

    def test_row_and_column_through_same_corner(self):
        b = grid([[1, 1, 1], [1, 2, 2], [1, 2, 2]])
        assert horizontal_winner(b) is Mark.X
        assert vertical_winner(b) is Mark.X
        assert find_winner(b) is Mark.X

    def test_larger_board(self):
        """5x5 needs all five in a line."""
        b = np.zeros((5, 5), dtype=np.int8)
        b[0, :4] = 1
        assert find_winner(b) is None
        b[0, 4] = 1
        assert find_winner(b) is Mark.X


class TestEvaluate:
    """Outcome evaluation tests."""

    def test_in_progress(self):
        b = grid([[1, 0, 0], [0, 0, 0], [0, 0, 0]])
        assert evaluate(b, 1) == IN_PROGRESS

    def test_win(self):
        b = grid([[1, 1, 1], [2, 2, 0], [0, 0, 0]])
        assert evaluate(b, 5) == Outcome.win(Mark.X)

    def test_draw_when_all_turns_played(self):
        b = grid([[1, 2, 1], [1, 2, 2], [2, 1, 1]])
        assert evaluate(b, 9) == DRAW

    def test_not_draw_before_last_turn(self):
        """Draw depends on the turn count reaching N*N."""
        b = grid([[1, 2, 1], [1, 2, 2], [2, 1, 0]])
        assert evaluate(b, 8) == IN_PROGRESS

    def test_win_on_last_turn_beats_draw(self):
        b = grid([[1, 2, 1], [2, 1, 2], [2, 1, 1]])
        assert evaluate(b, 9) == Outcome.win(Mark.X)
