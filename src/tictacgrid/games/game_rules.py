"""
NumPy line utilities and win/draw evaluation for N x N boards.

Boards here are the raw int8 grids from Board.cells, indexed [y, x].

Evaluation rescans the whole board after every move rather than only
the lines through the last placed cell. That trades efficiency for
simplicity: O(N^2) per move is cheap for the sizes played in practice
and leaves no incremental bookkeeping to get wrong.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from tictacgrid.core.types import DRAW, IN_PROGRESS, Mark, Outcome


def all_equal(line: np.ndarray) -> bool:
    """
    Return True if:
    - line is nonempty
    - first value is not EMPTY
    - all values equal the first
    """
    if line.size == 0:
        return False

    first = line[0]
    if first == Mark.EMPTY:
        return False

    return bool(np.all(line == first))


def get_rows(board: np.ndarray) -> List[np.ndarray]:
    """Rows top to bottom. Slices are copied to avoid shared memory issues."""
    return [row.copy() for row in board]


def get_cols(board: np.ndarray) -> List[np.ndarray]:
    """Columns left to right, via board.T with each column copied."""
    return [col.copy() for col in board.T]


def get_diagonals(board: np.ndarray) -> List[np.ndarray]:
    """
    [main, anti] diagonals.

    main: (i, i), top-left to bottom-right
    anti: (N-1-i, i) in (x, y), top-right to bottom-left
    """
    major = board.diagonal().copy()
    minor = np.fliplr(board).diagonal().copy()
    return [major, minor]


# ---------------------------------------------------------------------------
# Line scans
#
# Row and column scans stop at the first line whose leading cell is empty.
# This relies on marks never being removed during a match: only a full
# reset clears cells.
# ---------------------------------------------------------------------------

def _scan(lines: List[np.ndarray]) -> Optional[Mark]:
    for line in lines:
        if line[0] == Mark.EMPTY:
            break
        if all_equal(line):
            return Mark(int(line[0]))
    return None


def horizontal_winner(board: np.ndarray) -> Optional[Mark]:
    return _scan(get_rows(board))


def vertical_winner(board: np.ndarray) -> Optional[Mark]:
    return _scan(get_cols(board))


def diagonal_winner(board: np.ndarray) -> Optional[Mark]:
    """Main diagonal first, then anti-diagonal."""
    for diag in get_diagonals(board):
        if all_equal(diag):
            return Mark(int(diag[0]))
    return None


def find_winner(board: np.ndarray) -> Optional[Mark]:
    """Winning mark, checking rows, then columns, then diagonals."""
    for check in (horizontal_winner, vertical_winner, diagonal_winner):
        winner = check(board)
        if winner is not None:
            return winner
    return None


def evaluate(board: np.ndarray, turn_count: int) -> Outcome:
    """
    Outcome of a board after `turn_count` accepted moves.

    A full line wins; otherwise the match is drawn once every cell has
    been played, and still in progress before that.
    """
    winner = find_winner(board)
    if winner is not None:
        return Outcome.win(winner)
    if turn_count >= board.size:  # cell count
        return DRAW
    return IN_PROGRESS
