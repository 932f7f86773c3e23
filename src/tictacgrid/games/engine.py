"""
GameEngine - turn sequencing and win/draw detection for one match.

State machine:
    IN_PROGRESS --(winning line or full board)--> finished(outcome)

Finished is terminal until reset(). Moves submitted to a finished match
raise GameAlreadyFinished; they are never silently ignored.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from tictacgrid.core.errors import CellOccupied, GameAlreadyFinished
from tictacgrid.core.types import (
    DEFAULT_BOARD_SIZE,
    IN_PROGRESS,
    Mark,
    MoveResult,
    Outcome,
)
from tictacgrid.games.board import Board
from tictacgrid.games.game_rules import evaluate
from tictacgrid.games.game_state import GameState

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns a Board, the turn counter and the current outcome.

    X moves on even turns, O on odd turns. Hosts drive the match through
    submit_move() and read it back through outcome(), get_cell() and
    current_player(); they never touch the board directly.
    """

    __slots__ = ('_board', '_turn_count', '_outcome', '_history')

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        self._board = Board(size)
        self._turn_count = 0
        self._outcome: Outcome = IN_PROGRESS
        self._history: List[MoveResult] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def turn_count(self) -> int:
        return self._turn_count

    @property
    def history(self) -> Tuple[MoveResult, ...]:
        """Accepted moves of the current match, oldest first."""
        return tuple(self._history)

    def outcome(self) -> Outcome:
        return self._outcome

    def is_over(self) -> bool:
        return self._outcome.is_finished

    def current_player(self) -> Mark:
        """Mark that plays next. Only defined while the match is in progress."""
        if self._outcome.is_finished:
            raise GameAlreadyFinished(self._outcome)
        return Mark.X if self._turn_count % 2 == 0 else Mark.O

    def get_cell(self, x: int, y: int) -> Mark:
        return self._board.get(x, y)

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells as (x, y). Empty once the match is finished."""
        if self._outcome.is_finished:
            return []
        return self._board.empty_cells()

    def get_state(self) -> GameState:
        return GameState(self._board.cells.copy(), self._turn_count)

    def state_string(self) -> str:
        return self._board.to_string()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def submit_move(self, x: int, y: int) -> MoveResult:
        """
        Place the current player's mark at (x, y).

        Either applies fully (mark written, turn counted, outcome
        re-evaluated) or raises with no state change.

        Raises:
            GameAlreadyFinished: the match already has a result.
            OutOfBounds: (x, y) is not on the board.
            CellOccupied: the cell already holds a mark.
        """
        if self._outcome.is_finished:
            logger.debug("Rejected (%s, %s): game already finished", x, y)
            raise GameAlreadyFinished(self._outcome)

        current = self._board.get(x, y)  # raises OutOfBounds
        if current is not Mark.EMPTY:
            logger.debug("Rejected (%s, %s): occupied by %s", x, y, current.symbol)
            raise CellOccupied(x, y, current)

        mark = self.current_player()
        turn = self._turn_count

        self._board.set(x, y, mark)
        self._turn_count += 1
        self._outcome = evaluate(self._board.cells, self._turn_count)

        result = MoveResult(int(x), int(y), mark, self._outcome, turn)
        self._history.append(result)

        logger.debug("Turn %d: %s -> (%s, %s)", turn, mark.symbol, x, y)
        if self._outcome.is_finished:
            logger.info(
                "Match finished after %d turns: %s", self._turn_count, self._outcome
            )
        return result

    def reset(self) -> None:
        """Start a new match in place on an empty board of the same size."""
        self._board.clear()
        self._turn_count = 0
        self._outcome = IN_PROGRESS
        self._history.clear()
        logger.debug("Match reset (%dx%d)", self.size, self.size)

    def __repr__(self) -> str:
        return (
            f"GameEngine(size={self.size}, turn_count={self._turn_count}, "
            f"outcome={self._outcome})"
        )
