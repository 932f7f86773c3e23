"""
Public API for hosting matches.

A host only talks to the engine through submit_move(), outcome(),
current_player() and reset(). This module provides a console host that
does exactly that.

Usage:
    from tictacgrid import GameEngine, play_match

    engine = GameEngine(size=3)
    outcome = play_match(engine)
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from tictacgrid.core.errors import GameError
from tictacgrid.core.types import Outcome
from tictacgrid.games.engine import GameEngine
from tictacgrid.utils.config import DEFAULT_CONFIG, Config
from tictacgrid.utils.factory import create_engine, result_message

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_move(raw: str) -> Tuple[int, int]:
    """Parse "x,y" into integer coordinates."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 2 comma-separated values (x,y), got '{raw}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Coordinates must be integers, got '{raw}'") from e


def _human_turn(engine: GameEngine, input_fn: InputFn, output: OutputFn) -> None:
    """Prompt until a move is accepted."""
    output(f"\nYour turn ({engine.current_player().symbol})")
    output(f"Format: x,y with x = column, y = row (0..{engine.size - 1})")

    while True:
        raw = input_fn("Move: ").strip()
        try:
            x, y = parse_move(raw)
            engine.submit_move(x, y)
            return
        except GameError as e:
            output(f"Illegal move: {e}")
        except ValueError as e:
            output(f"Invalid input: {e}")


def play_match(
    engine: GameEngine,
    input_fn: Optional[InputFn] = None,
    output: OutputFn = print,
) -> Outcome:
    """
    Run one match on the console until it finishes.

    Parameters
    ----------
    engine : GameEngine
        Engine to drive. Must be in progress.
    input_fn : callable, optional
        Reads a line given a prompt (default: builtin input, looked up per call).
    output : callable
        Writes a line (default: print).

    Returns
    -------
    Outcome
        The finished outcome.
    """
    input_fn = input_fn or input

    output(engine.state_string())
    while not engine.is_over():
        _human_turn(engine, input_fn, output)
        output(engine.state_string())

    outcome = engine.outcome()
    output("\n" + "=" * 40)
    output(result_message(outcome))
    output("=" * 40)
    return outcome


def play(
    config: Config = DEFAULT_CONFIG,
    input_fn: Optional[InputFn] = None,
    output: OutputFn = print,
) -> List[Outcome]:
    """
    Play config.rounds matches on one engine, resetting between them.

    Returns the outcome of each completed match.
    """
    engine = create_engine(config)
    outcomes: List[Outcome] = []

    output(f"Starting {config.board_size}x{config.board_size} match, {config.rounds} round(s)")
    for round_no in range(1, config.rounds + 1):
        if round_no > 1:
            engine.reset()
        output(f"\nRound {round_no}")
        outcomes.append(play_match(engine, input_fn, output))
        logger.info("Round %d: %s", round_no, outcomes[-1])

    return outcomes


__all__ = [
    "play",
    "play_match",
    "parse_move",
]
