# src/bowling/simulation/watch_game.py
"""
watch_game.py - bowl a *single* random game with very chatty logging.

It
 • logs every roll as it is added,
 • logs each finished frame with its strike / spare mark, and
 • logs the running total after every frame, then the final per-frame sheet.

No scoring is duplicated - the real :class:`~bowling.game.engine.Game` does
all of it; this module only narrates.
"""

from __future__ import annotations

import logging

from bowling.game.engine import Game
from bowling.game.frame import Frame
from bowling.simulation.simulation import random_frame_rolls
from bowling.utils.random import make_rng

LOGGER = logging.getLogger(__name__)


def frame_mark(frame: Frame) -> str:
    """Return the score-sheet mark for ``frame``: ``X``, ``a /`` or pins.

    >>> f = Frame(1); f.add_roll(7); f.add_roll(3); frame_mark(f)
    '7 /'
    """
    if frame.is_strike():
        return "X"
    if frame.is_spare():
        return f"{frame.roll(0)} /"
    return " ".join(str(pins) for pins in frame.rolls) or "-"


def score_sheet(game: Game) -> str:
    """Render ``game`` as aligned ``position mark raw bonus total`` lines."""
    lines = [f"{'frame':>5}  {'mark':<5} {'raw':>3} {'bonus':>5} {'total':>5}"]
    running = 0
    for frame in game:
        bonus = game.bonus(frame)
        running += frame.raw_total() + bonus
        lines.append(
            f"{frame.position:>5}  {frame_mark(frame):<5} "
            f"{frame.raw_total():>3} {bonus:>5} {running:>5}"
        )
    return "\n".join(lines)


def watch_game(seed: int | None = None, *, n_frames: int = 10, strike_bias: float = 0.0) -> Game:
    """Bowl one random game and log everything that happens.

    Parameters
    ----------
    seed:
        Optional seed forwarded to :func:`bowling.utils.random.make_rng` to make
        the game deterministic.
    n_frames:
        Frames to bowl.
    strike_bias:
        Forwarded to :func:`~bowling.simulation.simulation.random_frame_rolls`.

    Returns
    -------
    Game
        The finished game, for callers that want to inspect it further.
    """
    rng = make_rng(seed)
    game = Game()
    for position in range(1, n_frames + 1):
        frame = game.frame(position)
        for pins in random_frame_rolls(rng, strike_bias=strike_bias):
            frame.add_roll(pins)
            LOGGER.info(
                "frame %d roll %d: %d pins",
                position,
                len(frame.rolls),
                pins,
                extra={"stage": "watch"},
            )
        LOGGER.info(
            "frame %d done [%s] running total=%d",
            position,
            frame_mark(frame),
            game.total_score(),
            extra={"stage": "watch"},
        )

    LOGGER.info("\n===== final score sheet =====\n%s", score_sheet(game), extra={"stage": "watch"})
    LOGGER.info("Final score: %d", game.total_score(), extra={"stage": "watch"})
    return game
