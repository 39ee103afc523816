# src/bowling/simulation/simulation.py
"""Random bowling games for smoke-testing and score distributions.

Key entry points include:

* ``random_frame_rolls`` for bowling one legal frame with a numpy generator.
* ``simulate_one_game`` for a full game of ``n_frames`` random frames.
* ``simulate_many_games`` for a batch of seeded games, returned as totals.
* ``summarize_scores`` for collapsing totals into a few headline numbers.
"""

from __future__ import annotations

import logging
from typing import Dict, List

import numpy as np

from bowling.game.engine import Game
from bowling.game.frame import MAX_PINS
from bowling.types import Int64Array1D
from bowling.utils.random import make_rng, spawn_seeds

__all__: list[str] = [
    "random_frame_rolls",
    "simulate_one_game",
    "simulate_many_games",
    "summarize_scores",
]

LOGGER = logging.getLogger(__name__)


def random_frame_rolls(rng: np.random.Generator, *, strike_bias: float = 0.0) -> List[int]:
    """Bowl one frame and return its rolls.

    Inputs
    ------
    rng
        Generator supplying the pin counts.
    strike_bias
        Probability in ``[0, 1]`` of forcing a strike before the uniform draw.

    Returns
    -------
    list[int]
        ``[10]`` for a strike, otherwise two rolls whose sum is at most 10.
    """
    if not 0.0 <= strike_bias <= 1.0:
        raise ValueError(f"strike_bias must be within [0, 1], got {strike_bias}")
    if strike_bias and rng.random() < strike_bias:
        return [MAX_PINS]
    first = int(rng.integers(0, MAX_PINS + 1))
    if first == MAX_PINS:
        return [first]
    second = int(rng.integers(0, MAX_PINS - first + 1))
    return [first, second]


def simulate_one_game(
    rng: np.random.Generator,
    *,
    n_frames: int = 10,
    strike_bias: float = 0.0,
) -> Game:
    """Play ``n_frames`` random frames into a fresh :class:`Game`."""
    if n_frames < 0:
        raise ValueError(f"n_frames must be non-negative, got {n_frames}")
    frames = [random_frame_rolls(rng, strike_bias=strike_bias) for _ in range(n_frames)]
    return Game.from_frames(frames)


def simulate_many_games(
    n_games: int,
    *,
    n_frames: int = 10,
    seed: int | None = 0,
    strike_bias: float = 0.0,
) -> Int64Array1D:
    """Play ``n_games`` seeded games and return their total scores.

    Each game draws from its own generator seeded via
    :func:`bowling.utils.random.spawn_seeds`, so game ``i`` of a batch can be
    replayed on its own with ``make_rng(seeds[i])``.
    """
    seeds = spawn_seeds(n_games, seed=seed)
    totals = np.empty(n_games, dtype=np.int64)
    for idx, game_seed in enumerate(seeds):
        game = simulate_one_game(
            make_rng(int(game_seed)), n_frames=n_frames, strike_bias=strike_bias
        )
        totals[idx] = game.total_score()
    LOGGER.info(
        "Simulated games",
        extra={
            "stage": "simulate",
            "n_games": n_games,
            "n_frames": n_frames,
            "seed": seed,
        },
    )
    return totals


def summarize_scores(totals: Int64Array1D) -> Dict[str, float]:
    """Return count, mean, std, min and max of ``totals``.

    An empty batch reports a count of 0 and NaN for the other statistics.
    """
    if totals.size == 0:
        nan = float("nan")
        return {"n_games": 0, "mean": nan, "std": nan, "min": nan, "max": nan}
    return {
        "n_games": int(totals.size),
        "mean": float(np.mean(totals)),
        "std": float(np.std(totals)),
        "min": int(np.min(totals)),
        "max": int(np.max(totals)),
    }
