"""Random-game simulation and narrated playback."""

from bowling.simulation.simulation import (
    random_frame_rolls,
    simulate_many_games,
    simulate_one_game,
    summarize_scores,
)

__all__ = [
    "random_frame_rolls",
    "simulate_one_game",
    "simulate_many_games",
    "summarize_scores",
]
