"""Frame and game scoring model."""

from bowling.game.engine import Game
from bowling.game.exceptions import (
    FrameTotalExceeded,
    RollError,
    RollExceedsMax,
    TooManyRolls,
)
from bowling.game.frame import Frame

__all__ = [
    "Frame",
    "Game",
    "RollError",
    "TooManyRolls",
    "RollExceedsMax",
    "FrameTotalExceeded",
]
