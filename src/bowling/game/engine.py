from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List

from bowling.game.frame import MAX_PINS, Frame
from bowling.types import FrameRolls, RollSequence

"""engine.py
============
Game-level scoring for bowling.

High-level flow
---------------
* Game.frame hands out frames by position, creating them on first use.
* Frame.add_roll validates and records each roll.
* Game.total_score adds every frame's raw total to its bonus.  A strike
  earns the next two rolls, a spare the next one; Game.lookahead walks
  forward across frame boundaries to collect them.

Frame count is not limited and the tenth frame gets no special treatment.
Looking past the last frame reads zero pins and never creates frames.
"""


__all__ = ["Game", "STRIKE_BONUS_ROLLS", "SPARE_BONUS_ROLLS"]

LOGGER = logging.getLogger(__name__)

STRIKE_BONUS_ROLLS: int = 2
SPARE_BONUS_ROLLS: int = 1


class Game:
    """A bowling game made of frames keyed by position."""

    def __init__(self) -> None:
        self._frames: Dict[int, Frame] = {}

    # ---------------------------- frames --------------------------------
    def frame(self, position: int) -> Frame:
        """Return the frame at ``position``, creating it on first access."""
        found = self._frames.get(position)
        if found is None:
            found = Frame(position)
            self._frames[position] = found
        return found

    def positions(self) -> List[int]:
        """Positions of every frame present, ascending."""
        return sorted(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return (self._frames[pos] for pos in self.positions())

    def _peek(self, position: int) -> Frame | None:
        return self._frames.get(position)

    # ---------------------------- scoring -------------------------------
    def lookahead(self, frame: Frame, rolls_needed: int) -> int:
        """Pins from the next ``rolls_needed`` rolls bowled after ``frame``.

        Inputs
        ------
        frame
            Frame whose following rolls are summed.
        rolls_needed
            Number of rolls to collect (1 for a spare, 2 for a strike).

        Returns
        -------
        int
            Pin total of those rolls.  Rolls that have not been bowled yet
            count as 0.
        """
        nxt = self._peek(frame.position + 1)
        if nxt is None:
            return 0

        if nxt.is_strike():
            pins = MAX_PINS
            rolls_needed -= 1
            if rolls_needed > 0:
                pins += self.lookahead(nxt, rolls_needed)
            return pins

        pins = nxt.roll(0)
        rolls_needed -= 1
        if rolls_needed > 0:
            pins += nxt.roll(1)
        return pins

    def bonus(self, frame: Frame) -> int:
        """Extra points ``frame`` earns from later rolls."""
        if frame.is_strike():
            return self.lookahead(frame, STRIKE_BONUS_ROLLS)
        if frame.is_spare():
            return self.lookahead(frame, SPARE_BONUS_ROLLS)
        return 0

    def frame_scores(self) -> Dict[int, int]:
        """Map each position to its raw total plus bonus, ascending."""
        return {frame.position: frame.raw_total() + self.bonus(frame) for frame in self}

    def total_score(self) -> int:
        """Score of every frame present, bonuses included."""
        return sum(self.frame_scores().values())

    # -------------------------- constructors ----------------------------
    @classmethod
    def from_frames(cls, frames: Iterable[FrameRolls], *, start: int = 1) -> "Game":
        """Build a game from per-frame roll lists, the first at ``start``.

        Raises
        ------
        RollError
            If any roll is rejected by its frame.
        """
        game = cls()
        for position, rolls in enumerate(frames, start=start):
            frame = game.frame(position)
            for pins in rolls:
                frame.add_roll(pins)
        return game

    @classmethod
    def from_rolls(cls, rolls: RollSequence, *, start: int = 1) -> "Game":
        """Build a game from a flat roll sequence.

        Rolls fill the current frame until it holds a strike or two rolls,
        then move on to the next position.
        """
        game = cls()
        position = start
        for pins in rolls:
            frame = game.frame(position)
            if frame.is_complete():
                position += 1
                frame = game.frame(position)
            frame.add_roll(pins)
        LOGGER.debug(
            "Built game from %d rolls across %d frames",
            len(rolls),
            len(game),
            extra={"stage": "game"},
        )
        return game

    def __repr__(self) -> str:
        frames = ", ".join(f"{f.position}:{list(f.rolls)}" for f in self)
        return f"Game({frames})"
