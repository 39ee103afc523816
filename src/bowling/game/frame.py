"""Single-frame state and roll validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bowling.game.exceptions import FrameTotalExceeded, RollExceedsMax, TooManyRolls
from bowling.types import Pins

LOGGER = logging.getLogger(__name__)

__all__ = ["Frame", "MAX_PINS", "MAX_ROLLS"]

# Pins standing at the start of a frame
MAX_PINS: int = 10
# Rolls allowed within one frame
MAX_ROLLS: int = 2


@dataclass(slots=True)
class Frame:
    """Rolls bowled within one frame.

    The roll list only ever grows, one validated roll at a time, through
    :meth:`add_roll`. Everything else is derived on demand.
    """

    position: int
    _rolls: list[Pins] = field(default_factory=list, repr=False)

    # ----------------------------- mutation -----------------------------
    def add_roll(self, pins: Pins) -> None:
        """Record one roll after validating it.

        Inputs
        ------
        pins
            Pins knocked down by the roll.

        Raises
        ------
        TooManyRolls
            The frame already holds two rolls.
        RollExceedsMax
            ``pins`` is greater than 10.
        FrameTotalExceeded
            The frame total would go above 10.
        """
        if len(self._rolls) >= MAX_ROLLS:
            raise TooManyRolls(position=self.position, pins=pins)
        if pins > MAX_PINS:
            raise RollExceedsMax(position=self.position, pins=pins, max_pins=MAX_PINS)
        current = self.raw_total()
        if current + pins > MAX_PINS:
            raise FrameTotalExceeded(
                position=self.position, pins=pins, current=current, max_pins=MAX_PINS
            )
        self._rolls.append(pins)
        LOGGER.debug(
            "frame %d roll %d -> %d",
            self.position,
            len(self._rolls),
            pins,
            extra={"stage": "frame"},
        )

    # ------------------------------ queries -----------------------------
    @property
    def rolls(self) -> tuple[Pins, ...]:
        return tuple(self._rolls)

    def raw_total(self) -> int:
        """Sum of this frame's own rolls, without any bonus."""
        return sum(self._rolls)

    def roll(self, index: int) -> Pins:
        """Return the roll at ``index``; absent rolls read as 0."""
        if 0 <= index < len(self._rolls):
            return self._rolls[index]
        return 0

    def has_rolls(self) -> bool:
        return len(self._rolls) > 0

    def is_strike(self) -> bool:
        return self.has_rolls() and self.roll(0) == MAX_PINS

    def is_spare(self) -> bool:
        # Also true for a lone strike; callers check is_strike() first.
        return self.has_rolls() and self.raw_total() == MAX_PINS

    def is_complete(self) -> bool:
        """True once no further roll belongs in this frame."""
        return self.is_strike() or len(self._rolls) >= MAX_ROLLS
