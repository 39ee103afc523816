"""Roll validation errors raised by :meth:`bowling.game.frame.Frame.add_roll`.

The set is closed: every invalid roll is reported as exactly one of
:class:`TooManyRolls`, :class:`RollExceedsMax` or :class:`FrameTotalExceeded`.
All three derive from :class:`RollError`, which is a :class:`ValueError` so
callers that only care about "bad input" can catch that instead.
"""

from __future__ import annotations


class RollError(ValueError):
    """Base class for a roll that a frame refused to record.

    Attributes
    ----------
    code
        Stable machine-readable identifier of the failure kind.
    position
        Position of the frame that rejected the roll.
    pins
        The rejected pin count.
    message
        Human-readable description.
    """

    code: str = "roll_error"

    def __init__(self, message: str, *, position: int, pins: int) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.pins = pins


class TooManyRolls(RollError):
    code = "too_many_rolls"

    def __init__(self, *, position: int, pins: int) -> None:
        super().__init__(
            f"frame {position} can only contain 2 rolls",
            position=position,
            pins=pins,
        )


class RollExceedsMax(RollError):
    code = "roll_exceeds_max"

    def __init__(self, *, position: int, pins: int, max_pins: int) -> None:
        super().__init__(
            f"roll of {pins} in frame {position} must be no greater than {max_pins}",
            position=position,
            pins=pins,
        )


class FrameTotalExceeded(RollError):
    code = "frame_total_exceeded"

    def __init__(self, *, position: int, pins: int, current: int, max_pins: int) -> None:
        super().__init__(
            f"frame {position} cannot contain more than {max_pins} "
            f"(has {current}, tried to add {pins})",
            position=position,
            pins=pins,
        )


__all__ = ["RollError", "TooManyRolls", "RollExceedsMax", "FrameTotalExceeded"]
