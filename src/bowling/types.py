"""Shared type aliases for the bowling project.

``Pins`` is a single roll's pin count; ``FrameRolls`` the rolls bowled within
one frame and ``RollSequence`` a flat run of rolls across frames.
"""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
import numpy.typing as npt

Pins: TypeAlias = int
FrameRolls: TypeAlias = Sequence[int]
RollSequence: TypeAlias = Sequence[int]
Int64Array1D: TypeAlias = npt.NDArray[np.int64]  # 1-D array of 64-bit ints
