# src/bowling/__init__.py
"""Bowling score engine - frames, strike/spare bonuses and game totals.

The public surface is re-exported lazily so ``import bowling`` stays cheap
for callers that only need the version.
"""

from __future__ import annotations

import tomllib
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _v
from pathlib import Path

# Path to the project's pyproject.toml for local version fallback
PYPROJECT_TOML = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

# Distribution name on the package index (differs from the import name)
DIST_NAME = "bowling-score"

__all__ = [  # loads lazily, that's why reportUnsupportedDunderAll is triggered
    "Frame",  # pyright: ignore[reportUnsupportedDunderAll]
    "Game",  # pyright: ignore[reportUnsupportedDunderAll]
    "RollError",  # pyright: ignore[reportUnsupportedDunderAll]
    "TooManyRolls",  # pyright: ignore[reportUnsupportedDunderAll]
    "RollExceedsMax",  # pyright: ignore[reportUnsupportedDunderAll]
    "FrameTotalExceeded",  # pyright: ignore[reportUnsupportedDunderAll]
    "simulate_many_games",  # pyright: ignore[reportUnsupportedDunderAll]
    "watch_game",  # pyright: ignore[reportUnsupportedDunderAll]
]

_LAZY_IMPORTS = {
    "Frame": "bowling.game.frame",
    "Game": "bowling.game.engine",
    "RollError": "bowling.game.exceptions",
    "TooManyRolls": "bowling.game.exceptions",
    "RollExceedsMax": "bowling.game.exceptions",
    "FrameTotalExceeded": "bowling.game.exceptions",
    "simulate_many_games": "bowling.simulation.simulation",
    "watch_game": "bowling.simulation.watch_game",
}


def __getattr__(name: str):  # pragma: no cover - simple dynamic loader
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(module_name)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def _read_version_from_toml() -> str:
    """Return the package version declared in ``pyproject.toml``.

    The file is expected to reside at the repository root three directories
    above this module.
    """
    with PYPROJECT_TOML.open("rb") as fh:
        data = tomllib.load(fh)
    return data["project"]["version"]


try:
    __version__ = _v(DIST_NAME)  # importlib.metadata
except PackageNotFoundError:
    __version__ = _read_version_from_toml()
