# src/bowling/config.py
"""Configuration schemas and helpers for the bowling CLI.

Defines dataclasses describing the game to score, random-game simulation and
logging settings, and includes utilities for loading YAML overlays and
applying ``section.option=value`` overrides.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field, is_dataclass
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]

from bowling.game.engine import Game
from bowling.utils.yaml_helpers import expand_dotted_keys, load_yaml_mapping

# ─────────────────────────────────────────────────────────────────────────────
# Dataclasses (schema)
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class GameConfig:
    """A game to score.

    Either ``frames`` (per-frame roll lists, frame 1 first) or ``rolls`` (one
    flat roll sequence split into frames as it is bowled). ``frames`` wins
    when both are set.
    """

    frames: list[list[int]] = field(default_factory=list)
    rolls: list[int] = field(default_factory=list)
    first_position: int = 1

    def build(self) -> Game:
        """Return a :class:`~bowling.game.engine.Game` holding these rolls.

        Raises
        ------
        ValueError
            If a pin count is not a non-negative integer.
        RollError
            If a frame rejects a roll.
        """
        pins = [p for frame in self.frames for p in frame] if self.frames else self.rolls
        bad = [p for p in pins if isinstance(p, bool) or not isinstance(p, int) or p < 0]
        if bad:
            raise ValueError(f"pins must be non-negative integers, got {bad!r}")
        if self.frames:
            return Game.from_frames(self.frames, start=self.first_position)
        return Game.from_rolls(self.rolls, start=self.first_position)


@dataclass
class SimConfig:
    """Random-game simulation parameters."""

    n_games: int = 1000
    n_frames: int = 10
    seed: int | None = 0
    strike_bias: float = 0.0
    """Extra probability of knocking every pin down on a frame's first roll."""


@dataclass
class LoggingConfig:
    """Root logger settings."""

    level: str = "INFO"
    log_file: Path | None = None


# ─────────────────────────────────────────────────────────────────────────────
# AppConfig
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class AppConfig:
    """Top-level configuration container."""

    game: GameConfig = field(default_factory=GameConfig)
    sim: SimConfig = field(default_factory=SimConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS: dict[str, type] = {
    "game": GameConfig,
    "sim": SimConfig,
    "logging": LoggingConfig,
}


# ─────────────────────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────────────────────


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``overlay`` onto ``base`` and return a new mapping."""
    result: dict[str, Any] = dict(base)
    for key, val in overlay.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(val, Mapping):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _annotation_contains(annotation: Any, target: type) -> bool:
    """Recursively inspect type annotations for the presence of ``target``."""
    if annotation is None:
        return False
    if annotation is target:
        return True
    origin = get_origin(annotation)
    if origin is None:
        return False
    return any(_annotation_contains(arg, target) for arg in get_args(annotation))


def _build(cls: type, section: Mapping[str, Any]) -> Any:
    """Instantiate dataclass ``cls`` from a mapping, ignoring unknown keys."""
    obj = cls()
    type_hints = get_type_hints(cls)
    for f in dataclasses.fields(cls):
        if f.name not in section:
            continue
        val = section[f.name]
        annotation = type_hints.get(f.name)
        if annotation is not None and is_dataclass(annotation) and isinstance(val, Mapping):
            val = _build(annotation, val)
        if _annotation_contains(annotation, Path) and isinstance(val, str):
            val = Path(val)
        setattr(obj, f.name, val)
    return obj


def load_app_config(*overlays: Path) -> AppConfig:
    """Merge one or more YAML overlays into an :class:`AppConfig`.

    Files are read in the order provided, dotted keys are expanded, and later
    overlays win.
    """
    data: dict[str, Any] = {}
    for path in overlays:
        data = _deep_merge(data, expand_dotted_keys(load_yaml_mapping(path)))
    return AppConfig(**{name: _build(cls, data.get(name, {})) for name, cls in _SECTIONS.items()})


# ─────────────────────────────────────────────────────────────────────────────
# Overrides
# ─────────────────────────────────────────────────────────────────────────────


def _matches(val: Any, annotation: Any) -> bool:
    """Return True when ``val`` fits a plain ``int`` / nested ``list[...]`` annotation."""
    if get_origin(annotation) is list:
        (item_t,) = get_args(annotation)
        return isinstance(val, list) and all(_matches(v, item_t) for v in val)
    if annotation is int:
        return isinstance(val, int) and not isinstance(val, bool)
    return isinstance(val, annotation)


def _coerce_list(value: str, annotation: Any) -> list[Any]:
    """Parse a list override given as YAML (``[[10],[5,3]]``) or ``10,5,3``."""
    try:
        parsed = yaml.safe_load(value) if value.strip() else []
    except yaml.YAMLError as exc:
        raise ValueError(f"Cannot parse list value from {value!r}") from exc
    if not isinstance(parsed, list):
        try:
            parsed = [int(part) for part in str(parsed).split(",") if part.strip()]
        except ValueError as exc:
            raise ValueError(f"Cannot parse list value from {value!r}") from exc
    if not _matches(parsed, annotation):
        raise ValueError(f"Value {value!r} does not match {annotation}")
    return parsed


def _coerce(value: str, current: Any, annotation: Any | None = None) -> Any:
    """Coerce ``value`` to the type of ``current``."""
    if get_origin(annotation) is list:
        return _coerce_list(value, annotation)
    if isinstance(current, bool) or _annotation_contains(annotation, bool):
        val_lower = value.lower()
        if val_lower in {"1", "true", "yes", "on"}:
            return True
        if val_lower in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"Cannot parse boolean value from {value!r}")
    if value.lower() in {"none", "null"} and (
        current is None or _annotation_contains(annotation, type(None))
    ):
        return None
    if isinstance(current, int) or _annotation_contains(annotation, int):
        return int(value)
    if isinstance(current, float) or _annotation_contains(annotation, float):
        return float(value)
    if isinstance(current, Path) or _annotation_contains(annotation, Path):
        return Path(value)
    return value


def apply_dot_overrides(cfg: AppConfig, pairs: list[str]) -> AppConfig:
    """Apply ``section.option=value`` overrides to *cfg*."""
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid override {pair!r}")
        key, raw = pair.split("=", 1)
        if "." not in key:
            raise ValueError(f"Invalid override {pair!r}")
        section_name, option = key.split(".", 1)
        if section_name not in _SECTIONS:
            raise AttributeError(f"Unknown config section {section_name!r}")
        section = getattr(cfg, section_name)
        if not hasattr(section, option):
            raise AttributeError(f"Unknown option {option!r} in section {section_name!r}")
        current = getattr(section, option)
        annotation = get_type_hints(type(section)).get(option)
        setattr(section, option, _coerce(raw, current, annotation))
    return cfg


__all__ = [
    "GameConfig",
    "SimConfig",
    "LoggingConfig",
    "AppConfig",
    "load_app_config",
    "apply_dot_overrides",
]
