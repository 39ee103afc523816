# src/bowling/utils/yaml_helpers.py
"""
YAML parsing helpers: ``load_yaml_mapping`` reads one config file and
``expand_dotted_keys`` turns ``{"sim.seed": 3}`` into ``{"sim": {"seed": 3}}``.
"""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]


def load_yaml_mapping(path: str | Path) -> dict[str, Any]:
    """Read *path* and return its top-level mapping (empty files give ``{}``).

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    yaml.YAMLError
        If the file cannot be parsed.
    TypeError
        If the document is not a mapping.
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"Config file {path} must contain a mapping")
    return dict(data)


def _set_nested(target: dict[str, Any], parts: list[str], value: Any, raw_key: str) -> None:
    for part in parts[:-1]:
        child = target.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(
                f"Cannot expand dotted key {raw_key!r}; {part!r} is already set to a non-mapping value",
            )
        target = child
    leaf = parts[-1]
    if isinstance(target.get(leaf), dict) and isinstance(value, dict):
        target[leaf].update(value)
    else:
        target[leaf] = value


def expand_dotted_keys(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a nested dict from *mapping* that may contain dotted keys."""

    result: dict[str, Any] = {}
    for raw_key, raw_value in mapping.items():
        value = expand_dotted_keys(raw_value) if isinstance(raw_value, Mapping) else raw_value
        parts = [p for p in raw_key.split(".") if p] if isinstance(raw_key, str) else [raw_key]
        if not parts:
            continue
        _set_nested(result, parts, value, str(raw_key))
    return result


__all__ = ["expand_dotted_keys", "load_yaml_mapping"]
