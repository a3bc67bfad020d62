"""Config loading, overrides and validation for sampling runs.

A run config is a flat mapping over the keys in ``DEFAULT_CONFIG``.
"""

from __future__ import annotations

import json
import math
import numbers
from pathlib import Path
from typing import Any

from randomizer.random_numbers import validate_request

__all__ = [
    "DEFAULT_CONFIG",
    "CONFIG_KEYS",
    "load_json",
    "apply_overrides",
    "merge_config",
    "validate_run_config",
]

DEFAULT_CONFIG: dict[str, Any] = {
    "n": 100,
    "min": 0.0,
    "max": 1.0,
    "seed": 0,
    "bins": 20,
    "repeats": 2000,
    "ks_threshold": 0.1,
}

CONFIG_KEYS = frozenset(DEFAULT_CONFIG)


def _check_keys(keys: Any, source: str) -> None:
    unknown = sorted(set(keys) - CONFIG_KEYS)
    if unknown:
        raise ValueError(
            f"Unknown config key(s) in {source}: {', '.join(unknown)} "
            f"(expected one of: {', '.join(sorted(CONFIG_KEYS))})"
        )


def load_json(path: Path) -> dict[str, Any]:
    """Load a run config file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a JSON object over the known keys.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    _check_keys(data, str(path))
    return data


def apply_overrides(config: dict[str, Any], overrides: list[str]) -> dict[str, Any]:
    """Return a copy of ``config`` with ``key=value`` overrides applied.

    Values are parsed as JSON literals when possible (``n=5`` gives an int,
    ``seed=null`` gives None), otherwise kept as the raw string so validation
    can report it.

    Raises:
        ValueError: If an override has no ``=`` or names an unknown key.
    """
    result = dict(config)
    for item in overrides:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Override must be key=value, got: {item}")
        _check_keys([key], "override")
        try:
            result[key] = json.loads(raw)
        except json.JSONDecodeError:
            result[key] = raw
    return result


def merge_config(*layers: dict[str, Any] | None) -> dict[str, Any]:
    """Merge config layers left to right, skipping None layers and None values."""
    merged: dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            if value is not None:
                merged[key] = value
    return merged


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_run_config(config: dict[str, Any]) -> None:
    """Check a resolved run config before anything is written to disk.

    ``n``, ``min`` and ``max`` follow the ``random_numbers`` rules; ``seed``
    must be a non-negative int or None; ``bins`` and ``repeats`` must be
    positive ints; ``ks_threshold`` must be a finite non-negative number.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If a value is out of range or a key is unknown/missing.
    """
    _check_keys(config, "config")
    missing = sorted(CONFIG_KEYS - set(config))
    if missing:
        raise ValueError(f"Missing config key(s): {', '.join(missing)}")

    validate_request(config["n"], config["min"], config["max"])

    seed = config["seed"]
    if seed is not None:
        if not _is_int(seed):
            raise TypeError(f"seed must be an integer or null, got {seed!r}")
        if seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")

    for key in ("bins", "repeats"):
        value = config[key]
        if not _is_int(value):
            raise TypeError(f"{key} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"{key} must be positive, got {value}")

    threshold = config["ks_threshold"]
    if not isinstance(threshold, numbers.Real) or isinstance(threshold, bool):
        raise TypeError(f"ks_threshold must be a number, got {threshold!r}")
    try:
        finite = math.isfinite(threshold)
    except OverflowError:
        finite = False
    if not finite or threshold < 0:
        raise ValueError(f"ks_threshold must be finite and non-negative, got {threshold}")
