"""Configuration file loading for shells built on shellkit.

Reads TOML from ~/.config/<name>/config.toml (global) and an optional
explicit path. Precedence: constructor arguments > explicit file > global
file > defaults.
"""

import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import Any

from .errors import ConfigError

# --- Schema ---

CONFIG_KEYS: dict[str, type | tuple[type, ...]] = {
    "prompt": str,
    "history_file": str,
    "history_limit": int,
    "color": bool,
    "log_level": str,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# --- Internal helpers ---


def global_config_dir(name: str) -> Path:
    """Return the global config directory, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / name
    return Path.home() / ".config" / name


def _type_name(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def _validate_config(config: dict, source: str) -> None:
    """Validate types and ranges in a parsed config dict.

    Raises ConfigError for type mismatches. Prints warnings for unknown keys.
    """
    for key, value in config.items():
        if key not in CONFIG_KEYS:
            print(f"warning: {source}: unknown config key {key!r}", file=sys.stderr)
            continue

        expected = CONFIG_KEYS[key]
        # bool is a subclass of int; reject it for non-bool fields.
        if isinstance(value, bool) and expected is not bool:
            raise ConfigError(
                f"{source}: {key!r} expected {_type_name(expected)}, got bool"
            )
        if not isinstance(value, expected):
            raise ConfigError(
                f"{source}: {key!r} expected {_type_name(expected)}, got {type(value).__name__}"
            )

    if "history_limit" in config and config["history_limit"] < 1:
        raise ConfigError(f"{source}: 'history_limit' must be at least 1")
    if "log_level" in config and config["log_level"].upper() not in _LOG_LEVELS:
        raise ConfigError(
            f"{source}: 'log_level' must be one of {', '.join(sorted(_LOG_LEVELS))}"
        )


def _resolve_paths(config: dict, config_dir: Path) -> None:
    """Resolve history_file against the config file's directory.

    expanduser() runs first so ~/... is not turned into <config_dir>/~/...
    """
    if "history_file" in config:
        p = Path(config["history_file"]).expanduser()
        config["history_file"] = str(p if p.is_absolute() else config_dir / p)


def _load_single(path: Path, label: str) -> dict:
    """Load and validate one TOML file. Returns an empty dict if missing."""
    if not path.is_file():
        return {}
    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{label}: invalid TOML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{label}: cannot read file: {e}") from e

    _validate_config(config, label)
    known = {k: v for k, v in config.items() if k in CONFIG_KEYS}
    _resolve_paths(known, path.parent)
    return known


# --- Public API ---


def load_config(name: str, path: str | os.PathLike | None = None) -> dict[str, Any]:
    """Load and merge the global config and an optional explicit file.

    Only keys actually present in a file are returned; no defaults are
    injected. An explicit path that does not exist is an error.
    """
    global_path = global_config_dir(name) / "config.toml"
    merged = _load_single(global_path, str(global_path))

    if path is not None:
        explicit = Path(path).expanduser()
        if not explicit.is_file():
            raise ConfigError(f"{explicit}: config file not found")
        merged.update(_load_single(explicit, str(explicit)))

    return merged


def log_level(config: dict) -> int:
    """Return the logging level named in config, WARNING when absent."""
    return getattr(logging, config.get("log_level", "WARNING").upper())
