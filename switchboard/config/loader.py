"""Layered TOML configuration.

Switchboard reads ``default.toml`` and then ``<environment>.toml`` from the
config directory. Either file may be missing; pydantic model defaults cover
every setting, so an empty directory still yields a working engine.
"""

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "SWITCHBOARD_CONFIG_DIR"
ENVIRONMENT_ENV = "SWITCHBOARD_ENV"
DEFAULT_ENVIRONMENT = "development"

# cwd plus this many ancestors are searched for a config/ directory
_SEARCH_DEPTH = 4


def get_config_dir() -> Path:
    """Return the directory holding the TOML layers.

    An explicit SWITCHBOARD_CONFIG_DIR must exist. Otherwise the nearest
    ``config/`` at or above the working directory wins, falling back to a
    relative ``config`` path.
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        path = Path(explicit)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path

    cwd = Path.cwd()
    for candidate in [cwd, *cwd.parents][: _SEARCH_DEPTH + 1]:
        if (candidate / "config").exists():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    """Name of the environment layer to apply on top of the defaults."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML layer.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into shared tables."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _existing_layers(config_dir: Path, environment: str) -> Iterator[Path]:
    for name in ("default.toml", f"{environment}.toml"):
        path = config_dir / name
        if path.exists():
            yield path


def load_config() -> dict[str, Any]:
    """Merge the default and environment layers into one raw mapping."""
    config: dict[str, Any] = {}
    for layer in _existing_layers(get_config_dir(), get_environment()):
        config = deep_merge(config, load_toml(layer))
    return config
