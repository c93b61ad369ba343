"""Brain configuration, read from an optional brainlink.toml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .models import CATEGORIES, ConfigError

CONFIG_FILENAME = "brainlink.toml"
BRAIN_DIR_ENV = "BRAIN_DIR"


@dataclass(frozen=True)
class BrainConfig:
    categories: tuple[str, ...] = field(default=CATEGORIES)
    context_radius: int = 50
    node_size_min: int = 4
    node_size_max: int = 20
    node_size_step: int = 2


def _int_setting(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ConfigError(f"{key} must be a non-negative integer")
    return value


def load_config(root: Path) -> BrainConfig:
    """Load `<root>/brainlink.toml`, falling back to defaults.

    The file is optional and unknown keys are ignored:

        categories = ["journals", "concepts"]
        context_radius = 80

        [graph]
        node_size_min = 4
        node_size_max = 20
        node_size_step = 2
    """
    import tomllib

    path = root / CONFIG_FILENAME
    if not path.exists():
        return BrainConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e

    categories = data.get("categories", list(CATEGORIES))
    if not isinstance(categories, list) or not all(isinstance(c, str) and c.strip() for c in categories):
        raise ConfigError("categories must be a list of non-empty strings")

    graph = data.get("graph", {})
    if not isinstance(graph, dict):
        raise ConfigError("graph must be a table")

    config = BrainConfig(
        categories=tuple(c.strip() for c in categories),
        context_radius=_int_setting(data, "context_radius", 50),
        node_size_min=_int_setting(graph, "node_size_min", 4),
        node_size_max=_int_setting(graph, "node_size_max", 20),
        node_size_step=_int_setting(graph, "node_size_step", 2),
    )
    if config.node_size_min > config.node_size_max:
        raise ConfigError("node_size_min must not exceed node_size_max")
    return config


def find_brain_dir(start: Path) -> Path | None:
    """Locate the brain directory: $BRAIN_DIR, else a ./brain folder up from `start`."""
    env = os.environ.get(BRAIN_DIR_ENV)
    if env:
        return Path(env)

    cur = start.resolve()
    for p in (cur, *cur.parents):
        if p.is_dir() and p.name.lower() == "brain":
            return p
        candidate = p / "brain"
        if candidate.is_dir():
            return candidate
    return None
