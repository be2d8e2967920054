"""
Load a TOML or YAML config file into a MapConfig with dotted keys.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib  # Python 3.11+

import yaml

from .config import MapConfig


def load_config_file(path: Path) -> MapConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = path.read_text(encoding="utf-8")

    data: Any
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw) or {}
    else:
        data = tomllib.loads(raw)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a table at the top of {path}")
    return MapConfig.from_nested(data)
