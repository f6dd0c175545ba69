"""Config file loading for Dice Royale (JSON or YAML)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Load a config mapping from JSON or YAML, chosen by file suffix."""

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {p}: {e}") from e

    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text) or {}
        else:
            data = json.loads(text or "{}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"invalid config file {p}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a JSON/YAML object (mapping).")
    return data
