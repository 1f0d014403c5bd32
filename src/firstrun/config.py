# Copyright (c) 2025 Rémy Olson
"""Configuration loader for firstrun.

Settings are read from ``~/.firstrun/config.yaml`` when available. Only the
location of the defaults file and the debug switch are configurable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_DIR = Path.home() / ".firstrun"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
DEFAULTS_FILE = CONFIG_DIR / "defaults.json"


@dataclass(frozen=True)
class StoreConfig:
    path: Path = DEFAULTS_FILE


@dataclass(frozen=True)
class DebugConfig:
    enabled: bool = False


@dataclass(frozen=True)
class Config:
    store: StoreConfig = field(default_factory=StoreConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


_CACHE: Optional[Config] = None


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    return section if isinstance(section, dict) else {}


def load_config() -> Config:
    global _CACHE
    if _CACHE is not None:
        return _CACHE

    data = _load_yaml(CONFIG_FILE)
    store_section = _section(data, "store")
    debug_section = _section(data, "debug")

    raw_path = store_section.get("path")
    store_path = Path(str(raw_path)).expanduser() if raw_path else DEFAULTS_FILE

    _CACHE = Config(
        store=StoreConfig(path=store_path),
        debug=DebugConfig(enabled=bool(debug_section.get("enabled", False))),
    )
    return _CACHE


def clear_cache() -> None:
    global _CACHE
    _CACHE = None


__all__ = [
    "Config",
    "StoreConfig",
    "DebugConfig",
    "load_config",
    "clear_cache",
    "CONFIG_FILE",
    "DEFAULTS_FILE",
]
