"""Configuration for store backends."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .persistence import FileFlatStore, FlatStore, InMemoryFlatStore, get_store_home

_CONFIG_CACHE: Dict[str, Dict[str, Any]] = {}

BACKENDS = ("memory", "file")


def _default_config_path() -> Path:
    """Resolve the default config path (supports DLC_STORE_CONFIG_PATH override)."""
    env_path = os.getenv("DLC_STORE_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return get_store_home() / "config.yaml"


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    _CONFIG_CACHE.clear()


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML configuration with caching.

    Args:
        path: Optional custom path. Defaults to DLC_STORE_CONFIG_PATH or
            DLC_STORE_HOME/config.yaml; a missing default file means an
            empty config, a missing explicit path is an error.
    """
    resolved = Path(path).expanduser() if path else _default_config_path()
    key = str(resolved.resolve())
    if key not in _CONFIG_CACHE:
        if not path and not os.getenv("DLC_STORE_CONFIG_PATH") and not resolved.exists():
            return {}
        with open(resolved, "r", encoding="utf-8") as f:
            _CONFIG_CACHE[key] = yaml.safe_load(f) or {}
    return _CONFIG_CACHE[key]


def get_store_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the ``store`` section with defaults filled in."""
    if config is None:
        config = load_config()
    section = config.get("store") or {}
    if not isinstance(section, dict):
        raise ValueError(f"'store' config section must be a mapping, got {type(section).__name__}")
    return {
        "backend": section.get("backend", "file"),
        "path": section.get("path") or str(get_store_home() / "store.json"),
    }


def create_store(settings: Optional[Dict[str, Any]] = None) -> FlatStore:
    """Build the flat store described by ``settings`` (default: from config)."""
    if settings is None:
        settings = get_store_settings()
    backend = settings.get("backend", "file")
    if backend == "memory":
        return InMemoryFlatStore()
    if backend == "file":
        path = settings.get("path")
        return FileFlatStore(Path(path).expanduser() if path else None)
    raise ValueError(f"Unknown store backend '{backend}'. Valid: {BACKENDS}")
