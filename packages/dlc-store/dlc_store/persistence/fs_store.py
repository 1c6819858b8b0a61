"""
Filesystem Flat Store.

Pure Python, no external dependencies.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from .interfaces import FlatStore

logger = logging.getLogger(__name__)


def get_store_home() -> Path:
    """
    Get the dlc-store home directory.

    Uses DLC_STORE_HOME env var or defaults to ~/.dlc-store
    """
    home = os.environ.get("DLC_STORE_HOME")
    if home:
        return Path(home)
    return Path.home() / ".dlc-store"


class FileFlatStore(FlatStore):
    """
    Filesystem-based flat store.

    Keeps the whole store as a single JSON object in {path}, the way a
    browser keeps its local storage. The file is read on first access and
    rewritten on every set/remove.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            path: JSON file (default: DLC_STORE_HOME/store.json)
        """
        if path is None:
            path = get_store_home() / "store.json"
        self.path = Path(path)
        self._data: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        """Load the store file; a missing file is an empty store."""
        if self._data is None:
            if self.path.exists():
                with open(self.path, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
            else:
                self._data = {}
        return self._data

    def _flush(self) -> None:
        """Write the in-memory copy back to disk, creating the file if needed."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created store file: {self.path}")
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)

    async def get(self, key: str) -> Optional[str]:
        """Get a value."""
        return self._load().get(key)

    async def set(self, key: str, value: str) -> None:
        """Set a value."""
        self._load()[key] = value
        self._flush()

    async def remove(self, key: str) -> None:
        """Remove a value."""
        data = self._load()
        if key in data:
            del data[key]
            self._flush()
