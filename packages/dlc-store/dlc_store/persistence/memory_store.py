"""In-process flat store (no persistence). Useful for tests."""
from __future__ import annotations

from typing import Dict, Optional

from .interfaces import FlatStore


class InMemoryFlatStore(FlatStore):
    """Dict-backed flat store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of every stored entry."""
        return dict(self._data)
