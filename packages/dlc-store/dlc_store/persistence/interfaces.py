"""
Flat Store Interface.

Abstract base class for the key-value substrate the repository is built on.
"""
from abc import ABC, abstractmethod
from typing import Optional


class FlatStore(ABC):
    """
    Interface for a flat string key-value store.

    Only point operations are available: there is no enumeration, no range
    query and no transaction. Methods are async so that the repository can
    sit on a remote backend as well as on a local one.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a value, or None if the key is absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Set a value, replacing any previous one."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        pass
