"""
dlc-store Persistence - Flat store interface and backends.

Pure Python, no external dependencies.
"""
from .interfaces import FlatStore
from .memory_store import InMemoryFlatStore
from .fs_store import FileFlatStore, get_store_home

__all__ = [
    # Interfaces
    "FlatStore",
    # Implementations
    "InMemoryFlatStore",
    "FileFlatStore",
    # Utils
    "get_store_home",
]
