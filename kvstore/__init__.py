from __future__ import annotations

from .interfaces import KeyNotFoundError, Storer
from .locks import ReadWriteLock
from .memory_store import KVStore

__all__ = [
    "KeyNotFoundError",
    "KVStore",
    "ReadWriteLock",
    "Storer",
]
