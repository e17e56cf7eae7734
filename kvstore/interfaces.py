from __future__ import annotations

from typing import Protocol, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class KeyNotFoundError(KeyError):
    """Raised when an operation needs a key the store does not hold."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key ({self.key}) does not exist"


class Storer(Protocol[K, V]):
    """
    Minimal CRUD interface the HTTP layer talks to.
    """

    def create(self, key: K, value: V) -> None:
        """Insert or overwrite the entry for key."""
        ...

    def read(self, key: K) -> V:
        """Return the value for key, raising KeyNotFoundError if absent."""
        ...

    def update(self, key: K, value: V) -> None:
        """Overwrite the value for an existing key."""
        ...

    def delete(self, key: K) -> V | None:
        """Remove key and return its prior value."""
        ...
