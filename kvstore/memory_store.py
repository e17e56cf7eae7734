from __future__ import annotations

import logging

from .interfaces import K, KeyNotFoundError, Storer, V
from .locks import ReadWriteLock

logger = logging.getLogger(__name__)


class KVStore(Storer[K, V]):
    """
    In-memory key-value store guarded by a reader/writer lock.

    - read() takes the shared lock; create/update/delete take the exclusive one.
    - update() and delete() on a missing key are no-ops unless
      strict_missing_keys is set, in which case they raise KeyNotFoundError
      like read() does.
    """

    def __init__(self, *, strict_missing_keys: bool = False) -> None:
        self._lock = ReadWriteLock()
        self._data: dict[K, V] = {}
        self._strict = strict_missing_keys

    @property
    def strict_missing_keys(self) -> bool:
        return self._strict

    def _has(self, key: K) -> tuple[V | None, bool]:
        self._lock.require_held("_has()")
        if key in self._data:
            return self._data[key], True
        return None, False

    def create(self, key: K, value: V) -> None:
        with self._lock.write_locked():
            self._data[key] = value

    def read(self, key: K) -> V:
        with self._lock.read_locked():
            value, ok = self._has(key)
        if not ok:
            raise KeyNotFoundError(key)
        return value  # type: ignore[return-value]

    def update(self, key: K, value: V) -> None:
        with self._lock.write_locked():
            _, exists = self._has(key)
            if exists:
                self._data[key] = value
                return
        if self._strict:
            raise KeyNotFoundError(key)
        logger.debug("KV UPDATE: ignoring missing key %r", key)

    def delete(self, key: K) -> V | None:
        with self._lock.write_locked():
            value, exists = self._has(key)
            if exists:
                del self._data[key]
                return value
        if self._strict:
            raise KeyNotFoundError(key)
        logger.debug("KV DELETE: ignoring missing key %r", key)
        return None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._data
