from __future__ import annotations

import contextlib
import threading
from typing import Iterator


class ReadWriteLock:
    """
    Many readers or one writer.

    Waiting writers block new readers, so a steady stream of reads cannot
    starve a write. Ownership is tracked per thread: a thread may only release
    what it acquired, and held_by_current_thread() answers for the caller only.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        me = threading.get_ident()
        with self._cond:
            while self._writer is not None or self._writers_waiting:
                self._cond.wait()
            self._readers[me] = self._readers.get(me, 0) + 1

    def release_read(self) -> None:
        me = threading.get_ident()
        with self._cond:
            held = self._readers.get(me, 0)
            if held <= 0:
                raise RuntimeError("release_read() called without a held read lock")
            if held == 1:
                del self._readers[me]
            else:
                self._readers[me] = held - 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            except BaseException:
                # readers parked behind us must be allowed back in
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = me

    def release_write(self) -> None:
        with self._cond:
            if self._writer != threading.get_ident():
                raise RuntimeError("release_write() called without a held write lock")
            self._writer = None
            self._cond.notify_all()

    def locked(self) -> bool:
        with self._cond:
            return self._writer is not None or bool(self._readers)

    def held_by_current_thread(self) -> bool:
        me = threading.get_ident()
        with self._cond:
            return self._writer == me or me in self._readers

    def require_held(self, what: str) -> None:
        if not self.held_by_current_thread():
            raise RuntimeError(f"{what} requires the calling thread to hold the lock")

    @contextlib.contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextlib.contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
