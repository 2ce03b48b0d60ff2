"""Lock-guarded value shared between the host loop and click commands."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar


T = TypeVar("T")


class SharedCell(Generic[T]):
    """Mutable value with mutually exclusive access.

    The lock is held only for one read, write or update; callers never keep
    it across frames.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._lock:
            self._value = value

    def update(self, fn: Callable[[T], T]) -> T:
        """Replace the value with ``fn(value)`` atomically and return it."""
        with self._lock:
            self._value = fn(self._value)
            return self._value

    def setter(self, value: T) -> Callable[[], None]:
        """Return a zero-argument callable that stores ``value``."""

        def _store() -> None:
            self.set(value)

        return _store

    @contextmanager
    def locked(self) -> Iterator[T]:
        """Hold the lock while reading the value in a ``with`` block."""
        with self._lock:
            yield self._value
