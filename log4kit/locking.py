"""Thread synchronisation primitives: a plain mutex, a scoped lock and per-thread storage."""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

__all__ = ["Mutex", "ScopedLock", "ThreadLocalDataHolder", "get_thread_id"]


def get_thread_id() -> str:
    """Return an identifier for the calling thread as a string."""
    return str(threading.get_ident())


class Mutex:
    """A simple, non-recursive mutual exclusion lock."""

    __slots__ = ("_lock",)

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        """Block until the mutex is acquired."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the mutex; raises RuntimeError if it is not held."""
        self._lock.release()

    def __enter__(self) -> "Mutex":
        self.lock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unlock()


class ScopedLock:
    """Hold a Mutex for the duration of a ``with`` block."""

    __slots__ = ("_mutex",)

    def __init__(self, mutex: Mutex) -> None:
        self._mutex = mutex

    def __enter__(self) -> Mutex:
        self._mutex.lock()
        return self._mutex

    def __exit__(self, exc_type, exc, tb) -> None:
        self._mutex.unlock()


class ThreadLocalDataHolder(Generic[T]):
    """Holds zero or one object for each thread; every thread starts with None."""

    __slots__ = ("_local",)

    def __init__(self) -> None:
        self._local = threading.local()

    def get(self) -> Optional[T]:
        """Return the object held for the calling thread, or None."""
        return getattr(self._local, "data", None)

    def release(self) -> Optional[T]:
        """Stop holding the calling thread's object and return it."""
        result = self.get()
        self._local.data = None
        return result

    def reset(self, value: Optional[T] = None) -> None:
        """Replace the calling thread's object, dropping any previous one."""
        self._local.data = value