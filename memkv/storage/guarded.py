"""Lock-guarded adapters around a single-owner store.

Every operation runs with the lock held, and `query` produces its result
before the lock is released, so a concurrent `delete` can never pull a value
out from under a reader that has already returned.
"""

import asyncio
import threading
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager

from memkv.storage.kv import DictStorage, KeyValueStorage


class LockedStorage:
    """Thread-safe wrapper: one `threading.Lock` around the whole store."""

    _storage: KeyValueStorage[str, str]

    def __init__(self, storage: KeyValueStorage[str, str] | None = None) -> None:
        self._storage = storage if storage is not None else DictStorage()
        self._lock = threading.Lock()

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._storage.set(key, value)

    def delete(self, key: str) -> str | None:
        with self._lock:
            return self._storage.delete(key)

    def query(self, key: str) -> str | None:
        # str is immutable: the object returned is an owned copy of the content
        with self._lock:
            return self._storage.query(key)

    def size(self) -> int:
        with self._lock:
            return self._storage.size()

    def is_empty(self) -> bool:
        with self._lock:
            return self._storage.is_empty()

    @contextmanager
    def locked(self) -> Iterator[KeyValueStorage[str, str]]:
        with self._lock:
            yield self._storage


class AsyncLockedStorage:
    """Task-safe wrapper for a single event loop, using `asyncio.Lock`."""

    _storage: KeyValueStorage[str, str]

    def __init__(self, storage: KeyValueStorage[str, str] | None = None) -> None:
        self._storage = storage if storage is not None else DictStorage()
        self._lock = asyncio.Lock()

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            self._storage.set(key, value)

    async def delete(self, key: str) -> str | None:
        async with self._lock:
            return self._storage.delete(key)

    async def query(self, key: str) -> str | None:
        async with self._lock:
            return self._storage.query(key)

    async def size(self) -> int:
        async with self._lock:
            return self._storage.size()

    async def is_empty(self) -> bool:
        async with self._lock:
            return self._storage.is_empty()

    @asynccontextmanager
    async def locked(self) -> AsyncIterator[KeyValueStorage[str, str]]:
        async with self._lock:
            yield self._storage
