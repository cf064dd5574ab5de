from typing import Protocol


class KeyValueStorage[K, V](Protocol):
    def set(self, key: K, value: V) -> None: ...
    def delete(self, key: K) -> V | None: ...
    def query(self, key: K) -> V | None: ...
    def size(self) -> int: ...
    def is_empty(self) -> bool: ...


class DictStorage:
    """Single-owner store of text values keyed by text.

    `query` hands back the stored value itself; treat it as a view that is
    stale once `generation` moves. `delete` hands the value over for good:
    the store keeps no reference to it afterwards.
    """

    _storage: dict[str, str]

    _generation: int
    """Number of mutations applied so far"""

    def __init__(self) -> None:
        self._storage = {}
        self._generation = 0

    def set(self, key: str, value: str) -> None:
        self._storage[key] = value
        self._generation += 1

    def delete(self, key: str) -> str | None:
        value = self._storage.pop(key, None)

        if value is not None:
            self._generation += 1

        return value

    def query(self, key: str) -> str | None:
        return self._storage.get(key)

    def size(self) -> int:
        return len(self._storage)

    def is_empty(self) -> bool:
        return not self._storage

    @property
    def generation(self) -> int:
        return self._generation

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __repr__(self) -> str:
        return str(self._storage)
