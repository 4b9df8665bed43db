"""In-process storage backend."""

from __future__ import annotations


class MemoryStorage:
    """Dict-backed StorageBackend.

    Survives store instances within one process, which is enough to
    exercise rehydration in tests.

    Example:
        >>> storage = MemoryStorage()
        >>> storage.set_item("k", "v")
        >>> storage.get_item("k")
        'v'
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
