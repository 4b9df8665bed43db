"""Persistence backends for the demo session record.

- StorageBackend: Protocol (get_item / set_item / remove_item)
- MemoryStorage: In-process dict, for tests and embedded hosts
- FileStorage: One JSON file per key, written atomically
"""

from __future__ import annotations

from dealease_demo.storage.base import StorageBackend
from dealease_demo.storage.file import FileStorage
from dealease_demo.storage.memory import MemoryStorage

__all__ = ["FileStorage", "MemoryStorage", "StorageBackend"]
