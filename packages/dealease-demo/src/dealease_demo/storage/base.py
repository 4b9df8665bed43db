"""Storage backend protocol.

A backend is a synchronous string key-value store with the same shape as
browser local storage. The session store keeps exactly one record in it,
under a fixed key.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageBackend(Protocol):
    """Synchronous key-value storage for serialized sessions.

    Implementations raise PersistenceFailureError when the underlying
    medium fails. A missing key is not a failure: get_item returns None.
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored text for key, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""
        ...
