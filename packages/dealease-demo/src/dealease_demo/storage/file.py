"""Filesystem storage backend.

Each key maps to ``<directory>/<key>.json``. Writes go to a temporary file
in the same directory which is then renamed over the target, so a crash
mid-write never leaves a truncated record behind.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

import structlog

from dealease_demo.errors import InvalidArgumentError, PersistenceFailureError

logger = structlog.get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


class FileStorage:
    """StorageBackend persisting each key as a UTF-8 JSON file.

    Attributes:
        directory: Directory holding the records (created on first write).

    Example:
        >>> storage = FileStorage(Path(".dealease-demo"))
        >>> storage.set_item("dealease_demo_session", '{"isActive": false}')
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """Return the file path for a key.

        Raises:
            InvalidArgumentError: If the key contains path separators or
                other characters outside [A-Za-z0-9_-].
        """
        if not _KEY_PATTERN.match(key):
            raise InvalidArgumentError("storage key", key)
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceFailureError(key, "read", internal_details=f"{path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_name: str | None = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PersistenceFailureError(key, "write", internal_details=f"{path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug("storage_written", key=key, path=str(path), size=len(value))

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceFailureError(key, "remove", internal_details=f"{path}: {e}") from e
