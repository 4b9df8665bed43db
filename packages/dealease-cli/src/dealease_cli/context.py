"""Shared store construction for CLI commands.

Every command opens a file-backed DemoSessionStore from DemoStoreConfig
(DEALEASE_DEMO_* environment variables), optionally overriding the
storage directory, and converts engine errors into CLI errors.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

import click
from pydantic import ValidationError as PydanticValidationError

from dealease_cli.errors import handle_config_error, handle_demo_error
from dealease_demo.config import DemoStoreConfig
from dealease_demo.errors import DemoError
from dealease_demo.observability import configure_logging
from dealease_demo.store import DemoSessionStore

F = TypeVar("F", bound=Callable[..., Any])


def storage_dir_option(func: F) -> F:
    """Add the --storage-dir option to a command."""
    return click.option(
        "--storage-dir",
        type=click.Path(file_okay=False),
        default=None,
        help="Directory holding the demo session [default: $DEALEASE_DEMO_STORAGE_DIR or ./.dealease-demo]",
    )(func)


def load_config(storage_dir: str | None = None) -> DemoStoreConfig:
    """Load configuration from the environment, applying CLI overrides.

    Raises:
        CLIError: If a DEALEASE_DEMO_* variable holds an invalid value.
    """
    try:
        if storage_dir is None:
            return DemoStoreConfig()
        return DemoStoreConfig(storage_dir=Path(storage_dir))
    except PydanticValidationError as e:
        handle_config_error(e)


@contextmanager
def demo_store(storage_dir: str | None = None) -> Iterator[DemoSessionStore]:
    """Open the configured session store for the duration of a command.

    Args:
        storage_dir: Optional override of the configured storage directory.

    Yields:
        Rehydrated DemoSessionStore.

    Raises:
        CLIError: If the engine raises a DemoError.
    """
    config = load_config(storage_dir)
    configure_logging(log_level=config.log_level, json_format=config.log_json)
    try:
        yield DemoSessionStore.from_config(config)
    except DemoError as e:
        handle_demo_error(e)
