"""Runtime configuration for the demo session store.

Settings load from environment variables with the DEALEASE_DEMO_ prefix
(or a local .env file), so hosts can point the store at a storage
directory without code changes.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dealease_demo.schemas.settings import DensityTier

DEFAULT_STORAGE_KEY = "dealease_demo_session"


class DemoStoreConfig(BaseSettings):
    """Configuration for DemoSessionStore and its hosts.

    Example:
        >>> # From environment (DEALEASE_DEMO_STORAGE_DIR=/tmp/demo)
        >>> config = DemoStoreConfig()
        >>>
        >>> # Explicit
        >>> config = DemoStoreConfig(storage_dir=Path(".demo"), seed=42)
    """

    model_config = SettingsConfigDict(
        env_prefix="DEALEASE_DEMO_",
        env_file=".env",
        extra="ignore",
    )

    storage_dir: Path = Field(
        default=Path(".dealease-demo"),
        description="Directory holding the persisted session record",
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        min_length=1,
        pattern=r"^[A-Za-z0-9_\-]+$",
        description="Fixed key the session record is stored under",
    )
    default_density: DensityTier = Field(
        default=DensityTier.medium,
        description="Density tier used when a host does not pick one",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for synthetic content (None = random each run)",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum log level",
    )
    log_json: bool = Field(default=False, description="Render logs as JSON")
