"""Demo data engine for the DealEase acquisition marketplace.

This package turns the marketplace into a self-contained sandbox populated
with synthetic buyers, sellers, matches, deals, messages, documents and AI
analyses, and manages that sandbox's lifecycle.

Key Components:
- profiles: Density tier -> generation volumes
- generators: Faker-based dataset generator with referential integrity
- stats: Derived counters over a dataset
- store: Session state machine with persistence, export and import
- facade: Read-side accessor for UI collaborators
- activity: Simulated activity events a host may apply
- storage: Memory and file persistence backends

Example:
    >>> from dealease_demo import DemoModeFacade, DemoSessionStore, MemoryStorage
    >>>
    >>> store = DemoSessionStore(MemoryStorage())
    >>> demo = DemoModeFacade(store)
    >>> demo.init("light")
    >>> demo.stats.total_buyers
    3
    >>> demo.exit()
    >>> demo.is_demo()
    False
"""

from __future__ import annotations

from dealease_demo.errors import (
    DemoError,
    InvalidArgumentError,
    InvalidStateError,
    MalformedPayloadError,
    PersistenceFailureError,
)
from dealease_demo.facade import DemoModeFacade, DemoModeState
from dealease_demo.profiles import DENSITY_PROFILES, VolumeSpec, profile_for
from dealease_demo.schemas import (
    DemoDataset,
    DemoSession,
    DemoSettings,
    DemoStats,
    DensityTier,
)
from dealease_demo.stats import aggregate
from dealease_demo.storage import FileStorage, MemoryStorage, StorageBackend
from dealease_demo.store import DemoSessionStore, export_filename

__version__ = "0.1.0"

__all__ = [
    "DENSITY_PROFILES",
    "DemoDataset",
    "DemoError",
    "DemoModeFacade",
    "DemoModeState",
    "DemoSession",
    "DemoSessionStore",
    "DemoSettings",
    "DemoStats",
    "DensityTier",
    "FileStorage",
    "InvalidArgumentError",
    "InvalidStateError",
    "MalformedPayloadError",
    "MemoryStorage",
    "PersistenceFailureError",
    "StorageBackend",
    "VolumeSpec",
    "__version__",
    "aggregate",
    "export_filename",
    "profile_for",
]
