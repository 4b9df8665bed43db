"""Shared pytest fixtures for dealease-demo tests.

Provides storage backends, a fixed clock and seeded stores so that
generated datasets are reproducible across runs.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime, timezone

import pytest
import structlog

from dealease_demo.generators.marketplace import MarketplaceGenerator
from dealease_demo.storage.memory import MemoryStorage
from dealease_demo.store import DemoSessionStore

FIXED_NOW = datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)
TEST_SEED = 42


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    This fixture ensures structlog outputs to stdout so that capsys
    can capture the output in tests. Without this, structlog may use
    different processors depending on test execution order.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


class FailingStorage(MemoryStorage):
    """MemoryStorage whose writes fail while fail_writes is set."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False
        self.write_attempts = 0

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        if self.fail_writes:
            raise OSError("No space left on device")
        super().set_item(key, value)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def generator(fixed_clock: Callable[[], datetime]) -> MarketplaceGenerator:
    """Seeded generator with a fixed clock."""
    return MarketplaceGenerator(seed=TEST_SEED, clock=fixed_clock)


@pytest.fixture
def store(
    memory_storage: MemoryStorage,
    generator: MarketplaceGenerator,
    fixed_clock: Callable[[], datetime],
) -> DemoSessionStore:
    """Fresh inactive store over in-memory storage."""
    return DemoSessionStore(memory_storage, generator=generator, clock=fixed_clock)


@pytest.fixture
def active_store(store: DemoSessionStore) -> DemoSessionStore:
    """Store already initialized with the light tier."""
    store.init("light")
    return store
