"""Base generator protocol and utilities.

This module defines the DatasetGenerator base class that all demo
generators implement, plus identifier helpers shared by generators and
the activity simulator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from dealease_demo.profiles import VolumeSpec
from dealease_demo.schemas.session import DemoDataset
from dealease_demo.schemas.settings import DemoSettings

logger = structlog.get_logger(__name__)

DEMO_BUYER_USER_ID = "demo-buyer-1"
DEMO_SELLER_USER_ID = "demo-seller-1"


def record_id(prefix: str, index: int) -> str:
    """Build a dataset identifier such as ``buyer-3``.

    Args:
        prefix: Entity prefix.
        index: 1-based position within the collection.

    Returns:
        Identifier string.
    """
    return f"{prefix}-{index}"


class DatasetGenerator(ABC):
    """Abstract base class for demo dataset generators.

    Generators must:
    - Produce exactly the counts in the VolumeSpec
    - Build collections in dependency order so that every foreign
      reference points at a record generated earlier
    - Never fail for a valid VolumeSpec (there is no I/O)
    """

    @abstractmethod
    def generate(  # pragma: no cover - abstract method
        self, profile: VolumeSpec, settings: DemoSettings
    ) -> DemoDataset:
        """Generate a complete dataset.

        Args:
            profile: Volumes to generate.
            settings: Session settings (timestamp anchoring).

        Returns:
            DemoDataset with consistent cross-references.
        """
        ...

    def _log_generation(self, entity: str, count: int) -> None:
        """Log generation activity.

        Args:
            entity: Name of the entity being generated
            count: Number of records generated
        """
        logger.debug("data_generated", entity=entity, count=count)


def next_record_id(prefix: str, existing: set[str]) -> str:
    """First ``<prefix>-<n>`` identifier not already in existing."""
    index = len(existing) + 1
    while record_id(prefix, index) in existing:
        index += 1
    return record_id(prefix, index)
