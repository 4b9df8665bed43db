"""Synthetic dataset generators.

- DatasetGenerator: Base class for demo dataset generators
- MarketplaceGenerator: Buyers, sellers, matches, deals, messages,
  notifications, documents and AI analyses

All generators support:
- Exact cardinalities from a VolumeSpec
- Dependency-ordered generation with no dangling references
- Optional seeding for reproducible tests
"""

from __future__ import annotations

from dealease_demo.generators.base import DatasetGenerator
from dealease_demo.generators.marketplace import MarketplaceGenerator, generate_dataset

__all__ = [
    "DatasetGenerator",
    "MarketplaceGenerator",
    "generate_dataset",
]
