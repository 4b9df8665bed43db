"""Distribution helpers for synthetic data generation.

This module provides utilities for creating realistic data distributions:
- Weighted choices for categorical data
- Recent-past timestamps anchored at "now" or a canonical instant
"""

from __future__ import annotations

from dealease_demo.distributions.temporal import ActivityTimeline
from dealease_demo.distributions.weighted import WeightedDistribution

__all__ = ["ActivityTimeline", "WeightedDistribution"]
