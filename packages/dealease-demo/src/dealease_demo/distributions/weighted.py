"""Weighted distribution utilities.

This module provides a seedable helper for weighted categorical choices
(message types, document categories, match statuses).
"""

from __future__ import annotations

import random
from typing import Generic, TypeVar

T = TypeVar("T")


class WeightedDistribution(Generic[T]):
    """Helper for weighted random selection.

    Example:
        >>> statuses = WeightedDistribution({"active": 80, "archived": 20}, seed=1)
        >>> values = statuses.sample(100)
    """

    def __init__(
        self,
        weights: dict[T, int | float],
        seed: int | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize with weight mapping.

        Args:
            weights: Mapping of values to their relative weights
            seed: Optional random seed for reproducibility
            rng: Shared random source; takes precedence over seed
        """
        if not weights:
            raise ValueError("weights must not be empty")
        self.values = list(weights.keys())
        self.weights = list(weights.values())
        self._rng = rng or random.Random(seed)  # noqa: S311 - not used for security

    def sample(self, count: int) -> list[T]:
        """Generate weighted random values.

        Args:
            count: Number of values to generate

        Returns:
            List of randomly selected values
        """
        return self._rng.choices(self.values, weights=self.weights, k=count)

    def sample_one(self) -> T:
        """Generate a single weighted random value."""
        return self._rng.choices(self.values, weights=self.weights, k=1)[0]

    @property
    def probabilities(self) -> dict[T, float]:
        """Get probability distribution.

        Returns:
            Dictionary mapping values to their probabilities
        """
        total = sum(self.weights)
        return {v: w / total for v, w in zip(self.values, self.weights, strict=True)}


# Common weight distributions
MATCH_STATUS_WEIGHTS: dict[str, int] = {
    "active": 80,
    "archived": 10,
    "completed": 10,
}

MESSAGE_TYPE_WEIGHTS: dict[str, int] = {
    "text": 80,
    "document-share": 8,
    "meeting-request": 7,
    "file": 5,
}

DOCUMENT_CATEGORY_WEIGHTS: dict[str, int] = {
    "financial": 40,
    "legal": 20,
    "operational": 20,
    "technical": 15,
    "other": 5,
}

NOTIFICATION_PRIORITY_WEIGHTS: dict[str, int] = {
    "low": 50,
    "medium": 30,
    "high": 15,
    "urgent": 5,
}
