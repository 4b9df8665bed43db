"""Temporal distribution utilities.

This module provides the ActivityTimeline, which places generated
timestamps in the recent past of an anchor instant. With real-time
simulation the anchor is "now"; otherwise it is a fixed canonical
instant so repeated runs display the same dates.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

# Anchor used when real-time simulation is off
CANONICAL_ANCHOR = datetime(2024, 1, 16, 15, 30, tzinfo=timezone.utc)

MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ActivityTimeline:
    """Generates timestamps at plausible recent offsets from an anchor.

    Timestamps are biased toward business hours using rejection sampling,
    and never fall after the anchor.

    Example:
        >>> timeline = ActivityTimeline(anchor=CANONICAL_ANCHOR, seed=7)
        >>> ts = timeline.recent(min_offset=MINUTE, max_offset=WEEK)
        >>> ts <= CANONICAL_ANCHOR
        True
    """

    def __init__(
        self,
        anchor: datetime,
        *,
        peak_hours: tuple[int, ...] = (9, 10, 11, 14, 15, 16),
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the timeline.

        Args:
            anchor: Latest instant any generated timestamp may take.
            peak_hours: Hours of day with peak activity (0-23).
            seed: Random seed for reproducibility.
            rng: Shared random source; takes precedence over seed.
        """
        self.anchor = anchor
        self.peak_hours = peak_hours
        self._rng = rng or random.Random(seed)  # noqa: S311 - not used for security

    @classmethod
    def for_real_time(
        cls,
        simulate_real_time: bool,
        *,
        clock: Callable[[], datetime] = utc_now,
        rng: random.Random | None = None,
    ) -> ActivityTimeline:
        """Build a timeline anchored at clock() or at CANONICAL_ANCHOR.

        Args:
            simulate_real_time: Anchor to the clock when True.
            clock: Source of "now".
            rng: Shared random source.

        Returns:
            Configured ActivityTimeline.
        """
        anchor = clock() if simulate_real_time else CANONICAL_ANCHOR
        return cls(anchor, rng=rng)

    def daily_factor(self, hour: int) -> float:
        """Calculate activity factor based on hour of day.

        Args:
            hour: Hour of day (0-23)

        Returns:
            Acceptance probability for a timestamp at that hour (0.0-1.0)
        """
        if 0 <= hour < 6:
            return 0.1
        elif hour in self.peak_hours:
            return 1.0
        elif 6 <= hour < 18:
            return 0.7
        elif 18 <= hour < 22:
            return 0.5
        else:
            return 0.2

    def recent(
        self,
        *,
        min_offset: timedelta = MINUTE,
        max_offset: timedelta = WEEK,
    ) -> datetime:
        """Generate one timestamp between anchor - max_offset and anchor - min_offset.

        Args:
            min_offset: Smallest distance into the past.
            max_offset: Largest distance into the past.

        Returns:
            Timestamp no later than the anchor.
        """
        if min_offset > max_offset:
            raise ValueError("min_offset must not exceed max_offset")

        low = int(min_offset.total_seconds())
        high = int(max_offset.total_seconds())
        ts = self.anchor - timedelta(seconds=self._rng.randint(low, high))

        if self._rng.random() < self.daily_factor(ts.hour):
            return ts

        # Shift toward a peak hour unless that lands outside the window
        shifted = ts.replace(
            hour=self._rng.choice(self.peak_hours),
            minute=self._rng.randint(0, 59),
        )
        if self.anchor - max_offset <= shifted <= self.anchor - min_offset:
            return shifted
        return ts

    def recent_series(
        self,
        count: int,
        *,
        min_offset: timedelta = MINUTE,
        max_offset: timedelta = WEEK,
    ) -> list[datetime]:
        """Generate count timestamps in chronological order.

        Args:
            count: Number of timestamps.
            min_offset: Smallest distance into the past.
            max_offset: Largest distance into the past.

        Returns:
            Sorted list of timestamps.
        """
        return sorted(
            self.recent(min_offset=min_offset, max_offset=max_offset) for _ in range(count)
        )

    def upcoming(self, *, min_offset: timedelta = WEEK, max_offset: timedelta = 12 * WEEK) -> datetime:
        """Generate a future timestamp, used for target closing dates."""
        low = int(min_offset.total_seconds())
        high = int(max_offset.total_seconds())
        return self.anchor + timedelta(seconds=self._rng.randint(low, high))
