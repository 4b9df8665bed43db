"""Unit tests for weighted and temporal distributions."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from dealease_demo.distributions import ActivityTimeline, WeightedDistribution
from dealease_demo.distributions.temporal import CANONICAL_ANCHOR, DAY, HOUR, WEEK

pytestmark = pytest.mark.unit


class TestWeightedDistribution:
    def test_probabilities(self) -> None:
        dist = WeightedDistribution({"a": 3, "b": 1}, seed=1)
        assert dist.probabilities == {"a": 0.75, "b": 0.25}

    def test_sample_only_known_values(self) -> None:
        dist = WeightedDistribution({"a": 1, "b": 1}, seed=1)
        assert set(dist.sample(50)) <= {"a", "b"}

    def test_zero_weight_never_sampled(self) -> None:
        dist = WeightedDistribution({"a": 1, "never": 0}, seed=1)
        assert "never" not in dist.sample(200)

    def test_seeded_is_reproducible(self) -> None:
        assert WeightedDistribution({"a": 1, "b": 2}, seed=9).sample(20) == WeightedDistribution(
            {"a": 1, "b": 2}, seed=9
        ).sample(20)

    def test_empty_weights(self) -> None:
        with pytest.raises(ValueError):
            WeightedDistribution({})


class TestActivityTimeline:
    def test_recent_within_window(self) -> None:
        timeline = ActivityTimeline(CANONICAL_ANCHOR, seed=3)
        for _ in range(200):
            ts = timeline.recent(min_offset=HOUR, max_offset=WEEK)
            assert CANONICAL_ANCHOR - WEEK <= ts <= CANONICAL_ANCHOR - HOUR

    def test_recent_series_sorted(self) -> None:
        series = ActivityTimeline(CANONICAL_ANCHOR, seed=3).recent_series(30)
        assert series == sorted(series)

    def test_upcoming_after_anchor(self) -> None:
        assert ActivityTimeline(CANONICAL_ANCHOR, seed=3).upcoming() >= CANONICAL_ANCHOR + WEEK

    def test_invalid_window(self) -> None:
        with pytest.raises(ValueError):
            ActivityTimeline(CANONICAL_ANCHOR, seed=3).recent(min_offset=WEEK, max_offset=DAY)

    def test_for_real_time(self) -> None:
        now = datetime(2025, 6, 1, tzinfo=timezone.utc)
        assert ActivityTimeline.for_real_time(True, clock=lambda: now).anchor == now
        assert ActivityTimeline.for_real_time(False, clock=lambda: now).anchor == CANONICAL_ANCHOR

    @pytest.mark.parametrize(("hour", "factor"), [(3, 0.1), (10, 1.0), (12, 0.7), (19, 0.5), (23, 0.2)])
    def test_daily_factor(self, hour: int, factor: float) -> None:
        assert ActivityTimeline(CANONICAL_ANCHOR).daily_factor(hour) == factor
