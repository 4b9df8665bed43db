"""Unit tests for statistics aggregation."""

from __future__ import annotations

import pytest

from dealease_demo.generators.marketplace import MarketplaceGenerator
from dealease_demo.profiles import DENSITY_PROFILES, profile_for
from dealease_demo.schemas.entities import DealStage
from dealease_demo.schemas.settings import DemoSettings, DensityTier
from dealease_demo.stats import aggregate

pytestmark = pytest.mark.unit


class TestAggregate:
    """Tests for aggregate()."""

    @pytest.mark.parametrize("tier", list(DensityTier))
    def test_counts_match_dataset(self, generator: MarketplaceGenerator, tier: DensityTier) -> None:
        dataset = generator.generate(DENSITY_PROFILES[tier], DemoSettings(data_density=tier))
        stats = aggregate(dataset)

        assert stats.total_buyers == len(dataset.buyers)
        assert stats.total_sellers == len(dataset.sellers)
        assert stats.total_matches == len(dataset.matches)
        assert stats.total_messages == len(dataset.messages)
        assert stats.total_documents == len(dataset.documents)
        assert stats.ai_analysis_count == len(dataset.ai_analyses)
        assert stats.active_deals + stats.completed_deals == stats.total_deals == len(dataset.deals)

    def test_completed_deals_counted_by_stage(self, generator: MarketplaceGenerator) -> None:
        dataset = generator.generate(profile_for("heavy"), DemoSettings(data_density="heavy"))
        stats = aggregate(dataset)

        expected = sum(1 for d in dataset.deals if d.stage is DealStage.completed)
        assert stats.completed_deals == expected
        assert stats.completed_deals >= 1

    def test_is_idempotent(self, generator: MarketplaceGenerator) -> None:
        dataset = generator.generate(profile_for("medium"), DemoSettings())
        assert aggregate(dataset) == aggregate(dataset)

    def test_serializes_camel_case(self, generator: MarketplaceGenerator) -> None:
        dataset = generator.generate(profile_for("light"), DemoSettings(data_density="light"))
        wire = aggregate(dataset).model_dump(by_alias=True)

        assert wire["totalBuyers"] == 3
        assert wire["activeDeals"] == 1
        assert wire["completedDeals"] == 0
        assert "aiAnalysisCount" in wire
