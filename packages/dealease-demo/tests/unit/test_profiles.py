"""Unit tests for the density profile table."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dealease_demo.errors import InvalidArgumentError
from dealease_demo.profiles import DENSITY_PROFILES, VolumeSpec, profile_for
from dealease_demo.schemas.settings import DensityTier, parse_density

pytestmark = pytest.mark.unit


class TestDensityProfiles:
    """Tests for DENSITY_PROFILES."""

    def test_every_tier_has_a_profile(self) -> None:
        assert set(DENSITY_PROFILES) == set(DensityTier)

    def test_light_tier_matches_panel_copy(self) -> None:
        """Light is 3 buyers, 3 sellers, 2 matches, 1 deal."""
        light = profile_for("light")
        assert (light.buyers, light.sellers, light.matches, light.deals) == (3, 3, 2, 1)

    def test_volumes_are_monotonic(self) -> None:
        """heavy >= medium >= light for every entity kind."""
        light = profile_for(DensityTier.light)
        medium = profile_for(DensityTier.medium)
        heavy = profile_for(DensityTier.heavy)

        assert medium.covers(light)
        assert heavy.covers(medium)
        assert not light.covers(heavy)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DENSITY_PROFILES[DensityTier.light] = DENSITY_PROFILES[DensityTier.heavy]  # type: ignore[index]

    @pytest.mark.parametrize("tier", ["extreme", "LIGHT", "", "medium "])
    def test_unknown_tier_raises(self, tier: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            profile_for(tier)
        assert exc_info.value.argument == "density"
        assert exc_info.value.allowed == ["light", "medium", "heavy"]

    def test_unknown_tier_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_density("extreme")


class TestVolumeSpec:
    """Tests for VolumeSpec feasibility checks."""

    def _spec(self, **overrides: int) -> VolumeSpec:
        values = {
            "buyers": 2,
            "sellers": 2,
            "matches": 2,
            "deals": 1,
            "messages": 4,
            "notifications": 1,
            "documents": 2,
            "ai_analyses": 1,
        }
        values.update(overrides)
        return VolumeSpec(**values)

    def test_counts_returns_all_kinds(self) -> None:
        counts = self._spec().counts()
        assert counts["matches"] == 2
        assert len(counts) == 8

    def test_matches_bounded_by_pairs(self) -> None:
        with pytest.raises(ValidationError, match="buyer-seller pairs"):
            self._spec(matches=5)

    def test_deals_bounded_by_matches(self) -> None:
        with pytest.raises(ValidationError, match="deals cannot exceed matches"):
            self._spec(deals=3)

    def test_analyses_bounded_by_documents(self) -> None:
        with pytest.raises(ValidationError, match="ai_analyses"):
            self._spec(ai_analyses=3)

    def test_at_least_one_deal(self) -> None:
        with pytest.raises(ValidationError):
            self._spec(deals=0)
