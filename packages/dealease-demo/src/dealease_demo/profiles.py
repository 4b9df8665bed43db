"""Density profile table.

Maps each DensityTier to the volumes the generator produces. Volumes are
monotonic across tiers: heavy never generates fewer records of any kind
than medium, and medium never fewer than light.

Light mirrors the demo panel copy ("3 buyers, 3 sellers, 2 matches,
1 deal"). Medium and heavy volumes are a presentation choice, not a
business requirement.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dealease_demo.schemas.settings import DensityTier, parse_density


class VolumeSpec(BaseModel):
    """Number of records to generate per entity kind.

    Volumes are checked for feasibility: matches are distinct buyer-seller
    pairs, every deal comes from its own match, every document belongs to
    a deal and every analysis to its own document.

    Example:
        >>> VolumeSpec(buyers=3, sellers=3, matches=2, deals=1,
        ...            messages=10, notifications=3, documents=3, ai_analyses=1)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    buyers: int = Field(..., ge=1, description="Buyer profiles")
    sellers: int = Field(..., ge=1, description="Seller profiles (one business each)")
    matches: int = Field(..., ge=1, description="Buyer-seller matches")
    deals: int = Field(..., ge=1, description="Deals, one per match")
    messages: int = Field(..., ge=0, description="Conversation messages")
    notifications: int = Field(..., ge=0, description="User notifications")
    documents: int = Field(..., ge=0, description="Deal documents")
    ai_analyses: int = Field(..., ge=0, description="AI document analyses")

    @model_validator(mode="after")
    def _check_feasible(self) -> VolumeSpec:
        if self.matches > self.buyers * self.sellers:
            raise ValueError("matches cannot exceed the number of buyer-seller pairs")
        if self.deals > self.matches:
            raise ValueError("deals cannot exceed matches")
        if self.ai_analyses > self.documents:
            raise ValueError("ai_analyses cannot exceed documents")
        return self

    def counts(self) -> dict[str, int]:
        """Return the volumes as a plain mapping keyed by entity kind."""
        return self.model_dump()

    def covers(self, other: VolumeSpec) -> bool:
        """Whether these volumes are at least those of other for every kind."""
        mine = self.counts()
        return all(mine[kind] >= count for kind, count in other.counts().items())


DENSITY_PROFILES: Mapping[DensityTier, VolumeSpec] = MappingProxyType(
    {
        DensityTier.light: VolumeSpec(
            buyers=3,
            sellers=3,
            matches=2,
            deals=1,
            messages=10,
            notifications=3,
            documents=3,
            ai_analyses=1,
        ),
        DensityTier.medium: VolumeSpec(
            buyers=8,
            sellers=8,
            matches=6,
            deals=6,
            messages=40,
            notifications=10,
            documents=12,
            ai_analyses=4,
        ),
        DensityTier.heavy: VolumeSpec(
            buyers=15,
            sellers=15,
            matches=14,
            deals=12,
            messages=120,
            notifications=25,
            documents=30,
            ai_analyses=12,
        ),
    }
)


def profile_for(tier: DensityTier | str) -> VolumeSpec:
    """Resolve the generation volumes for a density tier.

    Args:
        tier: A DensityTier or its string value.

    Returns:
        The tier's VolumeSpec.

    Raises:
        InvalidArgumentError: If tier is not a known density tier.
    """
    return DENSITY_PROFILES[parse_density(tier)]
