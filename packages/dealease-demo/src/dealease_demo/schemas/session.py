"""Session-level schemas: dataset, stats, session and export envelope.

DemoSession is the single record persisted under the storage key and the
body of an export document. Its invariant, enforced at construction time:
a dataset is present if and only if the session is active.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from dealease_demo.schemas.entities import (
    AIAnalysis,
    Buyer,
    Deal,
    DemoUser,
    Document,
    Match,
    Message,
    Notification,
    Seller,
)
from dealease_demo.schemas.settings import DemoSettings

EXPORT_FORMAT_VERSION = 1

_CAMEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class DemoDataset(BaseModel):
    """Synthetic sandbox content.

    Collections are ordered as generated. Cross-references are by id only;
    see dealease_demo.integrity for the resolution rules. Every collection
    is required: an empty one is written as [] rather than omitted.
    """

    model_config = _CAMEL_CONFIG

    users: list[DemoUser] = Field(...)
    buyers: list[Buyer] = Field(...)
    sellers: list[Seller] = Field(...)
    matches: list[Match] = Field(...)
    deals: list[Deal] = Field(...)
    messages: list[Message] = Field(...)
    notifications: list[Notification] = Field(...)
    documents: list[Document] = Field(...)
    ai_analyses: list[AIAnalysis] = Field(...)
    last_seeded: datetime


class DemoStats(BaseModel):
    """Counters derived from a DemoDataset snapshot.

    Never mutated independently; always recomputed with
    dealease_demo.stats.aggregate(). Every counter is required.
    """

    model_config = _CAMEL_CONFIG

    total_users: int = Field(..., ge=0)
    total_buyers: int = Field(..., ge=0)
    total_sellers: int = Field(..., ge=0)
    total_matches: int = Field(..., ge=0)
    total_deals: int = Field(..., ge=0)
    active_deals: int = Field(..., ge=0)
    completed_deals: int = Field(..., ge=0)
    total_messages: int = Field(..., ge=0)
    total_notifications: int = Field(..., ge=0)
    total_documents: int = Field(..., ge=0)
    ai_analysis_count: int = Field(..., ge=0)


class DemoSession(BaseModel):
    """Top-level demo state.

    Attributes:
        is_active: Whether demo mode is on.
        settings: Current settings while active, last-known settings otherwise.
        dataset: The sandbox content; present if and only if is_active.

    Every field is required, dataset included (written as null while
    inactive). Use DemoSession.inactive() for the blank state.

    Example:
        >>> DemoSession.inactive().is_active
        False
    """

    model_config = _CAMEL_CONFIG

    is_active: bool
    settings: DemoSettings
    dataset: DemoDataset | None = Field(...)

    @classmethod
    def inactive(cls, settings: DemoSettings | None = None) -> DemoSession:
        """Build an inactive session, keeping settings when given."""
        return cls(is_active=False, settings=settings or DemoSettings(), dataset=None)

    @model_validator(mode="after")
    def _dataset_matches_activation(self) -> DemoSession:
        if self.is_active and self.dataset is None:
            raise ValueError("an active session must carry a dataset")
        if not self.is_active and self.dataset is not None:
            raise ValueError("an inactive session must not carry a dataset")
        return self


class DemoExport(BaseModel):
    """Export document written by exportDemoData.

    Attributes:
        format_version: Version of this envelope layout.
        exported_at: When the export was produced.
        session: The exported session (inactive sessions have no dataset).
        stats: Stats derived from the dataset, or None when inactive.
    """

    model_config = _CAMEL_CONFIG

    format_version: int = Field(..., ge=1)
    exported_at: datetime
    session: DemoSession
    stats: DemoStats | None = Field(...)

    @model_validator(mode="after")
    def _stats_match_activation(self) -> DemoExport:
        if self.format_version != EXPORT_FORMAT_VERSION:
            raise ValueError(
                f"unsupported format version {self.format_version} "
                f"(expected {EXPORT_FORMAT_VERSION})"
            )
        if (self.stats is None) == self.session.is_active:
            raise ValueError("stats must be present if and only if the session is active")
        return self
