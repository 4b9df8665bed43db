"""Marketplace entity schemas for the demo dataset.

This module defines Pydantic models for every synthetic record kind:
- DemoUser: The fixed demo login accounts
- Buyer / Seller: Marketplace profiles (each seller owns one Business)
- Match: A buyer-seller pairing around a business
- Deal: An acquisition in progress, created from a match
- Message / Notification: Conversation and alert records
- Document / AIAnalysis: Deal documents and their AI analyses

Records reference each other by identifier only. All models are immutable
(frozen=True), reject unknown fields and serialize with camelCase keys.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

RecordId = str

UserRoleType = Literal["buyer", "seller"]
ExperienceType = Literal["first-time", "some-experience", "experienced", "serial-acquirer"]
MatchStatusType = Literal["active", "archived", "blocked", "completed"]
MessageType = Literal["text", "file", "system", "meeting-request", "document-share"]
NotificationType = Literal["match-created", "new-message", "meeting-request", "deal-update", "system"]
PriorityType = Literal["low", "medium", "high", "urgent"]
DocumentCategoryType = Literal["financial", "legal", "operational", "technical", "other"]
AnalysisStatusType = Literal["processing", "completed", "failed", "queued"]
SeverityType = Literal["low", "medium", "high", "critical"]


class DealStage(str, Enum):
    """Lifecycle stage of an acquisition deal.

    Every stage except ``completed`` counts as an active deal.
    """

    initial_contact = "initial-contact"
    interest_confirmed = "interest-confirmed"
    due_diligence = "due-diligence"
    negotiation = "negotiation"
    closing = "closing"
    completed = "completed"


# Pipeline order, used for round-robin assignment and progress display
DEAL_STAGE_ORDER: tuple[DealStage, ...] = tuple(DealStage)


class DemoRecord(BaseModel):
    """Base for all dataset records: frozen, strict, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: RecordId = Field(..., min_length=1, description="Identifier unique within the dataset")


class DemoUser(DemoRecord):
    """A demo login account."""

    email: str = Field(..., min_length=3)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: UserRoleType
    company: str
    title: str
    location: str
    created_at: datetime
    last_login_at: datetime


class Buyer(DemoRecord):
    """Buyer profile looking for an acquisition.

    Attributes:
        industries: Industries the buyer wants to invest in.
        investment_range_min: Lower bound of the check size (USD).
        investment_range_max: Upper bound of the check size (USD).
        acquisition_experience: Self-reported experience level.
    """

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    company: str
    title: str
    bio: str
    industries: list[str] = Field(default_factory=list)
    investment_range_min: int = Field(..., ge=0)
    investment_range_max: int = Field(..., ge=0)
    acquisition_experience: ExperienceType
    preferred_locations: list[str] = Field(default_factory=list)
    remote_business_interest: bool = False
    timeline_to_close: str
    verified_status: bool = False
    last_active: datetime

    @model_validator(mode="after")
    def _check_range(self) -> Buyer:
        if self.investment_range_min > self.investment_range_max:
            raise ValueError("investment_range_min must not exceed investment_range_max")
        return self


class Business(DemoRecord):
    """Business offered for sale by a seller."""

    name: str = Field(..., min_length=1)
    industry: str
    business_type: str
    location: str
    business_age: int = Field(..., ge=0)
    employees: int = Field(..., ge=0)
    gross_revenue: int = Field(..., ge=0)
    net_profit: int
    valuation: int = Field(..., ge=0)
    description: str


class Seller(DemoRecord):
    """Seller profile, owning exactly one business."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    company: str
    title: str
    location: str
    business: Business
    reasons_for_selling: list[str] = Field(default_factory=list)
    timeline: str
    seller_financing_available: bool = False
    profile_completeness: int = Field(..., ge=0, le=100)
    response_rate: int = Field(..., ge=0, le=100)
    verified_status: bool = False
    last_active: datetime


class Match(DemoRecord):
    """Pairing of a buyer with a seller's business."""

    buyer_id: RecordId
    seller_id: RecordId
    business_id: RecordId
    status: MatchStatusType
    match_score: int = Field(..., ge=0, le=100)
    match_reasons: list[str] = Field(default_factory=list)
    created_at: datetime
    last_activity: datetime


class Deal(DemoRecord):
    """Acquisition deal created from a match.

    Buyer, seller and business identifiers are copied from the match so
    consumers do not need to join through it.
    """

    match_id: RecordId
    buyer_id: RecordId
    seller_id: RecordId
    business_id: RecordId
    stage: DealStage
    overall_progress: int = Field(..., ge=0, le=100)
    deal_value: int = Field(..., ge=0)
    deal_structure: str
    created_at: datetime
    last_updated: datetime
    target_closing_date: datetime | None = None

    @property
    def is_completed(self) -> bool:
        """Whether the deal has reached the final stage."""
        return self.stage is DealStage.completed


class Message(DemoRecord):
    """Message in the conversation attached to a match."""

    match_id: RecordId
    deal_id: RecordId | None = None
    sender_id: RecordId
    receiver_id: RecordId
    content: str = Field(..., min_length=1)
    type: MessageType = "text"
    timestamp: datetime
    read_at: datetime | None = None


class Notification(DemoRecord):
    """Alert addressed to one of the demo users."""

    user_id: RecordId
    match_id: RecordId | None = None
    type: NotificationType
    title: str = Field(..., min_length=1)
    message: str
    priority: PriorityType = "low"
    created_at: datetime
    read_at: datetime | None = None


class Document(DemoRecord):
    """Document uploaded to a deal's data room."""

    deal_id: RecordId
    name: str = Field(..., min_length=1)
    mime_type: str
    size_bytes: int = Field(..., ge=0)
    category: DocumentCategoryType
    stage: DealStage
    uploaded_by: RecordId
    uploaded_at: datetime
    description: str = ""


class RiskFlag(BaseModel):
    """Risk surfaced by an AI document analysis."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    severity: SeverityType
    category: str
    title: str
    requires_attention: bool = False


class AIAnalysis(DemoRecord):
    """AI analysis of a deal document."""

    document_id: RecordId
    deal_id: RecordId
    document_name: str
    analysis_status: AnalysisStatusType
    analysis_date: datetime
    confidence: int = Field(..., ge=0, le=100)
    processing_time: float = Field(..., ge=0)
    model_version: str
    summary: str
    highlights: list[str] = Field(default_factory=list)
    risks: list[RiskFlag] = Field(default_factory=list)
    approved: bool = False
