"""Pydantic schemas for the demo data engine.

- settings: DensityTier and DemoSettings
- entities: Buyer, Seller, Match, Deal, Message, Document, AIAnalysis, ...
- session: DemoDataset, DemoStats, DemoSession and the export envelope
"""

from __future__ import annotations

from dealease_demo.schemas.entities import (
    DEAL_STAGE_ORDER,
    AIAnalysis,
    Business,
    Buyer,
    Deal,
    DealStage,
    DemoUser,
    Document,
    Match,
    Message,
    Notification,
    RiskFlag,
    Seller,
)
from dealease_demo.schemas.session import (
    EXPORT_FORMAT_VERSION,
    DemoDataset,
    DemoExport,
    DemoSession,
    DemoStats,
)
from dealease_demo.schemas.settings import DemoSettings, DensityTier, parse_density

__all__ = [
    "AIAnalysis",
    "Business",
    "Buyer",
    "DEAL_STAGE_ORDER",
    "Deal",
    "DealStage",
    "DemoDataset",
    "DemoExport",
    "DemoSession",
    "DemoSettings",
    "DemoStats",
    "DemoUser",
    "DensityTier",
    "Document",
    "EXPORT_FORMAT_VERSION",
    "Match",
    "Message",
    "Notification",
    "RiskFlag",
    "Seller",
    "parse_density",
]
