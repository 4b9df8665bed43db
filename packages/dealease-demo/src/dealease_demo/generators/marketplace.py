"""Marketplace dataset generator using Faker.

This module provides the MarketplaceGenerator, which builds the full demo
sandbox (users, buyers, sellers, matches, deals, messages, notifications,
documents and AI analyses) for a VolumeSpec.

Features:
- Exact cardinalities from the VolumeSpec
- Dependency-ordered generation, so no reference ever dangles
- Round-robin deal stages: every stage grows with the deal count
- Timestamps anchored at "now" or at a canonical instant
- Optional seeding for reproducible tests
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime

from faker import Faker

from dealease_demo.distributions.temporal import (
    DAY,
    HOUR,
    MINUTE,
    WEEK,
    ActivityTimeline,
    utc_now,
)
from dealease_demo.distributions.weighted import (
    DOCUMENT_CATEGORY_WEIGHTS,
    MATCH_STATUS_WEIGHTS,
    MESSAGE_TYPE_WEIGHTS,
    NOTIFICATION_PRIORITY_WEIGHTS,
    WeightedDistribution,
)
from dealease_demo.generators import templates
from dealease_demo.generators.base import (
    DEMO_BUYER_USER_ID,
    DEMO_SELLER_USER_ID,
    DatasetGenerator,
    record_id,
)
from dealease_demo.profiles import VolumeSpec
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
from dealease_demo.schemas.session import DemoDataset
from dealease_demo.schemas.settings import DemoSettings


def stage_for_index(index: int) -> DealStage:
    """Deal stage for the deal at a 0-based position (round-robin)."""
    return DEAL_STAGE_ORDER[index % len(DEAL_STAGE_ORDER)]


def progress_band(stage: DealStage) -> tuple[int, int]:
    """Inclusive progress range for a stage; completed is always 100."""
    if stage is DealStage.completed:
        return (100, 100)
    position = DEAL_STAGE_ORDER.index(stage)
    width = 100 // (len(DEAL_STAGE_ORDER) - 1)
    return (position * width, (position + 1) * width - 1)


class MarketplaceGenerator(DatasetGenerator):
    """Generator for the acquisition-marketplace demo sandbox.

    Attributes:
        seed: Random seed, or None for fresh content on every run
        fake: Faker instance for names, companies and places

    Example:
        >>> generator = MarketplaceGenerator(seed=42)
        >>> dataset = generator.generate(profile_for("light"), DemoSettings())
        >>> len(dataset.buyers)
        3
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Repeated generate() calls
                  on one instance still produce different content.
            clock: Source of "now" for real-time anchoring and last_seeded.
        """
        self.seed = seed
        self.clock = clock
        self._rng = random.Random(seed)  # noqa: S311 - not used for security
        self.fake = Faker()
        self.fake.seed_instance(self._rng.getrandbits(32))

    def generate(self, profile: VolumeSpec, settings: DemoSettings) -> DemoDataset:
        """Generate a complete dataset in dependency order.

        Args:
            profile: Volumes to generate.
            settings: Session settings.

        Returns:
            DemoDataset whose collection sizes equal the profile.
        """
        timeline = ActivityTimeline.for_real_time(
            settings.simulate_real_time,
            clock=self.clock,
            rng=self._rng,
        )

        users = self.generate_users(timeline)
        buyers = self.generate_buyers(profile.buyers, timeline)
        sellers = self.generate_sellers(profile.sellers, timeline)
        matches = self.generate_matches(profile.matches, buyers, sellers, profile.deals, timeline)
        deals = self.generate_deals(profile.deals, matches, sellers, timeline)
        messages = self.generate_messages(profile.messages, matches, deals, timeline)
        notifications = self.generate_notifications(profile.notifications, matches, timeline)
        documents = self.generate_documents(profile.documents, deals, timeline)
        analyses = self.generate_ai_analyses(profile.ai_analyses, documents, timeline)

        return DemoDataset(
            users=users,
            buyers=buyers,
            sellers=sellers,
            matches=matches,
            deals=deals,
            messages=messages,
            notifications=notifications,
            documents=documents,
            ai_analyses=analyses,
            last_seeded=self.clock(),
        )

    def generate_users(self, timeline: ActivityTimeline) -> list[DemoUser]:
        """Generate the two fixed demo login accounts."""
        users = [
            DemoUser(
                id=DEMO_BUYER_USER_ID,
                email="buyer@demo.com",
                first_name="John",
                last_name="Doe",
                role="buyer",
                company="Growth Capital Partners",
                title="Managing Partner",
                location="San Francisco, CA",
                created_at=timeline.recent(min_offset=30 * DAY, max_offset=52 * WEEK),
                last_login_at=timeline.recent(min_offset=MINUTE, max_offset=DAY),
            ),
            DemoUser(
                id=DEMO_SELLER_USER_ID,
                email="seller@demo.com",
                first_name="Jane",
                last_name="Smith",
                role="seller",
                company="TechFlow Solutions",
                title="Founder & CEO",
                location="Austin, TX",
                created_at=timeline.recent(min_offset=30 * DAY, max_offset=52 * WEEK),
                last_login_at=timeline.recent(min_offset=MINUTE, max_offset=DAY),
            ),
        ]
        self._log_generation("users", len(users))
        return users

    def generate_buyers(self, count: int, timeline: ActivityTimeline) -> list[Buyer]:
        """Generate buyer profiles.

        Args:
            count: Number of buyers.
            timeline: Timestamp source.

        Returns:
            Buyers with ids buyer-1..buyer-N.
        """
        buyers: list[Buyer] = []
        for i in range(1, count + 1):
            first, last = self.fake.first_name(), self.fake.last_name()
            range_min = self._rng.randrange(250_000, 2_000_001, 50_000)
            industries = self._rng.sample(templates.INDUSTRIES, k=self._rng.randint(1, 3))
            buyers.append(
                Buyer(
                    id=record_id("buyer", i),
                    first_name=first,
                    last_name=last,
                    email=self._email(first, last),
                    company=f"{last} {self._rng.choice(['Capital', 'Holdings', 'Partners', 'Ventures'])}",
                    title=self._rng.choice(templates.BUYER_TITLES),
                    bio=f"Looking to acquire a profitable {industries[0].lower()} business.",
                    industries=industries,
                    investment_range_min=range_min,
                    investment_range_max=range_min * self._rng.choice([2, 3, 4]),
                    acquisition_experience=self._rng.choice(templates.EXPERIENCE_LEVELS),
                    preferred_locations=[self._location() for _ in range(self._rng.randint(1, 2))],
                    remote_business_interest=self._rng.random() < 0.5,
                    timeline_to_close=self._rng.choice(templates.TIMELINES),
                    verified_status=self._rng.random() < 0.7,
                    last_active=timeline.recent(min_offset=MINUTE, max_offset=WEEK),
                )
            )
        self._log_generation("buyers", count)
        return buyers

    def generate_sellers(self, count: int, timeline: ActivityTimeline) -> list[Seller]:
        """Generate seller profiles, each owning one business.

        Args:
            count: Number of sellers.
            timeline: Timestamp source.

        Returns:
            Sellers with ids seller-1..seller-N owning business-1..business-N.
        """
        sellers: list[Seller] = []
        for i in range(1, count + 1):
            first, last = self.fake.first_name(), self.fake.last_name()
            industry = self._rng.choice(templates.INDUSTRIES)
            revenue = self._rng.randrange(300_000, 10_000_001, 1_000)
            net_profit = int(revenue * self._rng.uniform(0.08, 0.35))
            company = self.fake.company()
            business = Business(
                id=record_id("business", i),
                name=company,
                industry=industry,
                business_type=self._rng.choice(templates.BUSINESS_TYPES[industry]),
                location=self._location(),
                business_age=self._rng.randint(2, 30),
                employees=self._rng.randint(3, 120),
                gross_revenue=revenue,
                net_profit=net_profit,
                valuation=int(net_profit * self._rng.uniform(2.5, 6.0)),
                description=self.fake.catch_phrase(),
            )
            sellers.append(
                Seller(
                    id=record_id("seller", i),
                    first_name=first,
                    last_name=last,
                    email=self._email(first, last),
                    company=company,
                    title=self._rng.choice(templates.SELLER_TITLES),
                    location=business.location,
                    business=business,
                    reasons_for_selling=self._rng.sample(templates.REASONS_FOR_SELLING, k=2),
                    timeline=self._rng.choice(templates.TIMELINES),
                    seller_financing_available=self._rng.random() < 0.4,
                    profile_completeness=self._rng.randint(60, 100),
                    response_rate=self._rng.randint(50, 100),
                    verified_status=self._rng.random() < 0.7,
                    last_active=timeline.recent(min_offset=MINUTE, max_offset=WEEK),
                )
            )
        self._log_generation("sellers", count)
        return sellers

    def generate_matches(
        self,
        count: int,
        buyers: list[Buyer],
        sellers: list[Seller],
        deal_count: int,
        timeline: ActivityTimeline,
    ) -> list[Match]:
        """Generate matches over distinct buyer-seller pairs.

        The first deal_count matches become deals; their status follows
        the stage their deal will be assigned.

        Args:
            count: Number of matches.
            buyers: Previously generated buyers.
            sellers: Previously generated sellers.
            deal_count: Number of matches that will carry a deal.
            timeline: Timestamp source.

        Returns:
            Matches referencing only the given buyers and sellers.
        """
        pairs = [(b, s) for b in buyers for s in sellers]
        chosen = self._rng.sample(pairs, k=count)
        statuses = WeightedDistribution(MATCH_STATUS_WEIGHTS, rng=self._rng)

        matches: list[Match] = []
        for i, (buyer, seller) in enumerate(chosen):
            if i < deal_count:
                status = "completed" if stage_for_index(i) is DealStage.completed else "active"
            else:
                status = statuses.sample_one()
            created_at = timeline.recent(min_offset=2 * WEEK, max_offset=10 * WEEK)
            matches.append(
                Match(
                    id=record_id("match", i + 1),
                    buyer_id=buyer.id,
                    seller_id=seller.id,
                    business_id=seller.business.id,
                    status=status,
                    match_score=self._rng.randint(65, 98),
                    match_reasons=self._rng.sample(templates.MATCH_REASONS, k=3),
                    created_at=created_at,
                    last_activity=max(created_at, timeline.recent(min_offset=MINUTE, max_offset=2 * WEEK)),
                )
            )
        self._log_generation("matches", count)
        return matches

    def generate_deals(
        self,
        count: int,
        matches: list[Match],
        sellers: list[Seller],
        timeline: ActivityTimeline,
    ) -> list[Deal]:
        """Generate one deal for each of the first count matches.

        Args:
            count: Number of deals.
            matches: Previously generated matches.
            sellers: Previously generated sellers (for valuations).
            timeline: Timestamp source.

        Returns:
            Deals referencing only the given matches.
        """
        valuations = {s.business.id: s.business.valuation for s in sellers}

        deals: list[Deal] = []
        for i, match in enumerate(matches[:count]):
            stage = stage_for_index(i)
            low, high = progress_band(stage)
            created_at = max(match.created_at, timeline.recent(min_offset=WEEK, max_offset=8 * WEEK))
            deals.append(
                Deal(
                    id=record_id("deal", i + 1),
                    match_id=match.id,
                    buyer_id=match.buyer_id,
                    seller_id=match.seller_id,
                    business_id=match.business_id,
                    stage=stage,
                    overall_progress=self._rng.randint(low, high),
                    deal_value=int(valuations[match.business_id] * self._rng.uniform(0.85, 1.05)),
                    deal_structure=self._rng.choice(templates.DEAL_STRUCTURES),
                    created_at=created_at,
                    last_updated=max(created_at, timeline.recent(min_offset=HOUR, max_offset=WEEK)),
                    target_closing_date=None if stage is DealStage.completed else timeline.upcoming(),
                )
            )
        self._log_generation("deals", count)
        return deals

    def generate_messages(
        self,
        count: int,
        matches: list[Match],
        deals: list[Deal],
        timeline: ActivityTimeline,
    ) -> list[Message]:
        """Generate conversation messages spread round-robin over matches.

        Args:
            count: Number of messages.
            matches: Previously generated matches (conversations).
            deals: Previously generated deals.
            timeline: Timestamp source.

        Returns:
            Messages in chronological order.
        """
        deal_by_match = {d.match_id: d.id for d in deals}
        types = WeightedDistribution(MESSAGE_TYPE_WEIGHTS, rng=self._rng)
        timestamps = timeline.recent_series(count, min_offset=MINUTE, max_offset=2 * WEEK)

        messages: list[Message] = []
        for i, timestamp in enumerate(timestamps):
            match = matches[i % len(matches)]
            from_buyer = (i // len(matches)) % 2 == 0
            sender, receiver = (
                (match.buyer_id, match.seller_id) if from_buyer else (match.seller_id, match.buyer_id)
            )
            messages.append(
                Message(
                    id=record_id("msg", i + 1),
                    match_id=match.id,
                    deal_id=deal_by_match.get(match.id),
                    sender_id=sender,
                    receiver_id=receiver,
                    content=self._rng.choice(templates.MESSAGE_BODIES),
                    type=types.sample_one(),
                    timestamp=timestamp,
                    read_at=None if i >= count - len(matches) else timestamp + 5 * MINUTE,
                )
            )
        self._log_generation("messages", count)
        return messages

    def generate_notifications(
        self,
        count: int,
        matches: list[Match],
        timeline: ActivityTimeline,
    ) -> list[Notification]:
        """Generate notifications for the demo users, newest first.

        Args:
            count: Number of notifications.
            matches: Previously generated matches.
            timeline: Timestamp source.

        Returns:
            Notifications referencing demo users and, where relevant, matches.
        """
        kinds = list(templates.NOTIFICATION_COPY)
        priorities = WeightedDistribution(NOTIFICATION_PRIORITY_WEIGHTS, rng=self._rng)
        timestamps = timeline.recent_series(count, min_offset=MINUTE, max_offset=WEEK)

        notifications: list[Notification] = []
        for i, created_at in enumerate(reversed(timestamps)):
            kind = kinds[i % len(kinds)]
            title, body = templates.NOTIFICATION_COPY[kind]
            notifications.append(
                Notification(
                    id=record_id("notif", i + 1),
                    user_id=DEMO_BUYER_USER_ID if i % 2 == 0 else DEMO_SELLER_USER_ID,
                    match_id=None if kind == "system" else self._rng.choice(matches).id,
                    type=kind,
                    title=title,
                    message=body,
                    priority=priorities.sample_one(),
                    created_at=created_at,
                )
            )
        self._log_generation("notifications", count)
        return notifications

    def generate_documents(
        self,
        count: int,
        deals: list[Deal],
        timeline: ActivityTimeline,
    ) -> list[Document]:
        """Generate data-room documents spread round-robin over deals.

        Args:
            count: Number of documents.
            deals: Previously generated deals.
            timeline: Timestamp source.

        Returns:
            Documents referencing only the given deals.
        """
        categories = WeightedDistribution(DOCUMENT_CATEGORY_WEIGHTS, rng=self._rng)

        documents: list[Document] = []
        for i in range(count):
            deal = deals[i % len(deals)]
            category = categories.sample_one()
            name = self._rng.choice(templates.DOCUMENT_NAMES[category])
            extension = name.rsplit(".", 1)[-1]
            documents.append(
                Document(
                    id=record_id("doc", i + 1),
                    deal_id=deal.id,
                    name=name,
                    mime_type=templates.MIME_TYPES[extension],
                    size_bytes=self._rng.randint(40_000, 8_000_000),
                    category=category,
                    stage=deal.stage,
                    uploaded_by=deal.seller_id,
                    uploaded_at=max(deal.created_at, timeline.recent(min_offset=HOUR, max_offset=4 * WEEK)),
                    description=f"{category.capitalize()} document shared for {deal.id}",
                )
            )
        self._log_generation("documents", count)
        return documents

    def generate_ai_analyses(
        self,
        count: int,
        documents: list[Document],
        timeline: ActivityTimeline,
    ) -> list[AIAnalysis]:
        """Generate AI analyses for the first count documents.

        Args:
            count: Number of analyses.
            documents: Previously generated documents.
            timeline: Timestamp source.

        Returns:
            Analyses referencing only the given documents and their deals.
        """
        analyses: list[AIAnalysis] = []
        for i, document in enumerate(documents[:count]):
            risks = [
                RiskFlag(
                    severity=self._rng.choice(["low", "medium", "high", "critical"]),
                    category=category,
                    title=title,
                    requires_attention=self._rng.random() < 0.3,
                )
                for category, title in self._rng.sample(templates.ANALYSIS_RISKS, k=2)
            ]
            analyses.append(
                AIAnalysis(
                    id=record_id("analysis", i + 1),
                    document_id=document.id,
                    deal_id=document.deal_id,
                    document_name=document.name,
                    analysis_status="completed" if self._rng.random() < 0.85 else "processing",
                    analysis_date=max(document.uploaded_at, timeline.recent(min_offset=MINUTE, max_offset=WEEK)),
                    confidence=self._rng.randint(70, 98),
                    processing_time=round(self._rng.uniform(4.0, 90.0), 1),
                    model_version=templates.MODEL_VERSION,
                    summary=f"Automated review of {document.name}.",
                    highlights=self._rng.sample(templates.ANALYSIS_HIGHLIGHTS, k=3),
                    risks=risks,
                    approved=self._rng.random() < 0.5,
                )
            )
        self._log_generation("ai_analyses", count)
        return analyses

    def _email(self, first: str, last: str) -> str:
        return f"{first}.{last}@{self.fake.free_email_domain()}".lower().replace(" ", "")

    def _location(self) -> str:
        return f"{self.fake.city()}, {self.fake.state_abbr()}"


def generate_dataset(
    profile: VolumeSpec,
    settings: DemoSettings,
    *,
    seed: int | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> DemoDataset:
    """Generate a dataset with a one-off MarketplaceGenerator.

    Args:
        profile: Volumes to generate.
        settings: Session settings.
        seed: Optional random seed.
        clock: Source of "now".

    Returns:
        Generated DemoDataset.
    """
    return MarketplaceGenerator(seed=seed, clock=clock).generate(profile, settings)
