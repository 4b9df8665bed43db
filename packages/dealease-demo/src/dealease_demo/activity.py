"""Simulated marketplace activity.

The engine owns no timers. A host that wants a "live" sandbox asks an
ActivitySimulator for the next event whenever it likes and hands the
event to DemoSessionStore.record_activity(). Events are plain data;
apply_activity() turns an event plus a dataset into the next dataset.

Example:
    >>> simulator = ActivitySimulator(seed=1)
    >>> event = simulator.propose(store.session.dataset)
    >>> if event is not None:
    ...     store.record_activity(event)
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dealease_demo.distributions.temporal import utc_now
from dealease_demo.errors import InvalidArgumentError
from dealease_demo.generators import templates
from dealease_demo.generators.base import (
    DEMO_BUYER_USER_ID,
    DEMO_SELLER_USER_ID,
    next_record_id,
)
from dealease_demo.generators.marketplace import progress_band
from dealease_demo.schemas.entities import Message, Notification
from dealease_demo.schemas.session import DemoDataset

_EVENT_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class NewMessageActivity(BaseModel):
    """A new message in an existing conversation."""

    model_config = _EVENT_CONFIG

    kind: Literal["new-message"] = "new-message"
    message: Message


class NewNotificationActivity(BaseModel):
    """A new notification for a demo user (shown newest first)."""

    model_config = _EVENT_CONFIG

    kind: Literal["new-notification"] = "new-notification"
    notification: Notification


class DealProgressActivity(BaseModel):
    """Progress on a deal within its current stage."""

    model_config = _EVENT_CONFIG

    kind: Literal["deal-progress"] = "deal-progress"
    deal_id: str
    progress: int = Field(..., ge=0, le=100)
    updated_at: datetime


ActivityEvent = Annotated[
    Union[NewMessageActivity, NewNotificationActivity, DealProgressActivity],
    Field(discriminator="kind"),
]


def apply_activity(dataset: DemoDataset, event: ActivityEvent) -> DemoDataset:
    """Return the dataset that results from applying an event.

    The input dataset is not modified. Referential integrity of the
    result is the caller's responsibility (the session store checks it).

    Args:
        dataset: Current dataset.
        event: Activity to apply.

    Returns:
        New DemoDataset.

    Raises:
        InvalidArgumentError: If a deal-progress event names an unknown deal
            or would move progress outside the deal's current stage.
    """
    if isinstance(event, NewMessageActivity):
        message = event.message
        matches = [
            m.model_copy(update={"last_activity": message.timestamp}) if m.id == message.match_id else m
            for m in dataset.matches
        ]
        return dataset.model_copy(
            update={"messages": [*dataset.messages, message], "matches": matches}
        )

    if isinstance(event, NewNotificationActivity):
        return dataset.model_copy(
            update={"notifications": [event.notification, *dataset.notifications]}
        )

    deal_ids = {d.id for d in dataset.deals}
    if event.deal_id not in deal_ids:
        raise InvalidArgumentError("deal id", event.deal_id, allowed=sorted(deal_ids))

    deals = []
    for deal in dataset.deals:
        if deal.id == event.deal_id:
            low, high = progress_band(deal.stage)
            if not low <= event.progress <= high:
                raise InvalidArgumentError(
                    "progress",
                    event.progress,
                    internal_details=f"{deal.id} is in {deal.stage.value} ({low}-{high})",
                )
            deal = deal.model_copy(
                update={"overall_progress": event.progress, "last_updated": event.updated_at}
            )
        deals.append(deal)
    return dataset.model_copy(update={"deals": deals})


class ActivitySimulator:
    """Proposes plausible activity events against a dataset.

    Attributes:
        seed: Random seed, or None for fresh choices each run.

    Example:
        >>> simulator = ActivitySimulator(seed=42)
        >>> simulator.propose(dataset)
        NewMessageActivity(kind='new-message', message=Message(...))
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.seed = seed
        self.clock = clock
        self._rng = random.Random(seed)  # noqa: S311 - not used for security

    def propose(self, dataset: DemoDataset) -> ActivityEvent | None:
        """Propose the next event, or None if nothing can happen.

        Tries the three kinds in random order and returns the first one
        the dataset supports.
        """
        builders = [self._new_message, self._new_notification, self._deal_progress]
        self._rng.shuffle(builders)
        for build in builders:
            event = build(dataset)
            if event is not None:
                return event
        return None

    def _new_message(self, dataset: DemoDataset) -> NewMessageActivity | None:
        active = [m for m in dataset.matches if m.status == "active"]
        if not active:
            return None

        match = self._rng.choice(active)
        from_buyer = self._rng.random() < 0.5
        deal_id = next((d.id for d in dataset.deals if d.match_id == match.id), None)
        message = Message(
            id=next_record_id("msg", {m.id for m in dataset.messages}),
            match_id=match.id,
            deal_id=deal_id,
            sender_id=match.buyer_id if from_buyer else match.seller_id,
            receiver_id=match.seller_id if from_buyer else match.buyer_id,
            content=self._rng.choice(templates.MESSAGE_BODIES),
            timestamp=self.clock(),
        )
        return NewMessageActivity(message=message)

    def _new_notification(self, dataset: DemoDataset) -> NewNotificationActivity | None:
        user_ids = {u.id for u in dataset.users} & {DEMO_BUYER_USER_ID, DEMO_SELLER_USER_ID}
        if not user_ids:
            return None

        title, body = templates.NOTIFICATION_COPY["system"]
        notification = Notification(
            id=next_record_id("notif", {n.id for n in dataset.notifications}),
            user_id=self._rng.choice(sorted(user_ids)),
            type="system",
            title=title,
            message=body,
            priority="low",
            created_at=self.clock(),
        )
        return NewNotificationActivity(notification=notification)

    def _deal_progress(self, dataset: DemoDataset) -> DealProgressActivity | None:
        candidates = [
            d for d in dataset.deals if not d.is_completed and d.overall_progress < progress_band(d.stage)[1]
        ]
        if not candidates:
            return None

        deal = self._rng.choice(candidates)
        _, high = progress_band(deal.stage)
        return DealProgressActivity(
            deal_id=deal.id,
            progress=min(deal.overall_progress + self._rng.randint(1, 9), high),
            updated_at=self.clock(),
        )
