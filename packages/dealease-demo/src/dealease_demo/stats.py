"""Statistics aggregation over a demo dataset.

aggregate() is pure and idempotent: it only counts, and calling it twice
on the same snapshot yields equal results. activeDeals + completedDeals
always equals totalDeals because every deal is exactly one of the two.
"""

from __future__ import annotations

from dealease_demo.schemas.session import DemoDataset, DemoStats


def aggregate(dataset: DemoDataset) -> DemoStats:
    """Compute DemoStats for a dataset snapshot.

    Args:
        dataset: Dataset to count.

    Returns:
        Derived counters.

    Example:
        >>> stats = aggregate(dataset)
        >>> stats.active_deals + stats.completed_deals == stats.total_deals
        True
    """
    completed = sum(1 for deal in dataset.deals if deal.is_completed)
    return DemoStats(
        total_users=len(dataset.users),
        total_buyers=len(dataset.buyers),
        total_sellers=len(dataset.sellers),
        total_matches=len(dataset.matches),
        total_deals=len(dataset.deals),
        active_deals=len(dataset.deals) - completed,
        completed_deals=completed,
        total_messages=len(dataset.messages),
        total_notifications=len(dataset.notifications),
        total_documents=len(dataset.documents),
        ai_analysis_count=len(dataset.ai_analyses),
    )
