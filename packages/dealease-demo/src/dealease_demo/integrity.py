"""Referential integrity checks for demo datasets.

Every foreign reference in a dataset must resolve to a record in the same
dataset, and identifiers must be unique within their kind. Generated
datasets satisfy this by construction; imported ones are checked here.
"""

from __future__ import annotations

from typing import NamedTuple

from dealease_demo.errors import MalformedPayloadError
from dealease_demo.schemas.session import DemoDataset


class DanglingReference(NamedTuple):
    """A foreign reference that does not resolve."""

    collection: str
    record_id: str
    field: str
    target: str

    def describe(self) -> str:
        """Human-readable one-line description."""
        return f"{self.collection}[{self.record_id}].{self.field} -> {self.target!r} not found"


def _duplicates(collection: str, ids: list[str]) -> list[str]:
    seen: set[str] = set()
    problems: list[str] = []
    for record_id in ids:
        if record_id in seen:
            problems.append(f"{collection}: duplicate id {record_id!r}")
        seen.add(record_id)
    return problems


def find_duplicate_ids(dataset: DemoDataset) -> list[str]:
    """List identifiers that occur more than once within a collection.

    Business ids are checked together with their owning sellers.
    """
    collections: dict[str, list[str]] = {
        "users": [u.id for u in dataset.users],
        "buyers": [b.id for b in dataset.buyers],
        "sellers": [s.id for s in dataset.sellers],
        "businesses": [s.business.id for s in dataset.sellers],
        "matches": [m.id for m in dataset.matches],
        "deals": [d.id for d in dataset.deals],
        "messages": [m.id for m in dataset.messages],
        "notifications": [n.id for n in dataset.notifications],
        "documents": [d.id for d in dataset.documents],
        "aiAnalyses": [a.id for a in dataset.ai_analyses],
    }
    problems: list[str] = []
    for name, ids in collections.items():
        problems.extend(_duplicates(name, ids))
    return problems


def find_dangling_references(dataset: DemoDataset) -> list[DanglingReference]:
    """Collect every foreign reference that does not resolve.

    Args:
        dataset: Dataset to check.

    Returns:
        Unresolved references, in collection order. Empty when consistent.
    """
    users = {u.id for u in dataset.users}
    buyers = {b.id for b in dataset.buyers}
    sellers = {s.id for s in dataset.sellers}
    businesses = {s.business.id for s in dataset.sellers}
    matches = {m.id for m in dataset.matches}
    deals = {d.id for d in dataset.deals}
    documents = {d.id for d in dataset.documents}
    # Parties may be marketplace profiles or demo login accounts
    parties = buyers | sellers | users

    dangling: list[DanglingReference] = []

    def check(collection: str, record_id: str, field: str, target: str | None, pool: set[str]) -> None:
        if target is not None and target not in pool:
            dangling.append(DanglingReference(collection, record_id, field, target))

    for match in dataset.matches:
        check("matches", match.id, "buyerId", match.buyer_id, buyers)
        check("matches", match.id, "sellerId", match.seller_id, sellers)
        check("matches", match.id, "businessId", match.business_id, businesses)
    for deal in dataset.deals:
        check("deals", deal.id, "matchId", deal.match_id, matches)
        check("deals", deal.id, "buyerId", deal.buyer_id, buyers)
        check("deals", deal.id, "sellerId", deal.seller_id, sellers)
        check("deals", deal.id, "businessId", deal.business_id, businesses)
    for message in dataset.messages:
        check("messages", message.id, "matchId", message.match_id, matches)
        check("messages", message.id, "dealId", message.deal_id, deals)
        check("messages", message.id, "senderId", message.sender_id, parties)
        check("messages", message.id, "receiverId", message.receiver_id, parties)
    for notification in dataset.notifications:
        check("notifications", notification.id, "userId", notification.user_id, users)
        check("notifications", notification.id, "matchId", notification.match_id, matches)
    for document in dataset.documents:
        check("documents", document.id, "dealId", document.deal_id, deals)
        check("documents", document.id, "uploadedBy", document.uploaded_by, parties)
    for analysis in dataset.ai_analyses:
        check("aiAnalyses", analysis.id, "documentId", analysis.document_id, documents)
        check("aiAnalyses", analysis.id, "dealId", analysis.deal_id, deals)

    return dangling


def check_integrity(dataset: DemoDataset) -> None:
    """Raise if the dataset has duplicate ids or dangling references.

    Args:
        dataset: Dataset to check.

    Raises:
        MalformedPayloadError: With one problem per offending reference or id.
    """
    problems = find_duplicate_ids(dataset)
    problems.extend(ref.describe() for ref in find_dangling_references(dataset))
    if problems:
        raise MalformedPayloadError(
            "Demo data contains inconsistent references",
            problems=problems,
            internal_details="; ".join(problems[:20]),
        )
