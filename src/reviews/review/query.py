"""Query Service — the read path behind ``GET /api/reviews/hostaway``.

Loads the raw source and the approval mapping concurrently, normalizes
every record, filters, groups by listing, and wraps the result in an
envelope. Nothing is cached between calls.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from reviews.approvals.port import ApprovalStorePort
from reviews.exceptions import ApprovalsUnavailable
from reviews.review.aggregation import ListingAggregate, aggregate_by_listing
from reviews.review.filtering import FilterCriteria, filter_reviews
from reviews.review.normalization import normalize
from reviews.review.review import CamelModel, CanonicalReview
from reviews.source.port import ReviewSourcePort
from reviews.utils.timestamps import utc_now

logger = structlog.get_logger(__name__)


class QueryResult(CamelModel):
    source: str
    count: int
    by_listing: dict[str, ListingAggregate]
    reviews: list[CanonicalReview]
    generated_at: str


def load_approvals(store: ApprovalStorePort) -> dict[str, bool]:
    """Read approvals, substituting an empty mapping when the store is unreadable."""
    try:
        return store.load()
    except ApprovalsUnavailable as exc:
        logger.warning("approvals_unavailable", error=str(exc))
        return {}


def build_result(
    raw_records: Iterable[Mapping[str, Any]],
    approvals: Mapping[str, Any],
    criteria: FilterCriteria | None = None,
    source_name: str = "hostaway",
) -> QueryResult:
    reviews = [normalize(raw, approvals, source=source_name) for raw in raw_records]
    matching = filter_reviews(reviews, criteria)
    return QueryResult(
        source=source_name,
        count=len(matching),
        by_listing=aggregate_by_listing(matching),
        reviews=matching,
        generated_at=utc_now(),
    )


async def query_reviews(
    criteria: FilterCriteria | None,
    source: ReviewSourcePort,
    store: ApprovalStorePort,
) -> QueryResult:
    """Run the full read pipeline.

    Raises:
        SourceUnavailable: when the raw source cannot be loaded.
    """
    raw_records, approvals = await asyncio.gather(
        asyncio.to_thread(source.load),
        asyncio.to_thread(load_approvals, store),
    )
    result = build_result(raw_records, approvals, criteria, source_name=source.name)
    logger.info("reviews_queried", source=source.name, total=len(raw_records), matched=result.count)
    return result
