"""FastAPI routes for the Hostaway reviews endpoints.

Each route translates query strings and request bodies into calls on the
query service and the approval mutator. Errors are raised as review
service exceptions and rendered by the handlers in ``reviews.api.errors``.
"""

import asyncio

from fastapi import APIRouter

from reviews.api.schemas import ApprovalResponse, ApproveReviewRequest, ErrorResponse
from reviews.approvals import get_approval_store
from reviews.review.approval import set_approval
from reviews.review.filtering import FilterCriteria
from reviews.review.query import QueryResult, query_reviews
from reviews.source import get_review_source

review_router = APIRouter(prefix="/api/reviews", tags=["reviews"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@review_router.get("/hostaway", response_model=QueryResult, responses=_ERRORS)
async def list_hostaway_reviews(
    listing: str | None = None,
    rating_min: str | None = None,
    rating_max: str | None = None,
    date_from: str | None = None,
    date_to: str | None = None,
    status: str | None = None,
    type: str | None = None,
) -> QueryResult:
    """Normalized Hostaway reviews, filtered and grouped by listing."""
    criteria = FilterCriteria.from_query(
        listing=listing,
        rating_min=rating_min,
        rating_max=rating_max,
        date_from=date_from,
        date_to=date_to,
        status=status,
        type=type,
    )
    return await query_reviews(criteria, get_review_source(), get_approval_store())


@review_router.post("/hostaway/{review_id}/approve", response_model=ApprovalResponse, responses=_ERRORS)
async def approve_review(review_id: str, body: ApproveReviewRequest) -> ApprovalResponse:
    """Set whether a review is shown publicly."""
    result = await asyncio.to_thread(set_approval, review_id, body.approved, get_approval_store())
    return ApprovalResponse(id=result.id, approved=result.approved)
