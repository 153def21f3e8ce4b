"""Approval Mutator — sets the moderation flag of a single review."""

from __future__ import annotations

from typing import Any

import structlog

from reviews.approvals.port import ApprovalStorePort
from reviews.exceptions import ApprovalsUnavailable, InvalidArgument
from reviews.review.review import CamelModel

logger = structlog.get_logger(__name__)


class ApprovalResult(CamelModel):
    id: str
    approved: bool


def set_approval(review_id: str, approved: Any, store: ApprovalStorePort) -> ApprovalResult:
    """Persist ``approved`` for ``review_id`` and return the updated pair.

    ``approved`` must be an actual ``bool``; strings such as ``"yes"`` or
    ``"true"`` and integers are rejected without touching the store.

    Raises:
        InvalidArgument: for an empty id or a non-boolean flag.
        PersistenceFailure: when the store cannot be written.
    """
    if not isinstance(approved, bool):
        raise InvalidArgument("body must include { approved: boolean }")
    if not review_id or not review_id.strip():
        raise InvalidArgument("review id must not be empty")

    with store.lock:
        try:
            approvals = store.load()
        except ApprovalsUnavailable as exc:
            logger.warning("approvals_unavailable", error=str(exc))
            approvals = {}
        approvals[review_id] = approved
        store.save(approvals)

    logger.info("approval_saved", review_id=review_id, approved=approved)
    return ApprovalResult(id=review_id, approved=approved)
