"""Normalizer — turns one raw Hostaway record into a ``CanonicalReview``.

Normalization is total: missing or malformed fields become null, an empty
list, or ``False``. It never raises for bad record content.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

import structlog

from reviews.review.review import CanonicalReview, ReviewCategory, canonical_id
from reviews.utils.timestamps import format_timestamp, parse_timestamp

logger = structlog.get_logger(__name__)

DEFAULT_SOURCE = "hostaway"


def _as_number(value: Any) -> float | int | None:
    """Return ``value`` as a finite number, or None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _categories(raw: Mapping[str, Any]) -> list[ReviewCategory]:
    entries = raw.get("reviewCategory")
    if not isinstance(entries, list):
        return []

    categories = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        name = entry.get("category")
        categories.append(
            ReviewCategory(
                category=str(name) if name is not None else None,
                rating=_as_number(entry.get("rating")),
            )
        )
    return categories


def compute_overall(raw: Mapping[str, Any]) -> float | int | None:
    """Derive the overall rating of a raw record.

    An explicit ``rating`` wins, zero included. Otherwise the category
    ratings are averaged (missing ones count as 0) and rounded half up.
    """
    explicit = _as_number(raw.get("rating"))
    if explicit is not None:
        return explicit

    categories = raw.get("reviewCategory")
    if isinstance(categories, list) and categories:
        total = 0.0
        for entry in categories:
            rating = _as_number(entry.get("rating")) if isinstance(entry, Mapping) else None
            total += rating or 0
        return _round_half_up(total / len(categories))

    return None


def convert_submitted_at(value: Any, review_id: str | None = None) -> str | None:
    """Convert a Hostaway timestamp to ISO-8601 UTC; unparseable values become None."""
    if not value:
        return None
    try:
        return format_timestamp(parse_timestamp(value))
    except ValueError:
        logger.warning("unparseable_submitted_at", review_id=review_id, value=value)
        return None


def _text(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if not value:
        return None
    return value if isinstance(value, str) else str(value)


def normalize(
    raw: Mapping[str, Any],
    approvals: Mapping[str, Any] | None = None,
    source: str = DEFAULT_SOURCE,
) -> CanonicalReview:
    approvals = approvals or {}
    raw_id = raw.get("id")
    review_id = canonical_id(source, raw_id)

    return CanonicalReview(
        id=review_id,
        source=source,
        raw_id=raw_id,
        listing_name=_text(raw, "listingName"),
        listing_id=raw.get("listingId") or None,
        type=_text(raw, "type"),
        channel=_text(raw, "channel"),
        status=_text(raw, "status"),
        guest_name=_text(raw, "guestName"),
        public_review=_text(raw, "publicReview"),
        review_category=_categories(raw),
        overall_rating=compute_overall(raw),
        submitted_at=convert_submitted_at(raw.get("submittedAt"), review_id),
        approved=bool(approvals.get(review_id)),
    )
