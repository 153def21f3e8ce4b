"""Canonical review entity.

A ``CanonicalReview`` is the source-agnostic shape every raw record is
normalized into. Instances are frozen: once produced they are only read,
filtered, grouped and serialized. Field names are snake_case in Python and
camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNKNOWN_LISTING = "Unknown Listing"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ReviewCategory(CamelModel):
    category: str | None = None
    rating: float | int | None = None


class CanonicalReview(CamelModel):
    id: str
    source: str
    raw_id: Any = None
    listing_name: str | None = None
    listing_id: Any = None
    type: str | None = None
    channel: str | None = None
    status: str | None = None
    guest_name: str | None = None
    public_review: str | None = None
    review_category: list[ReviewCategory] = []
    overall_rating: float | int | None = None
    submitted_at: str | None = None
    approved: bool = False

    @property
    def listing_key(self) -> str:
        """Grouping key, falling back to the unknown-listing sentinel."""
        return self.listing_name or UNKNOWN_LISTING


def canonical_id(source: str, raw_id: Any) -> str:
    return f"{source}-{raw_id}"
