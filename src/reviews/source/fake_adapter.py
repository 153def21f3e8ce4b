"""In-memory review source for testing and development."""

import copy
from typing import Any

from reviews.exceptions import SourceUnavailable
from reviews.source.port import ReviewSourcePort


class FakeReviewSource(ReviewSourcePort):
    """Serves a fixed list of raw records; can be told to fail."""

    def __init__(self, records: list[dict[str, Any]] | None = None, name: str = "hostaway"):
        self.records = list(records or [])
        self.name = name
        self.should_fail = False
        self.failure_reason = "Review source unavailable"

    def configure(self, should_fail: bool = False, failure_reason: str = "Review source unavailable"):
        """Configure the fake source behavior for testing."""
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    def load(self) -> list[dict[str, Any]]:
        if self.should_fail:
            raise SourceUnavailable(self.failure_reason)
        return copy.deepcopy(self.records)
