import pytest
from reviews.approvals.fake_adapter import FakeApprovalStore
from reviews.review.normalization import normalize
from reviews.source.fake_adapter import FakeReviewSource


@pytest.fixture()
def make_review():
    """Build a canonical review from a minimal raw record."""

    def _make(raw_id=1, approvals=None, **fields):
        return normalize({"id": raw_id, **fields}, approvals or {})

    return _make


@pytest.fixture()
def review_source(sample_records):
    return FakeReviewSource(sample_records)


@pytest.fixture()
def approval_store():
    return FakeApprovalStore()
