"""Shared BDD fixtures and step definitions for the reviews features."""

import asyncio

import pytest
from pytest_bdd import given, parsers, then, when
from reviews.exceptions import InvalidArgument
from reviews.review.query import query_reviews
from reviews.source.fake_adapter import FakeReviewSource


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _review(result, review_id):
    matches = [r for r in result.reviews if r.id == review_id]
    assert matches, f"{review_id} not in result: {[r.id for r in result.reviews]}"
    return matches[0]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the Hostaway sample reviews", target_fixture="review_source")
def hostaway_sample_reviews(sample_records):
    return FakeReviewSource(sample_records)


@given(parsers.cfparse('review "{review_id}" was approved earlier'))
def review_approved_earlier(approval_store, review_id):
    approval_store.approvals[review_id] = True


@given("the approval store cannot be read")
def approval_store_unreadable(approval_store):
    approval_store.configure(fail_reads=True)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("all reviews are queried", target_fixture="result")
def query_all(review_source, approval_store):
    return asyncio.run(query_reviews(None, review_source, approval_store))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("{count:d} reviews are returned"))
def reviews_returned(result, count):
    assert result.count == count
    assert len(result.reviews) == count


@then(parsers.cfparse('the returned reviews are "{review_ids}"'))
def returned_reviews_are(result, review_ids):
    expected = [review_id.strip() for review_id in review_ids.split(",")]
    assert [r.id for r in result.reviews] == expected


@then(parsers.cfparse('review "{review_id}" is approved'))
def review_is_approved(result, review_id):
    assert _review(result, review_id).approved is True


@then(parsers.cfparse('review "{review_id}" is not approved'))
def review_is_not_approved(result, review_id):
    assert _review(result, review_id).approved is False


@then("the query is rejected as invalid")
def query_rejected(error):
    assert isinstance(error["exc"], InvalidArgument), "Expected an InvalidArgument error"
