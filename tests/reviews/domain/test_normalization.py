"""Tests for normalizing raw Hostaway records into canonical reviews."""

import math

import pytest
from pydantic import ValidationError
from reviews.review.normalization import compute_overall, convert_submitted_at, normalize
from reviews.review.review import CanonicalReview, ReviewCategory

FULL_RAW = {
    "id": 7453,
    "type": "host-to-guest",
    "status": "published",
    "rating": None,
    "publicReview": "Shane and family are wonderful!",
    "reviewCategory": [
        {"category": "cleanliness", "rating": 10},
        {"category": "communication", "rating": 10},
    ],
    "submittedAt": "2020-08-21 22:45:14",
    "guestName": "Shane Finkelstein",
    "listingName": "2B N1 A - 29 Shoreditch Heights",
    "listingId": 1001,
    "channel": "airbnb",
}


class TestCanonicalShape:
    def test_id_combines_source_and_raw_id(self):
        review = normalize(FULL_RAW)
        assert review.id == "hostaway-7453"
        assert review.source == "hostaway"
        assert review.raw_id == 7453

    def test_custom_source_prefix(self):
        review = normalize({"id": "abc"}, source="airbnb")
        assert review.id == "airbnb-abc"
        assert review.source == "airbnb"

    def test_passthrough_fields(self):
        review = normalize(FULL_RAW)
        assert review.listing_name == "2B N1 A - 29 Shoreditch Heights"
        assert review.listing_id == 1001
        assert review.type == "host-to-guest"
        assert review.channel == "airbnb"
        assert review.status == "published"
        assert review.guest_name == "Shane Finkelstein"
        assert review.public_review == "Shane and family are wonderful!"

    def test_review_categories_preserved_in_order(self):
        review = normalize(FULL_RAW)
        assert review.review_category == [
            ReviewCategory(category="cleanliness", rating=10),
            ReviewCategory(category="communication", rating=10),
        ]

    def test_missing_fields_become_null(self):
        review = normalize({"id": 1})
        assert review.listing_name is None
        assert review.listing_id is None
        assert review.type is None
        assert review.channel is None
        assert review.status is None
        assert review.guest_name is None
        assert review.public_review is None
        assert review.review_category == []
        assert review.overall_rating is None
        assert review.submitted_at is None
        assert review.approved is False

    def test_empty_strings_become_null(self):
        review = normalize({"id": 1, "listingName": "", "guestName": ""})
        assert review.listing_name is None
        assert review.guest_name is None

    def test_malformed_category_entries_skipped(self):
        review = normalize({"id": 1, "reviewCategory": ["oops", {"category": "value", "rating": 7}]})
        assert review.review_category == [ReviewCategory(category="value", rating=7)]

    def test_serializes_with_camel_case_keys(self):
        payload = normalize(FULL_RAW).model_dump(by_alias=True, mode="json")
        assert payload["rawId"] == 7453
        assert payload["listingName"] == "2B N1 A - 29 Shoreditch Heights"
        assert payload["overallRating"] == 10
        assert payload["submittedAt"] == "2020-08-21T22:45:14.000Z"
        assert payload["reviewCategory"][0] == {"category": "cleanliness", "rating": 10}

    def test_canonical_review_is_frozen(self):
        review = normalize(FULL_RAW)
        with pytest.raises(ValidationError):
            review.approved = True

    def test_normalization_is_idempotent(self):
        approvals = {"hostaway-7453": True}
        assert normalize(FULL_RAW, approvals) == normalize(FULL_RAW, approvals)

    def test_returns_canonical_review(self):
        assert isinstance(normalize(FULL_RAW), CanonicalReview)


class TestOverallRating:
    def test_explicit_rating_wins_over_categories(self):
        assert compute_overall({"rating": 3, "reviewCategory": [{"rating": 5}]}) == 3

    def test_explicit_zero_rating_is_kept(self):
        assert compute_overall({"rating": 0, "reviewCategory": [{"rating": 10}]}) == 0

    def test_category_mean_when_rating_null(self):
        assert compute_overall({"rating": None, "reviewCategory": [{"rating": 8}, {"rating": 10}]}) == 9

    def test_category_mean_rounds_half_up(self):
        assert compute_overall({"reviewCategory": [{"rating": 9}, {"rating": 10}]}) == 10

    def test_missing_category_rating_counts_as_zero(self):
        assert compute_overall({"reviewCategory": [{"rating": 9}, {"category": "value"}]}) == 5

    def test_no_rating_and_no_categories(self):
        assert compute_overall({}) is None

    def test_empty_categories(self):
        assert compute_overall({"rating": None, "reviewCategory": []}) is None

    def test_numeric_string_rating_converted(self):
        assert compute_overall({"rating": "8"}) == 8

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), "great", True])
    def test_non_finite_rating_treated_as_absent(self, bad):
        assert compute_overall({"rating": bad}) is None

    def test_rating_never_nan(self):
        rating = normalize({"id": 1, "rating": float("nan"), "reviewCategory": [{"rating": 6}]}).overall_rating
        assert rating == 6
        assert not math.isnan(rating)


class TestSubmittedAt:
    def test_hostaway_format_converted_to_iso_utc(self):
        assert convert_submitted_at("2024-01-15 10:30:00") == "2024-01-15T10:30:00.000Z"

    def test_offset_timestamp_converted_to_utc(self):
        assert convert_submitted_at("2024-01-15T12:30:00+02:00") == "2024-01-15T10:30:00.000Z"

    def test_missing_timestamp(self):
        assert convert_submitted_at(None) is None
        assert convert_submitted_at("") is None

    def test_malformed_timestamp_becomes_null(self):
        assert convert_submitted_at("last tuesday") is None

    def test_malformed_timestamp_does_not_fail_normalization(self):
        review = normalize({"id": 1, "submittedAt": "31/12/2024 10:00"})
        assert review.submitted_at is None

    @pytest.mark.parametrize("value", ["9999-12-31 23:59:59-05:00", "0001-01-01 00:00:00+01:00"])
    def test_out_of_range_timestamp_becomes_null(self, value):
        assert convert_submitted_at(value) is None
        assert normalize({"id": 1, "submittedAt": value}).submitted_at is None


class TestApprovedFlag:
    def test_approved_when_mapping_true(self):
        assert normalize({"id": 123}, {"hostaway-123": True}).approved is True

    def test_not_approved_when_mapping_false(self):
        assert normalize({"id": 123}, {"hostaway-123": False}).approved is False

    def test_absent_key_defaults_to_false(self):
        assert normalize({"id": 123}, {"hostaway-999": True}).approved is False

    def test_lookup_uses_canonical_id_not_raw_id(self):
        assert normalize({"id": 123}, {"123": True}).approved is False
