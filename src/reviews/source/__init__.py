"""Review source abstraction — pluggable raw review providers."""

from reviews.config import load_settings

_source_instance = None


def get_review_source():
    """Return the configured review source (singleton).

    Uses the JSON file source by default. Set REVIEW_SOURCE_ADAPTER=fake
    for an empty in-memory source.
    """
    global _source_instance
    if _source_instance is None:
        settings = load_settings()
        adapter = settings.review_source_adapter
        if adapter == "json":
            from reviews.source.json_file import JsonFileReviewSource

            _source_instance = JsonFileReviewSource(settings.review_source_path, name=settings.source_name)
        elif adapter == "fake":
            from reviews.source.fake_adapter import FakeReviewSource

            _source_instance = FakeReviewSource(name=settings.source_name)
        else:
            raise ValueError(f"Unknown review source adapter: {adapter}")
    return _source_instance


def set_review_source(source):
    """Install an explicit review source (useful for testing)."""
    global _source_instance
    _source_instance = source


def reset_review_source():
    """Reset the review source singleton (useful for testing)."""
    global _source_instance
    _source_instance = None
