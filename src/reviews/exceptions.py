"""Error kinds raised by the review pipeline and its storage adapters."""


class ReviewsError(Exception):
    """Base class for all review service errors."""


class SourceUnavailable(ReviewsError):
    """The raw review source is missing, unreadable, or not the expected shape."""


class InvalidArgument(ReviewsError):
    """A request carried a malformed value (client fault)."""


class PersistenceFailure(ReviewsError):
    """The approval store could not be written."""


class ApprovalsUnavailable(ReviewsError):
    """The approval store could not be read; callers fall back to no approvals."""
