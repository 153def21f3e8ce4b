"""Timestamp parsing and formatting shared by the review pipeline."""

from datetime import UTC, datetime


def parse_timestamp(value: str) -> datetime:
    """Parse a loosely formatted timestamp into an aware UTC datetime.

    Accepts ISO-8601 dates and datetimes as well as the Hostaway
    ``"YYYY-MM-DD HH:MM:SS"`` form. Naive values are taken as UTC.

    Raises:
        ValueError: if ``value`` is not a string, cannot be parsed, or
            falls outside the representable UTC range.
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected a timestamp string, got {type(value).__name__}")

    text = value.strip().replace(" ", "T", 1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as exc:
        raise ValueError(f"Timestamp {value!r} is out of range") from exc


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Raises:
        ValueError: if ``moment`` cannot be shifted to UTC.
    """
    try:
        moment = moment.astimezone(UTC)
    except OverflowError as exc:
        raise ValueError(f"Timestamp {moment!r} is out of range") from exc
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> str:
    return format_timestamp(datetime.now(UTC))
