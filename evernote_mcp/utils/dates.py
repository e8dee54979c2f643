"""Timestamp conversion for Evernote epoch-millisecond fields."""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_millis_to_iso(millis: int | float) -> str:
    """
    Convert epoch milliseconds to an ISO-8601 UTC string.

    Output has millisecond precision and a ``Z`` suffix, e.g.
    ``2024-01-15T10:30:00.000Z``.

    Raises:
        ValueError: If ``millis`` is not a number
    """
    if isinstance(millis, bool) or not isinstance(millis, (int, float)):
        raise ValueError(f"Invalid timestamp: {millis!r}")
    moment = EPOCH + timedelta(milliseconds=millis)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
