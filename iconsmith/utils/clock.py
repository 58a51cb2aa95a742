"""Wall-clock access for timestamping.

Callers that stamp times take a `clock` argument so tests can pin it.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current instant in UTC."""
    return datetime.now(timezone.utc)


def to_iso8601(moment: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision and a Z suffix.

    Naive datetimes are taken to be UTC already.

    Examples:
        datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc) → "2025-01-02T03:04:05.000Z"
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def is_iso8601(value: str) -> bool:
    """True if `value` parses as an ISO-8601 date or datetime."""
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True
