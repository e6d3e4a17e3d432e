"""Due-date arithmetic: whole calendar days in UTC."""

import math
import numbers
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from srs.errors import InvalidInterval


def _utc(instant: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """Accept a datetime or an ISO-8601 string (trailing 'Z' allowed) as UTC."""
    if isinstance(value, datetime):
        return _utc(value)
    if not isinstance(value, str):
        raise TypeError(
            f"timestamp must be a datetime or ISO-8601 string, got {type(value).__name__}"
        )
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return _utc(datetime.fromisoformat(text))


def format_timestamp(instant: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a 'Z' suffix, e.g. 2024-01-15T00:00:00.000Z."""
    return _utc(instant).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def compute_due_date(
    interval_days: Union[int, float],
    reference_instant: Optional[datetime] = None,
) -> datetime:
    """
    Advance reference_instant by interval_days whole calendar days in UTC.

    Time of day is preserved. Fractional intervals are truncated.
    reference_instant defaults to now (UTC).

    Raises:
        InvalidInterval: interval_days is negative, NaN, infinite or not a number.
    """
    if isinstance(interval_days, bool) or not isinstance(interval_days, numbers.Real):
        raise InvalidInterval(interval_days)
    if not math.isfinite(interval_days) or interval_days < 0:
        raise InvalidInterval(interval_days)

    if reference_instant is None:
        reference_instant = datetime.now(timezone.utc)
    start = _utc(reference_instant)
    try:
        return start + timedelta(days=math.trunc(interval_days))
    except OverflowError:
        raise InvalidInterval(interval_days, reason="is out of the representable date range")


def is_due(
    next_review_at: Optional[Union[str, datetime]],
    now: Optional[datetime] = None,
) -> bool:
    """True when the card's next review is at or before now. Unscheduled cards are never due."""
    if next_review_at is None:
        return False
    if now is None:
        now = datetime.now(timezone.utc)
    return parse_timestamp(next_review_at) <= _utc(now)
