"""Date manipulation utilities"""

import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from collection_gateway.domain.exceptions import InvalidDateError

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ONE_DAY = timedelta(days=1)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def elapsed_days(start: datetime, end: datetime) -> int:
    """
    Whole days between two instants, rounded up.

    Any partial day counts as a full day. Spans where end is not after
    start count as zero days.
    """
    span = ensure_utc(end) - ensure_utc(start)
    if span <= timedelta(0):
        return 0
    return math.ceil(span / ONE_DAY)


def is_same_calendar_day(first: datetime, second: datetime) -> bool:
    return ensure_utc(first).date() == ensure_utc(second).date()


def parse_iso_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD date"""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        raise InvalidDateError("Date must be in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value}") from e


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime into an aware UTC datetime.

    Empty values yield None. A bare date means midnight UTC.
    """
    if value is None or value == "":
        return None
    try:
        if ISO_DATE_PATTERN.match(value):
            parsed = datetime.combine(date.fromisoformat(value), datetime.min.time())
        else:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidDateError(f"Invalid datetime: {value}") from e
    return ensure_utc(parsed)
