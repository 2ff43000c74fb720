"""Date manipulation utilities"""

from datetime import date, datetime, time, timezone
from typing import Optional, Tuple

from billing_gateway.domain.exceptions import ValidationError


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching how timestamps are stored"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _parse_bound(value: str, end_of_day: bool) -> datetime:
    """Parse an ISO date or datetime; date-only values cover the whole day"""
    try:
        if "T" not in value and " " not in value.strip():
            day = date.fromisoformat(value.strip())
            return datetime.combine(day, time.max if end_of_day else time.min)
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_date_range(start: Optional[str], end: Optional[str]) -> Tuple[datetime, datetime]:
    """
    Turn report query parameters into an inclusive [start, end] window.

    Raises:
        ValidationError: When a bound is missing, unparseable, or start > end
    """
    if not start or not end:
        raise ValidationError("Start and end dates are required.")

    start_at = _parse_bound(start, end_of_day=False)
    end_at = _parse_bound(end, end_of_day=True)

    if start_at > end_at:
        raise ValidationError("Start date must not be after end date.")

    return start_at, end_at
