"""UTC calendar-day arithmetic.

All release dates are whole UTC days, so values are plain ``datetime.date``
objects. The clock is read in exactly one place (``utc_today``); everything
else is a pure function of its arguments.
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

__all__ = [
    "NOW",
    "InvalidDateError",
    "add_days",
    "add_months",
    "add_weeks",
    "get_today",
    "iso_weekday",
    "parse_iso_date",
    "to_iso",
    "utc_today",
    "weeks_between",
]

NOW = "now"

TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4

# Reduced-precision and ordinal forms that datetime.fromisoformat rejects.
_YEAR_RE = re.compile(r"(\d{4})")
_YEAR_MONTH_RE = re.compile(r"(\d{4})-(\d{2})")
_ORDINAL_RE = re.compile(r"(\d{4})-?(\d{3})")


class InvalidDateError(ValueError):
    """Raised when a date override is neither ISO 8601 nor ``"now"``."""

    hint = (
        "use an ISO 8601 date such as 2023-07-12, 2023-07, 2023 or 2023-193 "
        '(date-times and offsets are accepted) or "now"'
    )

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid date: {value!r}")


def utc_today() -> date:
    return datetime.now(UTC).date()


def _utc_day(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.date()


def _parse_reduced(text: str) -> date | None:
    """``YYYY``, ``YYYY-MM`` and ordinal ``YYYY-DDD`` / ``YYYYDDD``, at their first day."""
    year = month = 1
    ordinal = None
    if m := _YEAR_RE.fullmatch(text):
        year = int(m.group(1))
    elif m := _YEAR_MONTH_RE.fullmatch(text):
        year, month = int(m.group(1)), int(m.group(2))
    elif m := _ORDINAL_RE.fullmatch(text):
        year, ordinal = int(m.group(1)), int(m.group(2))
    else:
        return None
    if ordinal is not None and not 1 <= ordinal <= (366 if calendar.isleap(year) else 365):
        raise InvalidDateError(text)
    try:
        first = date(year, month, 1)
    except ValueError as e:
        raise InvalidDateError(text) from e
    return first if ordinal is None else first + timedelta(days=ordinal - 1)


def parse_iso_date(text: str) -> date:
    """Parse an ISO 8601 date or date-time into its UTC calendar day.

    Reduced-precision dates resolve to their first day (``2023-07`` is
    2023-07-01) and ordinal dates to their day of year (``2023-193`` is
    2023-07-12).

    Offsets are converted to UTC before the time is dropped, so
    ``2023-07-12T23:30:00-02:00`` is 2023-07-13. Naive values are taken as UTC.

    Raises:
        InvalidDateError: If ``text`` is not ISO 8601.
    """
    reduced = _parse_reduced(text)
    if reduced is not None:
        return reduced
    try:
        parsed = datetime.fromisoformat(text)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(text) from e
    return _utc_day(parsed)


def get_today(
    override: str | date | None = NOW,
    *,
    today: Callable[[], date] = utc_today,
) -> date:
    """Resolve a reference day.

    Args:
        override: ``"now"`` (or None) for the current UTC day, an ISO string,
            or a date/datetime to use as is.
        today: Clock used for ``"now"``.
    """
    if override is None or override == NOW:
        return today()
    if isinstance(override, datetime):
        return _utc_day(override)
    if isinstance(override, date):
        return override
    return parse_iso_date(override)


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def add_weeks(day: date, weeks: int) -> date:
    return day + timedelta(weeks=weeks)


def add_months(day: date, months: int) -> date:
    """Move by calendar months, clamping to the last day of the target month."""
    index = day.year * 12 + (day.month - 1) + months
    year, month0 = divmod(index, 12)
    last = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(day.day, last))


def iso_weekday(day: date) -> int:
    """1=Monday .. 7=Sunday."""
    return day.isoweekday()


def weeks_between(later: date, earlier: date) -> float:
    """Fractional weeks from ``earlier`` to ``later`` (negative if reversed)."""
    return (later - earlier).days / 7


def to_iso(day: date) -> str:
    return day.isoformat()
