"""Boundary helpers turning raw CLI input into calculator arguments."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from relcal.core.dates import NOW, InvalidDateError, get_today, utc_today
from relcal.core.result import Err, Ok, Result
from relcal.services.release.errors import CalendarError


def resolve_reference(
    override: str | None = NOW,
    *,
    today: Callable[[], date] = utc_today,
) -> Result[date, CalendarError]:
    """Resolve a ``--override`` value to a UTC day."""
    try:
        return Ok(get_today(override, today=today))
    except InvalidDateError as e:
        return Err(CalendarError(kind="invalid_date", message=str(e), hint=e.hint))
