"""Monthly and accelerated release cycles.

Monthly releases ship on the second Tuesday of each month. Development for
a monthly release freezes ``DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE + 1`` days
before it ships. Accelerated releases freeze every Wednesday and ship six
days later; their version extends the enclosing monthly version with an
index counting weeks since the previous monthly release (10, 20, 30...).

Versions are anchored to ``VERSION_EPOCH``: the cycle whose previous monthly
release falls in July 2023 is 8.0, and each month after adds 0.1.
"""

from __future__ import annotations

import math
from datetime import date

from relcal.core.dates import (
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    add_days,
    add_months,
    add_weeks,
    iso_weekday,
    weeks_between,
)
from relcal.services.release.model import ReleaseCycle

DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE = 19
# Extra look-back so "release minus freeze window" always lands in the prior month.
PREVIOUS_RELEASE_BUFFER_DAYS = 2
VERSION_EPOCH = date(2023, 7, 12)
EPOCH_VERSION_TENTHS = 80
MONTHLY_STEP_DAYS = 28
ACCELERATED_STEP_DAYS = 7
ACCELERATED_RELEASE_AFTER_FREEZE_DAYS = 6
ACCELERATED_INDEX_STEP = 10


def second_tuesday(when: date) -> date:
    """Second Tuesday of the month containing ``when``."""
    first_weekday = iso_weekday(date(when.year, when.month, 1))
    if first_weekday <= TUESDAY:
        day = 10 - first_weekday
    else:
        day = 17 - first_weekday
    return date(when.year, when.month, day)


def month_index(release: date) -> int:
    """Months between the version epoch and ``release``'s month."""
    return (release.year - VERSION_EPOCH.year) * 12 + release.month - VERSION_EPOCH.month


def format_monthly_version(index: int) -> str:
    """``major.minor`` for the monthly cycle ``index`` months after the epoch."""
    tenths = EPOCH_VERSION_TENTHS + index
    sign = "-" if tenths < 0 else ""
    major, minor = divmod(abs(tenths), 10)
    return f"{sign}{major}.{minor}"


def _upcoming_second_tuesday(when: date) -> date:
    # Ties go to this month: a release day is still "upcoming" on the day itself.
    current = second_tuesday(when)
    if when <= current:
        return current
    return second_tuesday(add_months(current, 1))


def monthly_cycle(when: date, development: bool = True) -> ReleaseCycle:
    """The monthly cycle for ``when``.

    With ``development`` False this is the cycle whose release is the next
    second Tuesday on or after ``when``. With ``development`` True, once that
    cycle has frozen the following cycle is returned instead, since that is
    the one still accepting changes.
    """
    while True:
        release = _upcoming_second_tuesday(when)
        previous_release = second_tuesday(
            add_days(release, -(DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE + PREVIOUS_RELEASE_BUFFER_DAYS))
        )
        next_release = second_tuesday(add_months(release, 1))
        freeze = add_days(release, -(DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE + 1))

        if development and when > freeze:
            when, development = next_release, False
            continue

        return ReleaseCycle(
            version=format_monthly_version(month_index(previous_release)) + ".0",
            begin=add_days(previous_release, -DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE),
            freeze=freeze,
            release=release,
        )


def _days_until_wednesday(when: date) -> int:
    weekday = iso_weekday(when)
    if weekday < THURSDAY:
        return WEDNESDAY - weekday
    return WEDNESDAY + 7 - weekday


def accelerated_cycle(when: date, development: bool = True) -> ReleaseCycle:
    """The accelerated cycle freezing on the first Wednesday on or after ``when``.

    With ``development`` False the lookup starts a week earlier, giving the
    cycle that is currently being released rather than developed.
    """
    if not development:
        when = add_weeks(when, -1)

    freeze = add_days(when, _days_until_wednesday(when))
    last_accelerated_day = add_days(freeze, -1)
    release = add_days(freeze, ACCELERATED_RELEASE_AFTER_FREEZE_DAYS)
    begin = add_days(freeze, -ACCELERATED_RELEASE_AFTER_FREEZE_DAYS)

    # A freeze on the day after a monthly release already belongs to the next month.
    this_month = second_tuesday(last_accelerated_day)
    if freeze <= this_month:
        monthly_release = this_month
    else:
        monthly_release = second_tuesday(add_months(this_month, 1))

    monthly = monthly_cycle(monthly_release, development=False)
    previous_monthly_release = second_tuesday(add_days(monthly_release, -MONTHLY_STEP_DAYS))
    weeks = math.floor(weeks_between(last_accelerated_day, previous_monthly_release))
    index = ACCELERATED_INDEX_STEP * (weeks + 1)

    return ReleaseCycle(
        version=f"{monthly.version}.{index}",
        begin=begin,
        freeze=freeze,
        release=release,
    )


def versions_between(start: date, end: date) -> list[ReleaseCycle]:
    """Every monthly and accelerated cycle seen from ``start`` up to ``end``.

    The range is walked in 28-day steps for monthly cycles and 7-day steps
    for accelerated ones, ``end`` excluded. Arguments may come in either
    order. Cycles are unique by version; order is not significant.
    """
    if start > end:
        start, end = end, start

    found: dict[str, ReleaseCycle] = {}
    day = start
    while day < end:
        cycle = monthly_cycle(day, development=False)
        found[cycle.version] = cycle
        day = add_days(day, MONTHLY_STEP_DAYS)

    day = start
    while day < end:
        cycle = accelerated_cycle(day, development=False)
        found[cycle.version] = cycle
        day = add_days(day, ACCELERATED_STEP_DAYS)

    return list(found.values())
