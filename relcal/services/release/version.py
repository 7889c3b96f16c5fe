"""Version, branch and milestone names for a reference day."""

from __future__ import annotations

import math
from datetime import date

from relcal.core.config import DEFAULT_BRANCH_PREFIX
from relcal.core.dates import add_days, add_months, weeks_between
from relcal.services.release.model import ReleaseCycle
from relcal.services.release.schedule import (
    ACCELERATED_INDEX_STEP,
    DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE,
    MONTHLY_STEP_DAYS,
    PREVIOUS_RELEASE_BUFFER_DAYS,
    format_monthly_version,
    month_index,
    second_tuesday,
)

MONTHLY_LOOKAHEAD_DAYS = 14


def _version_prefix(version: str, parts: int) -> str:
    return ".".join(version.split(".")[:parts])


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def current_version(today: date) -> str:
    """Accelerated version being frozen on ``today``, e.g. ``8.1.0.20``.

    Days later in the week count toward the next index, so the week offset
    is rounded rather than floored.
    """
    this_month = second_tuesday(today)
    if today < this_month:
        upcoming = this_month
    else:
        upcoming = second_tuesday(add_months(today, 1))
    previous = second_tuesday(
        add_days(upcoming, -(DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE + PREVIOUS_RELEASE_BUFFER_DAYS))
    )
    weeks = _round_half_up(weeks_between(today, previous))
    index = weeks * ACCELERATED_INDEX_STEP + ACCELERATED_INDEX_STEP
    return f"{format_monthly_version(month_index(previous))}.0.{index}"


def monthly_version(today: date) -> str:
    """Monthly version active two weeks from ``today``, e.g. ``8.1.0``."""
    return _version_prefix(current_version(add_days(today, MONTHLY_LOOKAHEAD_DAYS)), 3)


def branch_name(today: date, *, prefix: str = DEFAULT_BRANCH_PREFIX) -> str:
    return f"{prefix}{current_version(today)}"


def monthly_branch_name(today: date, *, prefix: str = DEFAULT_BRANCH_PREFIX) -> str:
    return f"{prefix}{_version_prefix(current_version(today), 2)}"


def cycle_branch(cycle: ReleaseCycle, *, prefix: str = DEFAULT_BRANCH_PREFIX) -> str:
    """Branch for a computed cycle.

    Accelerated cycles branch on their full version, monthly cycles on
    ``major.minor`` like ``monthly_branch_name``.
    """
    if cycle.kind == "accelerated":
        return f"{prefix}{cycle.version}"
    return f"{prefix}{_version_prefix(cycle.version, 2)}"


def next_milestone(today: date) -> str:
    """Milestone to open at the coming freeze: the monthly version after next."""
    return monthly_version(second_tuesday(add_days(today, MONTHLY_STEP_DAYS)))
