"""Release dates and freeze-day checks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from relcal.core.config import DEFAULT_BRANCH_PREFIX
from relcal.core.dates import add_days, iso_weekday
from relcal.services.release.model import ReleaseCycle
from relcal.services.release.schedule import (
    DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE,
    MONTHLY_STEP_DAYS,
    accelerated_cycle,
    monthly_cycle,
    second_tuesday,
)
from relcal.services.release.version import cycle_branch


def next_release_date(today: date) -> date:
    """Next Tuesday after ``today`` (a Tuesday moves a full week)."""
    weekday = iso_weekday(today)
    return add_days(today, 1 if weekday == 1 else 9 - weekday)


def next_monthly_release_date(today: date) -> date:
    this_month = second_tuesday(today)
    if this_month > today:
        return this_month
    return second_tuesday(add_days(this_month, MONTHLY_STEP_DAYS))


def is_code_freeze_day(today: date) -> bool:
    """True when a monthly release is exactly the freeze window away."""
    future = add_days(today, DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE)
    return future == second_tuesday(future)


@dataclass(frozen=True, slots=True)
class FreezeStatus:
    """Everything a release job needs to know about one day."""

    today: date
    accelerated_release: ReleaseCycle
    accelerated_development: ReleaseCycle
    monthly_release: ReleaseCycle
    monthly_development: ReleaseCycle
    accelerated_branch: str
    monthly_branch: str

    @property
    def is_accelerated_freeze(self) -> bool:
        return self.today == self.accelerated_development.freeze

    @property
    def is_monthly_freeze(self) -> bool:
        return is_code_freeze_day(self.today)

    @property
    def frozen_today(self) -> tuple[str, ...]:
        """Versions whose freeze happens today."""
        out: list[str] = []
        if self.is_accelerated_freeze:
            out.append(self.accelerated_development.version)
        if self.is_monthly_freeze:
            out.append(self.monthly_release.version)
        return tuple(out)


def freeze_status(today: date, *, branch_prefix: str = DEFAULT_BRANCH_PREFIX) -> FreezeStatus:
    """Summarise ``today``; branches name the cycles being released."""
    accelerated_release = accelerated_cycle(today, development=False)
    monthly_release = monthly_cycle(today, development=False)
    return FreezeStatus(
        today=today,
        accelerated_release=accelerated_release,
        accelerated_development=accelerated_cycle(today),
        monthly_release=monthly_release,
        monthly_development=monthly_cycle(today),
        accelerated_branch=cycle_branch(accelerated_release, prefix=branch_prefix),
        monthly_branch=cycle_branch(monthly_release, prefix=branch_prefix),
    )
