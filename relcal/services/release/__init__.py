"""Release calendar calculations.

- schedule: second Tuesdays, monthly and accelerated cycles, range enumeration
- version: version, branch and milestone names
- freeze: release dates and freeze-day checks
- github: GitHub Actions outputs
"""

from __future__ import annotations

from relcal.services.release.errors import CalendarError, InvalidDateError
from relcal.services.release.freeze import (
    FreezeStatus,
    freeze_status,
    is_code_freeze_day,
    next_monthly_release_date,
    next_release_date,
)
from relcal.services.release.model import ReleaseCycle
from relcal.services.release.schedule import (
    DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE,
    accelerated_cycle,
    monthly_cycle,
    second_tuesday,
    versions_between,
)
from relcal.services.release.service import resolve_reference
from relcal.services.release.version import (
    branch_name,
    current_version,
    cycle_branch,
    monthly_branch_name,
    monthly_version,
    next_milestone,
)

__all__ = [
    "DAYS_BETWEEN_CODE_FREEZE_AND_RELEASE",
    "CalendarError",
    "FreezeStatus",
    "InvalidDateError",
    "ReleaseCycle",
    "accelerated_cycle",
    "branch_name",
    "current_version",
    "cycle_branch",
    "freeze_status",
    "is_code_freeze_day",
    "monthly_branch_name",
    "monthly_cycle",
    "monthly_version",
    "next_milestone",
    "next_monthly_release_date",
    "next_release_date",
    "resolve_reference",
    "second_tuesday",
    "versions_between",
]
