from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from relcal.core.dates import InvalidDateError

__all__ = ["CalendarError", "InvalidDateError"]


@dataclass(frozen=True, slots=True)
class CalendarError:
    kind: Literal[
        "invalid_date",
        "github_output_missing",
        "output_failed",
    ]
    message: str
    hint: str | None = None
