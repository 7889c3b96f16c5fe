from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

from relcal.core.dates import to_iso


CycleKind = Literal["monthly", "accelerated"]


@dataclass(frozen=True, slots=True)
class ReleaseCycle:
    """One release of a train: when development begins, freezes and ships."""

    version: str
    begin: date
    freeze: date
    release: date

    @property
    def kind(self) -> CycleKind:
        # Monthly versions are major.minor.0, accelerated ones add an index.
        return "accelerated" if self.version.count(".") == 3 else "monthly"

    def as_dict(self) -> dict[str, str]:
        return {
            "version": self.version,
            "begin": to_iso(self.begin),
            "freeze": to_iso(self.freeze),
            "release": to_iso(self.release),
        }
