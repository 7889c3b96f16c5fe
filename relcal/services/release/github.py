"""GitHub Actions step outputs.

Outputs are appended to the file named by ``GITHUB_OUTPUT`` as
``name=value`` lines. Multi-line values use the heredoc form.
"""

from __future__ import annotations

import json
import os
import uuid
from collections.abc import Mapping
from pathlib import Path

from relcal.core.result import Err, Ok, Result
from relcal.services.release.errors import CalendarError
from relcal.services.release.freeze import FreezeStatus

GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"


def github_output_path(env: Mapping[str, str] | None = None) -> Result[Path, CalendarError]:
    source = os.environ if env is None else env
    value = source.get(GITHUB_OUTPUT_ENV, "").strip()
    if not value:
        return Err(
            CalendarError(
                kind="github_output_missing",
                message=f"{GITHUB_OUTPUT_ENV} is not set",
                hint="--github only works inside a GitHub Actions step",
            )
        )
    return Ok(Path(value))


def format_outputs(outputs: Mapping[str, str]) -> str:
    lines: list[str] = []
    for name, value in outputs.items():
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
            lines.append(f"{name}<<{delimiter}")
            lines.append(value)
            lines.append(delimiter)
        else:
            lines.append(f"{name}={value}")
    return "\n".join(lines) + "\n"


def write_outputs(path: Path, outputs: Mapping[str, str]) -> Result[None, CalendarError]:
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(format_outputs(outputs))
    except OSError as e:
        return Err(
            CalendarError(
                kind="output_failed",
                message=f"failed to write GitHub outputs: {e}",
                hint=str(path),
            )
        )
    return Ok(None)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def status_outputs(status: FreezeStatus) -> dict[str, str]:
    return {
        "acceleratedVersion": status.accelerated_release.version,
        "monthlyVersion": status.monthly_release.version,
        "acceleratedBranch": status.accelerated_branch,
        "monthlyBranch": status.monthly_branch,
        "isTodayAcceleratedFreeze": _yes_no(status.is_accelerated_freeze),
        "isTodayMonthlyFreeze": _yes_no(status.is_monthly_freeze),
        "releasesFrozenToday": json.dumps(list(status.frozen_today)),
    }
