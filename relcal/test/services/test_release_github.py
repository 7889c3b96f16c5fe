from __future__ import annotations

import json
from datetime import date, timedelta
from pathlib import Path

from relcal.core.result import Err, Ok
from relcal.services.release.freeze import freeze_status
from relcal.services.release.github import (
    format_outputs,
    github_output_path,
    status_outputs,
    write_outputs,
)


def test_github_output_path_from_env(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    result = github_output_path({"GITHUB_OUTPUT": str(target)})
    assert result == Ok(target)


def test_github_output_path_missing() -> None:
    result = github_output_path({})
    assert isinstance(result, Err)
    assert result.error.kind == "github_output_missing"
    assert result.error.hint is not None


def test_format_outputs_single_line() -> None:
    assert format_outputs({"a": "1", "b": "two"}) == "a=1\nb=two\n"


def test_format_outputs_multiline_uses_delimiter() -> None:
    text = format_outputs({"notes": "line one\nline two"})
    lines = text.splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["line one", "line two", delimiter]


def test_write_outputs_appends(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("existing=1\n", encoding="utf-8")

    assert write_outputs(target, {"freeze": "true"}) == Ok(None)
    assert target.read_text(encoding="utf-8") == "existing=1\nfreeze=true\n"


def test_write_outputs_reports_failure(tmp_path: Path) -> None:
    result = write_outputs(tmp_path / "missing" / "out.txt", {"freeze": "true"})
    assert isinstance(result, Err)
    assert result.error.kind == "output_failed"


def test_status_outputs() -> None:
    outputs = status_outputs(freeze_status(date(2023, 8, 9)))
    assert outputs == {
        "acceleratedVersion": "8.0.0.40",
        "monthlyVersion": "8.1.0",
        "acceleratedBranch": "release/8.0.0.40",
        "monthlyBranch": "release/8.1",
        "isTodayAcceleratedFreeze": "yes",
        "isTodayMonthlyFreeze": "no",
        "releasesFrozenToday": json.dumps(["8.1.0.10"]),
    }


def test_status_outputs_pair_branches_with_versions() -> None:
    start = date(2023, 7, 1)
    for offset in range(120):
        day = start + timedelta(days=offset)
        outputs = status_outputs(freeze_status(day, branch_prefix="release/"))
        assert outputs["acceleratedBranch"] == "release/" + outputs["acceleratedVersion"], day
        major_minor = outputs["monthlyVersion"].rsplit(".", 1)[0]
        assert outputs["monthlyBranch"] == "release/" + major_minor, day
