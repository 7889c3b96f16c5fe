"""Status command - everything a release job needs for one day."""

from __future__ import annotations

import typer

from relcal.cli.commands._helpers import (
    CYCLE_COLUMNS,
    OVERRIDE_HELP,
    cycle_row,
    echo_json,
    exit_on_error,
)
from relcal.cli.context import build_context
from relcal.core.errors import ErrorCode
from relcal.core.result import Err
from relcal.output.console import Style
from relcal.services.release.freeze import FreezeStatus, freeze_status
from relcal.services.release.github import github_output_path, status_outputs, write_outputs


def _status_payload(st: FreezeStatus) -> dict[str, object]:
    return {
        "today": st.today.isoformat(),
        "accelerated": {
            "release": st.accelerated_release.as_dict(),
            "development": st.accelerated_development.as_dict(),
            "branch": st.accelerated_branch,
            "freezeToday": st.is_accelerated_freeze,
        },
        "monthly": {
            "release": st.monthly_release.as_dict(),
            "development": st.monthly_development.as_dict(),
            "branch": st.monthly_branch,
            "freezeToday": st.is_monthly_freeze,
        },
        "frozenToday": list(st.frozen_today),
    }


def status(
    json_output: bool = typer.Option(False, "--json", help="Print JSON."),
    github: bool = typer.Option(False, "--github", help="Also write GitHub Actions outputs."),
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Show release and development cycles for the reference day."""
    ctx = build_context(override)
    st = freeze_status(ctx.today, branch_prefix=ctx.config.branch_prefix)

    if github:
        path = github_output_path()
        if isinstance(path, Err):
            exit_on_error(path, ctx, ErrorCode.ENV_ERROR)
            return
        exit_on_error(write_outputs(path.value, status_outputs(st)), ctx)

    if ctx.wants_json(json_output):
        echo_json(_status_payload(st))
        return

    console = ctx.console
    console.print(f"today: {st.today.isoformat()}", Style.DIM)
    console.table(
        "Accelerated",
        ("phase", *CYCLE_COLUMNS),
        [
            ("release", *cycle_row(st.accelerated_release)),
            ("development", *cycle_row(st.accelerated_development)),
        ],
    )
    console.table(
        "Monthly",
        ("phase", *CYCLE_COLUMNS),
        [
            ("release", *cycle_row(st.monthly_release)),
            ("development", *cycle_row(st.monthly_development)),
        ],
    )
    console.print(f"accelerated branch: {st.accelerated_branch}")
    console.print(f"monthly branch: {st.monthly_branch}")

    if st.frozen_today:
        console.info(f"frozen today: {', '.join(st.frozen_today)}")
    else:
        console.print("no code freeze today", Style.DIM)
