from __future__ import annotations

import typer

from relcal.cli.commands._helpers import OVERRIDE_HELP, exit_on_error
from relcal.cli.context import build_context
from relcal.core.errors import ErrorCode
from relcal.core.result import Err
from relcal.services.release.freeze import (
    is_code_freeze_day,
    next_monthly_release_date,
    next_release_date,
)
from relcal.services.release.github import github_output_path, write_outputs


def release_date(
    monthly: bool = typer.Option(False, "--monthly", help="Print the next monthly release date."),
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Print the date of the next release (YYYY-MM-DD)."""
    ctx = build_context(override)
    day = next_monthly_release_date(ctx.today) if monthly else next_release_date(ctx.today)
    ctx.console.print(day.isoformat())


def verify_day(
    github: bool = typer.Option(
        False,
        "--github",
        help="Write freeze=true|false to GITHUB_OUTPUT and always exit 0.",
    ),
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Check whether the reference day is the monthly code freeze day."""
    ctx = build_context(override)
    frozen = is_code_freeze_day(ctx.today)

    if github:
        path = github_output_path()
        if isinstance(path, Err):
            exit_on_error(path, ctx, ErrorCode.ENV_ERROR)
            return
        exit_on_error(write_outputs(path.value, {"freeze": "true" if frozen else "false"}), ctx)

    if frozen:
        ctx.console.success(f"{ctx.today.isoformat()} is code freeze day")
        return

    ctx.console.warning(f"{ctx.today.isoformat()} is not code freeze day")
    if not github:
        raise typer.Exit(code=int(ErrorCode.CHECK_FAILED))
