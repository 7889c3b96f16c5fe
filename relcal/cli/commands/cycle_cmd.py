from __future__ import annotations

import typer

from relcal.cli.commands._helpers import (
    CYCLE_COLUMNS,
    OVERRIDE_HELP,
    cycle_row,
    echo_json,
    exit_on_error,
    sorted_cycles,
)
from relcal.cli.context import build_context
from relcal.core.errors import ErrorCode
from relcal.core.result import Err
from relcal.services.release.schedule import accelerated_cycle, monthly_cycle, versions_between
from relcal.services.release.service import resolve_reference


def cycle(
    accelerated: bool = typer.Option(False, "--accelerated", help="Show the accelerated cycle."),
    released: bool = typer.Option(
        False,
        "--released",
        help="Show the cycle being released instead of the one in development.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON."),
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Show version and dates of the active release cycle."""
    ctx = build_context(override)
    resolve = accelerated_cycle if accelerated else monthly_cycle
    result = resolve(ctx.today, development=not released)

    if ctx.wants_json(json_output):
        echo_json(result.as_dict())
        return

    kind = "Accelerated" if accelerated else "Monthly"
    phase = "release" if released else "development"
    ctx.console.table(f"{kind} {phase} cycle", CYCLE_COLUMNS, [cycle_row(result)])


def between(
    start: str = typer.Argument(..., help="First day (ISO 8601)."),
    end: str = typer.Argument(..., help="Last day, excluded (ISO 8601)."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON."),
) -> None:
    """List every monthly and accelerated cycle between two days."""
    ctx = build_context(start)
    end_day = resolve_reference(end)
    if isinstance(end_day, Err):
        exit_on_error(end_day, ctx, ErrorCode.USER_ERROR)
        return

    cycles = sorted_cycles(versions_between(ctx.today, end_day.value))
    if ctx.wants_json(json_output):
        echo_json([c.as_dict() for c in cycles])
        return

    title = f"Releases between {ctx.today.isoformat()} and {end_day.value.isoformat()}"
    ctx.console.table(title, CYCLE_COLUMNS, [cycle_row(c) for c in cycles])
