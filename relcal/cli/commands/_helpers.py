"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TYPE_CHECKING

import typer

from relcal.core.errors import ErrorCode
from relcal.core.result import Err, Result
from relcal.output.console import Style
from relcal.services.release.model import ReleaseCycle

if TYPE_CHECKING:
    from relcal.cli.context import CLIContext


OVERRIDE_HELP = 'Reference day as an ISO 8601 date, or "now" (UTC).'
CYCLE_COLUMNS = ("version", "begin", "freeze", "release")


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.IO_ERROR,
) -> None:
    """Exit with error if result is Err, otherwise return.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))


def echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2))


def cycle_row(cycle: ReleaseCycle) -> tuple[str, str, str, str]:
    d = cycle.as_dict()
    return (d["version"], d["begin"], d["freeze"], d["release"])


def sorted_cycles(cycles: Iterable[ReleaseCycle]) -> list[ReleaseCycle]:
    return sorted(cycles, key=lambda c: (c.release, c.version))
