from __future__ import annotations

import typer

from relcal.cli.commands._helpers import OVERRIDE_HELP
from relcal.cli.context import build_context
from relcal.services.release.version import (
    branch_name,
    current_version,
    monthly_branch_name,
    monthly_version,
    next_milestone,
)


def version(
    monthly: bool = typer.Option(False, "--monthly", help="Print the monthly version instead."),
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Print the release version for the reference day."""
    ctx = build_context(override)
    value = monthly_version(ctx.today) if monthly else current_version(ctx.today)
    ctx.console.print(value)


def branch(
    monthly: bool = typer.Option(False, "--monthly", help="Print the monthly release branch."),
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Print the release branch for the reference day."""
    ctx = build_context(override)
    prefix = ctx.config.branch_prefix
    if monthly:
        ctx.console.print(monthly_branch_name(ctx.today, prefix=prefix))
    else:
        ctx.console.print(branch_name(ctx.today, prefix=prefix))


def milestone(
    override: str = typer.Option("now", "-o", "--override", help=OVERRIDE_HELP),
) -> None:
    """Print the milestone to create at the next code freeze."""
    ctx = build_context(override)
    ctx.console.print(next_milestone(ctx.today))
