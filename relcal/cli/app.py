from __future__ import annotations

import os
from pathlib import Path

import typer

from relcal import __version__
from relcal.cli.commands.cycle_cmd import between, cycle
from relcal.cli.commands.dates_cmd import release_date, verify_day
from relcal.cli.commands.status import status
from relcal.cli.commands.version_cmd import branch, milestone, version
from relcal.cli.context import CONFIG_ENV
from relcal.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Release calendar: versions, branches and code freeze dates.",
)


app.command()(version)
app.command()(branch)
app.command()(milestone)
app.command("release-date")(release_date)
app.command("verify-day")(verify_day)
app.command()(cycle)
app.command()(between)
app.command()(status)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: ./relcal.toml or [tool.relcal] in ./pyproject.toml)",
    ),
) -> None:
    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' does not exist", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        os.environ[CONFIG_ENV] = str(path)


def main() -> None:
    app()
