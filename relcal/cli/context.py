from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import typer

from relcal.core.config import Config, discover_config, load_config
from relcal.core.errors import ErrorCode
from relcal.core.result import Err
from relcal.output.console import ConsoleProtocol, RichConsole, Style
from relcal.services.release.service import resolve_reference

CONFIG_ENV = "RELCAL_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    today: date
    config: Config
    console: ConsoleProtocol

    def wants_json(self, flag: bool) -> bool:
        return flag or self.config.output == "json"


def _config_path() -> Path | None:
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    return discover_config(Path.cwd())


def build_context(override: str) -> CLIContext:
    console = RichConsole()

    config = Config()
    path = _config_path()
    if path is not None:
        loaded = load_config(path)
        if isinstance(loaded, Err):
            console.error(loaded.error.message)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = loaded.value

    reference = resolve_reference(override)
    if isinstance(reference, Err):
        console.error(reference.error.message)
        if reference.error.hint:
            console.print(f"hint: {reference.error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(today=reference.value, config=config, console=console)
