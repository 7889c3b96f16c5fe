"""Typed configuration loading.

Settings come from ``relcal.toml`` or from the ``[tool.relcal]`` table of
``pyproject.toml``. Calendar constants are deliberately absent: only
presentation settings can be changed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "OutputFormat",
    "CONFIG_FILENAME",
    "DEFAULT_BRANCH_PREFIX",
    "discover_config",
    "load_config",
]

CONFIG_FILENAME = "relcal.toml"
PYPROJECT_FILENAME = "pyproject.toml"
DEFAULT_BRANCH_PREFIX = "release/"

OutputFormat = Literal["text", "json"]
_OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("text", "json")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Settings for the CLI.

    ``output`` is the default format of the structured commands (cycle,
    between, status). Single-value commands always print the bare value.
    """

    branch_prefix: str = DEFAULT_BRANCH_PREFIX
    output: OutputFormat = "text"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML table."""
        output = get_str(data, "output") or "text"
        if output not in _OUTPUT_FORMATS:
            raise ValueError(f"output must be one of {', '.join(_OUTPUT_FORMATS)}, got {output!r}")

        # An explicit empty prefix is allowed; get_str maps it to None.
        prefix = data.get("branch-prefix")
        if prefix is None:
            branch_prefix = DEFAULT_BRANCH_PREFIX
        else:
            branch_prefix = get_str(data, "branch-prefix") or ""

        return cls(
            branch_prefix=branch_prefix,
            output="json" if output == "json" else "text",
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def _settings_table(path: Path, data: StrDict) -> StrDict:
    if path.name == PYPROJECT_FILENAME:
        tool = get_table(data, "tool") or {}
        return get_table(tool, "relcal") or {}
    return data


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load configuration from ``relcal.toml`` or ``pyproject.toml``.

    Args:
        path: Path to the file. For ``pyproject.toml`` only the
            ``[tool.relcal]`` table is read.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(_settings_table(path, result.value)))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def discover_config(start: Path) -> Path | None:
    """Find the config file that applies to ``start``.

    ``relcal.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it has a ``[tool.relcal]`` table.
    """
    candidate = start / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = start / PYPROJECT_FILENAME
    if pyproject.is_file():
        parsed = _parse_toml(pyproject)
        if isinstance(parsed, Ok):
            tool = get_table(parsed.value, "tool") or {}
            if get_table(tool, "relcal") is not None:
                return pyproject
    return None
