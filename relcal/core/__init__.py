"""Core types shared by the calculator and the CLI."""

from .config import Config, ConfigError, discover_config, load_config
from .dates import InvalidDateError, get_today, parse_iso_date
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "discover_config",
    "load_config",
    # dates
    "InvalidDateError",
    "get_today",
    "parse_iso_date",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
