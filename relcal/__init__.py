"""Release calendar: version numbers, branches and freeze dates for the release trains."""

__version__ = "0.1.0"
