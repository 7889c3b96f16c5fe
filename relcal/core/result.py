"""Ok/Err result type used at the CLI boundary.

Loading config, resolving the reference date and writing CI outputs all
return a ``Result`` so commands handle failures in one place:

    match resolve_reference(override):
        case Ok(day):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying ``error``."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
