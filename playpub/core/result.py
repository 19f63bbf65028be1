"""Result type for explicit error handling.

Pipeline stages return ``Ok`` or ``Err`` instead of raising, so the
orchestrator can turn every failure into a tagged outcome in one place.

Usage:
    def first_artifact(paths: tuple[str, ...]) -> Result[str, str]:
        if not paths:
            return Err("no artifacts")
        return Ok(paths[0])

    match first_artifact(("app-release.aab",)):
        case Ok(path):
            print(f"Uploading {path}")
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
