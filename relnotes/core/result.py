"""Result type for explicit error handling.

Every stage of the notes pipeline returns a ``Result`` instead of exiting the
process. Only the CLI layer turns an ``Err`` into a diagnostic and an exit code.

Usage:
    def parse_port(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Err(f"not a port: {text}")
        return Ok(int(text))

    result = parse_port("http")
    if isinstance(result, Err):
        print(f"error: {result.error}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Applies ``f`` to the contained error."""
        return Err(f(self.error))


Result: TypeAlias = Ok[T] | Err[E]
