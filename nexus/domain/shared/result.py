"""Result monad for explicit error handling.

Persistence operations report failure through a Result instead of raising,
so a broken storage medium can never interrupt a Store mutation.

Example usage:
    >>> def parse_count(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err(f"Not a number: {text!r}")
    ...     return Ok(int(text))
    ...
    >>> result = parse_count("42")
    >>> if is_ok(result):
    ...     print(f"Count: {result.value}")
    Count: 42
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Err."""
    return isinstance(result, Err)

