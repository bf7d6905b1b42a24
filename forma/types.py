"""
Type definitions for forma.

Provides the Ok/Err containers that checkers and second-pass callbacks
return, plus a few type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Check passed; carries the (possibly transformed) value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Check failed; carries the error payload reported for the field."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
JSONValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
CheckResult = Union[Ok[Any], Err[Any]]
Checker = Callable[[Any], Union[CheckResult, Awaitable[CheckResult]]]
