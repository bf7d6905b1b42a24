"""
Built-in checkers for forma fields.

A checker takes a decoded field value and returns ``Ok(value)`` or
``Err(payload)``. The factories here return plain (sync) checkers; ``chain``
composes any mix of sync and async ones.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable

from .lib.invoke_helpers import invoke
from .types import Checker, Err, Ok


def not_empty(message: str = "This field cannot be empty.") -> Checker:
    """
    Reject empty strings and empty collections.

    Usage:
        SIGNUP.field("username", str, not_empty())
    """

    def check(x: Any) -> Ok[Any] | Err[str]:
        try:
            n = len(x)
        except TypeError:
            return Err(message)
        if n == 0:
            return Err(message)
        return Ok(x)

    return check


def length_between(
    lower: int | None = None, upper: int | None = None, message: str | None = None
) -> Checker:
    """
    Validate length is within range (inclusive).

    Usage:
        length_between(3, 20)      # 3 to 20 characters
        length_between(lower=8)    # At least 8
    """
    msg_parts = []
    if lower is not None:
        msg_parts.append(f">= {lower}")
    if upper is not None:
        msg_parts.append(f"<= {upper}")
    msg = message or f"Length must be {' and '.join(msg_parts)}"

    def check(x: Any) -> Ok[Any] | Err[str]:
        try:
            n = len(x)
        except TypeError:
            return Err(msg)
        if lower is not None and n < lower:
            return Err(msg)
        if upper is not None and n > upper:
            return Err(msg)
        return Ok(x)

    return check


def min_length(n: int, message: str | None = None) -> Checker:
    """Validate minimum length."""
    return length_between(lower=n, message=message)


def max_length(n: int, message: str | None = None) -> Checker:
    """Validate maximum length."""
    return length_between(upper=n, message=message)


def one_of(values: Iterable[Any], message: str | None = None) -> Checker:
    """
    Validate value is in a set of allowed values.

    Usage:
        one_of({"red", "green", "blue"})
    """
    container = frozenset(values)
    msg = message or f"Must be one of: {sorted(container, key=repr)}"

    def check(x: Any) -> Ok[Any] | Err[str]:
        try:
            found = x in container
        except TypeError:
            return Err(msg)
        return Ok(x) if found else Err(msg)

    return check


def matches(pattern: str, message: str | None = None) -> Checker:
    """
    Validate string matches regex pattern.

    Usage:
        matches(r"^[a-z0-9_]+$")
    """
    compiled = re.compile(pattern)
    msg = message or f"Must match pattern: {pattern}"

    def check(x: Any) -> Ok[Any] | Err[str]:
        if isinstance(x, str) and compiled.match(x) is not None:
            return Ok(x)
        return Err(msg)

    return check


def between(
    lower: Any, upper: Any, inclusive: bool = True, message: str | None = None
) -> Checker:
    """Validate value is between bounds."""
    if inclusive:
        msg = message or f"Must be between {lower} and {upper}"

        def check(x: Any) -> Ok[Any] | Err[str]:
            return Ok(x) if lower <= x <= upper else Err(msg)

        return check

    msg = message or f"Must be between {lower} and {upper} (exclusive)"

    def check_exclusive(x: Any) -> Ok[Any] | Err[str]:
        return Ok(x) if lower < x < upper else Err(msg)

    return check_exclusive


def predicate(fn: Callable[[Any], bool], message: Any) -> Checker:
    """
    Create a checker from an arbitrary predicate.

    ``message`` can be any JSON-serializable payload.

    Usage:
        predicate(lambda x: x > 0, "Must be positive")
    """

    def check(x: Any) -> Ok[Any] | Err[Any]:
        return Ok(x) if fn(x) else Err(message)

    return check


def chain(*checkers: Checker) -> Checker:
    """
    Compose checkers left to right; stop at the first ``Err``.

    Each checker receives the value produced by the previous one, so
    transforming checkers can be followed by validating ones. The result is
    always an async checker.

    Usage:
        chain(not_empty(), max_length(32), username_is_free)
    """

    async def check(x: Any) -> Ok[Any] | Err[Any]:
        current = x
        for checker in checkers:
            outcome = await invoke(checker, current)
            if isinstance(outcome, Err):
                return outcome
            current = outcome.value
        return Ok(current)

    return check
