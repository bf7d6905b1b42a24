"""
State of a parsing branch and the rules for combining branches.

Every parser evaluation produces exactly one of:

    FormParseError       the input has the wrong shape; fatal, absorbs everything
    FormValidationError  a well-shaped value failed a check; accumulates
    FormSuccess          a value of the branch's result type
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .field_errors import FieldErrors
from .path import FieldPath

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class FormParseError:
    """Decoding broke at ``path``. Fatal for the whole parse."""

    path: FieldPath
    message: str

    def map(self, fn: Callable[[Any], Any]) -> FormParseError:
        return self


@dataclass(frozen=True, slots=True)
class FormValidationError:
    """One or more fields failed their checks."""

    errors: FieldErrors

    def map(self, fn: Callable[[Any], Any]) -> FormValidationError:
        return self


@dataclass(frozen=True, slots=True)
class FormSuccess(Generic[T]):
    value: T

    def map(self, fn: Callable[[T], U]) -> FormSuccess[U]:
        return FormSuccess(fn(self.value))


FormResult = Union[FormParseError, FormValidationError, FormSuccess[Any]]


def combine_results(
    x: FormResult, y: FormResult, fn: Callable[[Any, Any], Any]
) -> FormResult:
    """
    Combine two sibling branches.

    A parse error on either side wins (the left one if both failed). Two
    validation errors merge their field errors. Two successes are joined
    with ``fn``.
    """
    match x, y:
        case FormParseError(), _:
            return x
        case _, FormParseError():
            return y
        case FormValidationError(errors=e0), FormValidationError(errors=e1):
            return FormValidationError(e0.merge(e1))
        case FormValidationError(), FormSuccess():
            return x
        case FormSuccess(), FormValidationError():
            return y
        case FormSuccess(value=a), FormSuccess(value=b):
            return FormSuccess(fn(a, b))

    raise TypeError(f"Cannot combine {type(x).__name__} with {type(y).__name__}")


def choose_results(x: FormResult, y: FormResult) -> FormResult:
    """Left-biased choice: ``x`` unless it is a parse error, else ``y``."""
    if isinstance(x, FormParseError):
        return y
    return x
