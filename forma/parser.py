"""
FormParser - the applicative form parsing engine.

A ``FormParser`` describes how to pull a value out of a decoded JSON
document. Parsers are combined applicatively: every sibling branch is
evaluated on its own, and their results are merged afterwards. Nothing one
branch produces can change what another branch does, which is what lets
validation errors from every field be collected in one pass.

There is no ``bind``/``then``: a monadic step would have to
stop at the first failure.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from .errors import FormDefinitionError
from .lib.decode_helpers import Decoder
from .lib.invoke_helpers import gather_in_order
from .path import ROOT, FieldPath
from .result import (
    FormParseError,
    FormResult,
    FormSuccess,
    choose_results,
    combine_results,
)

T = TypeVar("T")
U = TypeVar("U")

RunFn = Callable[[Any, FieldPath], Awaitable[FormResult]]


class FormParser(Generic[T]):
    """
    Reusable, immutable description of a form.

    Build parsers with ``FieldNames.field``/``sub_parser``/``with_check`` and
    the combinators in this module; run them with ``forma.run_form``.

    ``names`` is the ``FieldNames`` the parser was built from, or None for
    parsers that reference no field names (``value``, ``pure``, ``empty``).
    """

    __slots__ = ("_run", "names")

    def __init__(self, run: RunFn, names: Any = None):
        self._run = run
        self.names = names

    async def parse(self, value: Any, path: FieldPath = ROOT) -> FormResult:
        """Evaluate the parser against ``value`` located at ``path``."""
        return await self._run(value, path)

    def map(self, fn: Callable[[T], U]) -> FormParser[U]:
        """Transform the result of a successful parse."""

        async def run(value: Any, path: FieldPath) -> FormResult:
            return (await self._run(value, path)).map(fn)

        return FormParser(run, self.names)

    def zip_with(
        self, other: FormParser[U], fn: Callable[[T, U], Any]
    ) -> FormParser[Any]:
        """Evaluate both parsers and join two successes with ``fn``."""
        names = _join_names(self, other)

        async def run(value: Any, path: FieldPath) -> FormResult:
            x, y = await gather_in_order(
                self._run(value, path), other._run(value, path)
            )
            return combine_results(x, y, fn)

        return FormParser(run, names)

    def ap(self, other: FormParser[Any]) -> FormParser[Any]:
        """Apply the function this parser produces to the value ``other`` produces."""
        return self.zip_with(other, lambda f, x: f(x))

    def alt(self, other: FormParser[T]) -> FormParser[T]:
        """
        Left-biased alternative.

        Both sides are always evaluated (their checkers run). The left result
        is used unless it is a parse error, in which case the right one is.
        """
        names = _join_names(self, other)

        async def run(value: Any, path: FieldPath) -> FormResult:
            x, y = await gather_in_order(
                self._run(value, path), other._run(value, path)
            )
            return choose_results(x, y)

        return FormParser(run, names)

    def __or__(self, other: FormParser[T]) -> FormParser[T]:
        if not isinstance(other, FormParser):
            return NotImplemented
        return self.alt(other)

    def __repr__(self) -> str:
        return f"<FormParser names={self.names!r}>"


def _join_names(*parsers: FormParser[Any]) -> Any:
    names = None
    for parser in parsers:
        if parser.names is None:
            continue
        if names is None:
            names = parser.names
        elif names != parser.names:
            raise FormDefinitionError(
                f"Cannot combine parsers over different field sets: {names!r} and {parser.names!r}"
            )
    return names


def pure(x: T) -> FormParser[T]:
    """A parser that always succeeds with ``x`` without looking at the input."""

    async def run(value: Any, path: FieldPath) -> FormResult:
        return FormSuccess(x)

    return FormParser(run)


def empty() -> FormParser[Any]:
    """A parser that never succeeds; the identity of ``|``."""

    async def run(value: Any, path: FieldPath) -> FormResult:
        return FormParseError(path, "empty")

    return FormParser(run)


def value(type_: Any = Any) -> FormParser[Any]:
    """
    Interpret the current value as ``type_``.

    Decoding goes through a pydantic ``TypeAdapter``, so ``type_`` may be
    any type pydantic understands (``str``, ``list[int]``, a model...).
    A decode failure is a parse error at the current path.
    """
    decode = Decoder(type_)

    async def run(raw: Any, path: FieldPath) -> FormResult:
        decoded = decode(raw)
        if decoded.is_err():
            return FormParseError(path, decoded.error)
        return FormSuccess(decoded.value)

    return FormParser(run)


def combine(fn: Callable[..., T], *parsers: FormParser[Any]) -> FormParser[T]:
    """
    Run ``parsers`` as independent branches and call ``fn`` with their results.

    Usage:
        login_form = combine(
            LoginForm,
            fields.field("username", str, not_empty()),
            fields.field("password", str, not_empty()),
            fields.field("remember_me", bool) | pure(False),
        )
    """
    names = _join_names(*parsers)

    async def run(raw: Any, path: FieldPath) -> FormResult:
        results = await gather_in_order(*(p._run(raw, path) for p in parsers))
        acc: FormResult = FormSuccess(())
        for result in results:
            acc = combine_results(acc, result, lambda args, x: (*args, x))
        return acc.map(lambda args: fn(*args))

    return FormParser(run, names)


def record(fn: Callable[..., T], **parsers: FormParser[Any]) -> FormParser[T]:
    """
    Keyword form of ``combine``: ``fn`` is called with one keyword per parser.

    Handy with dataclasses and pydantic models:
        record(Player, name=fields.field("name", str), gold=fields.field("gold", int))
    """
    keys = tuple(parsers)
    return combine(
        lambda *args: fn(**dict(zip(keys, args))),
        *parsers.values(),
    )


def optional(parser: FormParser[T], default: Optional[T] = None) -> FormParser[Optional[T]]:
    """Use ``default`` when ``parser`` hits a parse error (e.g. a missing key)."""
    return parser | pure(default)
