"""
FieldNames - the set of legal field names for a form.

Every combinator that refers to a field by name is created through a
``FieldNames`` instance, and the name is checked against the set when the
parser is built. A typo in a form definition therefore fails at import time
instead of silently never matching any input.

    LOGIN = FieldNames("username", "password", "remember_me")

    login_form = combine(
        LoginForm,
        LOGIN.field("username", str, not_empty()),
        LOGIN.field("password", str, not_empty()),
        LOGIN.field_("remember_me", bool) | pure(True),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, TypeVar

from .errors import FormDefinitionError, UnknownFieldError
from .field_errors import FieldErrors
from .lib.decode_helpers import json_kind
from .lib.invoke_helpers import invoke
from .parser import FormParser, value
from .path import FieldPath
from .result import (
    FormParseError,
    FormResult,
    FormSuccess,
    FormValidationError,
)
from .types import Checker, Err, Ok

logger = logging.getLogger("forma.fields")

T = TypeVar("T")


class FieldNames:
    """An ordered, duplicate-free allow-list of field names."""

    __slots__ = ("names", "_lookup")

    def __init__(self, *names: str):
        if not names:
            raise FormDefinitionError("FieldNames needs at least one name")
        for name in names:
            if not isinstance(name, str) or not name:
                raise FormDefinitionError(f"Field names must be non-empty strings, got {name!r}")
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise FormDefinitionError(f"Duplicate field names: {dupes}")
        self.names: tuple[str, ...] = names
        self._lookup = frozenset(names)

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldNames):
            return self._lookup == other._lookup
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._lookup)

    def __repr__(self) -> str:
        return f"FieldNames{self.names!r}"

    def pick(self, name: str) -> str:
        """
        Return ``name`` if it belongs to the set, raise ``UnknownFieldError`` otherwise.

        Use it wherever a field name is needed outside a parser, e.g. in
        templates or second-pass validation callbacks.
        """
        if name not in self._lookup:
            raise UnknownFieldError(name, self.names)
        return name

    def path(self, *names: str) -> FieldPath:
        """A validated ``FieldPath`` made of names from this set."""
        return FieldPath(tuple(self.pick(name) for name in names))

    def error(self, path: str | Sequence[str], error: Any) -> FieldErrors:
        """
        Build a single field error, typically from a second-pass callback.

        Usage:
            SIGNUP.error("username", "This username is taken.")
            PLAYER.error(["player", "gold"], "Not enough gold.")
        """
        names = (path,) if isinstance(path, str) else tuple(path)
        if not names:
            raise FormDefinitionError("A field error needs at least one field name")
        return FieldErrors.singleton(self.path(*names), error)

    def sub_parser(self, name: str, parser: FormParser[T]) -> FormParser[T]:
        """
        Run ``parser`` on the object stored under key ``name``.

        The current value must be an object containing ``name``; otherwise
        the result is a parse error at the extended path. Errors produced by
        ``parser`` already carry full paths, so its result is passed through
        untouched.
        """
        name = self.pick(name)
        self._adopt(parser)

        async def run(raw: Any, path: FieldPath) -> FormResult:
            inner_path = path.extend(name)
            if not isinstance(raw, Mapping):
                return FormParseError(
                    inner_path, f"expected object, encountered {json_kind(raw)}"
                )
            if name not in raw:
                return FormParseError(inner_path, f'key "{name}" not present')
            return await parser.parse(raw[name], inner_path)

        return FormParser(run, self)

    def field_(self, name: str, type_: Any = Any) -> FormParser[Any]:
        """A field decoded as ``type_`` with no further checks."""
        return self.sub_parser(name, value(type_))

    def field(
        self, name: str, type_: Any = Any, check: Optional[Checker] = None
    ) -> FormParser[Any]:
        """
        A field decoded as ``type_`` and then validated by ``check``.

        ``check`` receives the decoded value and returns ``Ok(result)`` or
        ``Err(payload)`` (or an awaitable of either). An ``Err`` becomes a
        validation error on this field; other fields keep being checked.
        """
        parser = self.field_(name, type_)
        if check is None:
            return parser
        return self.with_check(name, check, parser)

    def with_check(
        self, name: str, check: Checker, parser: FormParser[Any]
    ) -> FormParser[Any]:
        """
        Validate the result of ``parser`` as a whole, reporting under ``name``.

        Useful for checks spanning several fields:
            SIGNUP.with_check(
                "password_confirmation",
                passwords_match,
                combine(
                    lambda a, b: (a, b),
                    SIGNUP.field("password", str, not_empty()),
                    SIGNUP.field("password_confirmation", str, not_empty()),
                ),
            )
        """
        name = self.pick(name)
        self._adopt(parser)

        async def run(raw: Any, path: FieldPath) -> FormResult:
            result = await parser.parse(raw, path)
            if not isinstance(result, FormSuccess):
                return result

            outcome = await invoke(check, result.value)
            if isinstance(outcome, Err):
                error_path = path.extend(name)
                logger.debug("Check failed for field %s", error_path)
                return FormValidationError(
                    FieldErrors.singleton(error_path, outcome.error)
                )
            if isinstance(outcome, Ok):
                return FormSuccess(outcome.value)
            raise TypeError(
                f"Checker for {name!r} must return Ok or Err, got {type(outcome).__name__}"
            )

        return FormParser(run, self)

    def _adopt(self, parser: FormParser[Any]) -> None:
        if parser.names is not None and parser.names != self:
            raise FormDefinitionError(
                f"Parser over {parser.names!r} cannot be used in a form over {self!r}"
            )
