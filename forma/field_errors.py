"""
Per-field validation errors.

A ``FieldErrors`` value maps non-empty field paths to JSON-compatible error
payloads. There is no empty ``FieldErrors``: one is created by
``FieldErrors.singleton`` at the point a check fails and only grows through
``merge``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic_core import to_jsonable_python

from .path import FieldPath


class FieldErrors(Mapping[FieldPath, Any]):
    """Immutable mapping of ``FieldPath`` -> error payload."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[FieldPath, Any]):
        if not entries:
            raise ValueError("FieldErrors cannot be empty")
        for path in entries:
            if not isinstance(path, FieldPath) or path.is_root:
                raise ValueError(f"Field error path must be non-empty, got {path!r}")
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def singleton(cls, path: FieldPath, error: Any) -> FieldErrors:
        """
        Build a one-entry set.

        The payload is converted to JSON-compatible data right away, so a
        payload that cannot be serialized fails where it was produced.
        """
        return cls({path: to_jsonable_python(error)})

    def merge(self, other: FieldErrors) -> FieldErrors:
        """
        Union of both sets.

        On a key collision the entry from ``self`` (the left operand) wins.
        Iteration order is insertion order with the left set first.
        ``to_dict`` sorts by path.
        """
        merged = dict(self._entries)
        for path, error in other.items():
            merged.setdefault(path, error)
        return FieldErrors(merged)

    def __add__(self, other: object) -> FieldErrors:
        if not isinstance(other, FieldErrors):
            return NotImplemented
        return self.merge(other)

    def __getitem__(self, path: FieldPath) -> Any:
        return self._entries[path]

    def __iter__(self) -> Iterator[FieldPath]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldErrors):
            return dict(self._entries) == dict(other._entries)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries))

    def __repr__(self) -> str:
        return f"FieldErrors({self.to_dict()!r})"

    def to_dict(self) -> dict[str, Any]:
        """Rendered path -> payload in ascending path order, ready for JSON encoding."""
        return {
            path.render(): self._entries[path]
            for path in sorted(self._entries, key=lambda p: p.segments)
        }
