"""
Field paths: where in a nested form a value (or an error) lives.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldPath:
    """An immutable sequence of field names, e.g. ``player.name``."""

    segments: tuple[str, ...] = ()

    @classmethod
    def of(cls, *segments: str) -> FieldPath:
        return cls(tuple(segments))

    def extend(self, segment: str) -> FieldPath:
        """Return a new path with ``segment`` appended."""
        return FieldPath((*self.segments, segment))

    def render(self) -> str:
        """Dotted representation; the root path renders as an empty string."""
        return ".".join(self.segments)

    @property
    def is_root(self) -> bool:
        return not self.segments

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __str__(self) -> str:
        return self.render()


ROOT = FieldPath()
