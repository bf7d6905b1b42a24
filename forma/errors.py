"""
Exceptions raised for mistakes in form definitions.

These are programming errors, not user input errors: bad input is always
reported through form results, never by raising.
"""


class FormaError(Exception):
    """Base class for all forma exceptions."""


class UnknownFieldError(FormaError, KeyError):
    """A field name outside the form's ``FieldNames`` was referenced."""

    def __init__(self, name: str, allowed: tuple[str, ...]):
        self.name = name
        self.allowed = allowed
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"The name {self.name!r} is not in the given set {list(self.allowed)}. "
            "Either it's a typo or you need to add it to the set first."
        )


class FormDefinitionError(FormaError, ValueError):
    """A form was assembled incorrectly (bad name set, mixed name sets)."""
