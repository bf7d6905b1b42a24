"""
Helper functions for decoding raw JSON values with pydantic.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import ErrorDetails, to_json

from ..context import is_strict
from ..types import Err, Ok

# pydantic error type -> JSON kind the decoder was expecting
_EXPECTED_KINDS = {
    "string_type": "string",
    "int_type": "integer",
    "int_from_float": "integer",
    "int_parsing": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "decimal_type": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "array",
    "tuple_type": "array",
    "set_type": "array",
    "frozen_set_type": "array",
    "iterable_type": "array",
    "dict_type": "object",
    "mapping_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "dataclass_type": "object",
    "none_required": "null",
}


def json_kind(value: Any) -> str:
    """Name of the JSON type ``value`` would be encoded as."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def describe_error(error: ErrorDetails) -> str:
    """Render one pydantic error in the terse JSON-centric style forms use."""
    loc = error.get("loc", ())
    kind = error["type"]

    if kind == "missing" and loc:
        text = f'key "{loc[-1]}" not present'
        loc = loc[:-1]
    elif kind in _EXPECTED_KINDS:
        text = f"expected {_EXPECTED_KINDS[kind]}, encountered {json_kind(error.get('input'))}"
    else:
        text = error["msg"]

    if loc:
        text = f"{text} at {'.'.join(str(part) for part in loc)}"
    return text


class Decoder:
    """
    Decode raw values into ``target`` using a pydantic ``TypeAdapter``.

    Values are validated in JSON mode: ISO date strings, enum values and
    arrays for tuple or set targets are accepted the way they would be when
    reading a request body, while strict mode still rejects ``"1"`` for an
    ``int``.
    """

    __slots__ = ("target", "adapter")

    def __init__(self, target: Any = Any):
        self.target = target
        self.adapter: TypeAdapter[Any] = TypeAdapter(target)

    def __call__(self, value: Any) -> Ok[Any] | Err[str]:
        try:
            return Ok(self.adapter.validate_json(to_json(value), strict=is_strict()))
        except ValidationError as e:
            errors = e.errors()
            return Err(describe_error(errors[0]) if errors else str(e))

    def __repr__(self) -> str:
        return f"Decoder({self.target!r})"
