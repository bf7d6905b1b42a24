"""
Response projection: turn a form result into the JSON shape sent to clients.

    {
      "parse_error": {"field": "username", "message": "..."} | null,
      "field_errors": {"password": "This field cannot be empty."},
      "result": <whatever the second pass returned> | null
    }
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python

from .result import FormParseError, FormResult, FormSuccess, FormValidationError


class ParseErrorInfo(BaseModel):
    """Where decoding broke, and why."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class Response(BaseModel):
    """Exactly one of the three slots is populated; the others stay empty."""

    model_config = ConfigDict(frozen=True)

    parse_error: Optional[ParseErrorInfo] = None
    field_errors: dict[str, Any] = Field(default_factory=dict)
    result: Any = None

    @property
    def ok(self) -> bool:
        return self.parse_error is None and not self.field_errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()


def to_response(result: FormResult) -> Response:
    """Project a form result onto the three-slot ``Response``."""
    match result:
        case FormParseError(path=path, message=message):
            return Response(
                parse_error=ParseErrorInfo(field=path.render(), message=message)
            )
        case FormValidationError(errors=errors):
            return Response(field_errors=errors.to_dict())
        case FormSuccess(value=value):
            return Response(result=to_jsonable_python(value))

    raise TypeError(f"Expected a form result, got {type(result).__name__}")
