"""
forma - validation of forms submitted as JSON.

Forms are described with applicative parser combinators. Parsing stops at
the first malformed piece of input, but validation errors from every field
are collected so the user sees all of them at once. A second-pass callback
can then run checks that involve several fields.

Usage:
    from forma import FieldNames, Err, Ok, combine, not_empty, run_form, to_response

    SIGNUP = FieldNames("username", "password")

    signup_form = combine(
        Signup,
        SIGNUP.field("username", str, not_empty()),
        SIGNUP.field("password", str, not_empty()),
    )

    result = await run_form(signup_form, payload, lambda s: Ok(s.username))
    body = to_response(result).to_json()
"""

from .checkers import (
    between,
    chain,
    length_between,
    matches,
    max_length,
    min_length,
    not_empty,
    one_of,
    predicate,
)
from .context import is_concurrent, is_strict, parsing_context
from .errors import FormaError, FormDefinitionError, UnknownFieldError
from .field_errors import FieldErrors
from .fields import FieldNames
from .parser import FormParser, combine, empty, optional, pure, record, value
from .path import FieldPath
from .response import ParseErrorInfo, Response, to_response
from .result import (
    FormParseError,
    FormResult,
    FormSuccess,
    FormValidationError,
    choose_results,
    combine_results,
)
from .runner import run_form, run_form_json, run_form_sync
from .types import Err, Ok

__all__ = [
    # Result types
    "Ok",
    "Err",
    "FormParseError",
    "FormValidationError",
    "FormSuccess",
    "FormResult",
    "combine_results",
    "choose_results",
    # Paths and errors
    "FieldPath",
    "FieldErrors",
    "FieldNames",
    # Parsers
    "FormParser",
    "value",
    "pure",
    "empty",
    "combine",
    "record",
    "optional",
    # Checkers
    "not_empty",
    "length_between",
    "min_length",
    "max_length",
    "one_of",
    "matches",
    "between",
    "predicate",
    "chain",
    # Running
    "run_form",
    "run_form_sync",
    "run_form_json",
    "Response",
    "ParseErrorInfo",
    "to_response",
    # Configuration
    "parsing_context",
    "is_strict",
    "is_concurrent",
    # Exceptions
    "FormaError",
    "UnknownFieldError",
    "FormDefinitionError",
]
