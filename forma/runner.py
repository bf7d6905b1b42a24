"""
Running forms: parse, validate fields, then run the second-pass callback.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Union

from pydantic_core import from_json

from .field_errors import FieldErrors
from .lib.invoke_helpers import invoke
from .parser import FormParser
from .path import ROOT
from .response import Response, to_response
from .result import FormParseError, FormResult, FormSuccess, FormValidationError
from .types import Err, Ok

logger = logging.getLogger("forma.runner")

SecondPass = Callable[
    [Any], Union[Ok[Any], Err[FieldErrors], Awaitable[Union[Ok[Any], Err[FieldErrors]]]]
]


async def run_form(
    parser: FormParser[Any], value: Any, on_success: SecondPass
) -> FormResult:
    """
    Run ``parser`` on ``value`` and hand a successful parse to ``on_success``.

    The callback only runs when every field decoded and passed its checks.
    It returns ``Ok(result)`` to accept the submission, or
    ``Err(field_errors)`` to reject it with errors that depend on several
    fields at once (or on the outside world, e.g. a taken username).

    Args:
        parser: The form parser to run
        value: Decoded JSON input
        on_success: Second-pass callback, sync or async

    Returns:
        FormParseError, FormValidationError or FormSuccess
    """
    result = await parser.parse(value, ROOT)

    if isinstance(result, FormParseError):
        logger.debug("Parse error at %r: %s", result.path.render(), result.message)
        return result
    if isinstance(result, FormValidationError):
        logger.debug("Validation failed for %d field(s)", len(result.errors))
        return result

    outcome = await invoke(on_success, result.value)
    if isinstance(outcome, Ok):
        logger.debug("Form accepted")
        return FormSuccess(outcome.value)
    if isinstance(outcome, Err):
        if not isinstance(outcome.error, FieldErrors):
            raise TypeError(
                f"Second-pass Err must carry FieldErrors, got {type(outcome.error).__name__}"
            )
        logger.debug("Second pass rejected %d field(s)", len(outcome.error))
        return FormValidationError(outcome.error)
    raise TypeError(
        f"Second-pass callback must return Ok or Err, got {type(outcome).__name__}"
    )


def run_form_sync(
    parser: FormParser[Any], value: Any, on_success: SecondPass
) -> FormResult:
    """Blocking ``run_form`` for code without a running event loop."""
    return asyncio.run(run_form(parser, value, on_success))


async def run_form_json(
    parser: FormParser[Any], raw: str | bytes | bytearray, on_success: SecondPass
) -> Response:
    """
    Decode a raw JSON request body, run the form, and build the response.

    A body that is not valid JSON is reported as a parse error at the root.
    """
    try:
        document = from_json(raw)
    except ValueError as e:
        logger.debug("Request body is not valid JSON: %s", e)
        return to_response(FormParseError(ROOT, str(e)))

    return to_response(await run_form(parser, document, on_success))
