"""
Context manager for parsing configuration (strict decoding, concurrency).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Optional

# Context variables for parsing options
_strict_mode: ContextVar[bool] = ContextVar("forma_strict_mode", default=True)
_concurrent_mode: ContextVar[bool] = ContextVar("forma_concurrent_mode", default=False)


def is_strict() -> bool:
    """Check if strict decoding is currently enabled."""
    return _strict_mode.get()


def is_concurrent() -> bool:
    """Check if sibling branches are currently evaluated concurrently."""
    return _concurrent_mode.get()


@contextmanager
def parsing_context(
    *, strict: Optional[bool] = None, concurrent: Optional[bool] = None
):
    """
    Context manager for parsing configuration.

    Args:
        strict: If True (the default), values are decoded in pydantic strict
               mode, so ``"1"`` is not accepted where an ``int`` is expected.
               Set to False to allow pydantic's lax coercions.
        concurrent: If True, sibling branches are awaited together with
               ``asyncio.gather`` instead of one after another. Results are
               the same either way; only the scheduling of async checkers
               changes.

    Options left as None keep their current value.

    Example:
        from forma import parsing_context, run_form

        with parsing_context(strict=False):
            result = await run_form(signup_form, payload, on_success)
    """
    tokens = []
    if strict is not None:
        tokens.append((_strict_mode, _strict_mode.set(strict)))
    if concurrent is not None:
        tokens.append((_concurrent_mode, _concurrent_mode.set(concurrent)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
