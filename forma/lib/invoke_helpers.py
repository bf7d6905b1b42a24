"""
Helpers for calling user-supplied checkers and callbacks.

Checkers and second-pass callbacks can be ``def`` or ``async def``; the
sync/async check lives here and nowhere else.
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable

from ..context import is_concurrent


async def invoke(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call ``fn`` and await the result if it is awaitable."""
    result = fn(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


async def gather_in_order(*awaitables: Awaitable[Any]) -> list[Any]:
    """
    Await every branch and return the results in argument order.

    Branches run one after another unless concurrent parsing is enabled,
    in which case they are gathered. No branch is cancelled because a
    sibling failed.
    """
    if is_concurrent():
        return list(await asyncio.gather(*awaitables))
    results = []
    pending = list(awaitables)
    try:
        while pending:
            results.append(await pending.pop(0))
    finally:
        for aw in pending:
            if inspect.iscoroutine(aw):
                aw.close()
    return results
