"""Invoke helper: call sync or async handlers uniformly.

Route handlers and not-found handlers can be ``def`` or ``async def``.

Usage::

    from kitty._internal.invoke import invoke

    result = await invoke(handler, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
