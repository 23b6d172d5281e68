"""Invoke helper: call sync or async handlers uniformly.

Remux handlers can be ``def`` or ``async def``, and so can the handlers a
middleware wraps. Any code that calls a user-provided handler goes through
``invoke`` so the sync/async check lives in exactly one place.

Plain ``def`` handlers run in an anyio worker thread so a blocking handler
never stalls the event loop. If a sync callable hands back an awaitable
(a sync middleware wrapping an async handler, say), it is awaited on the
loop.

Usage::

    from remux._internal.invoke import invoke

    response = await invoke(handler, request)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine."""
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)
    result = await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
