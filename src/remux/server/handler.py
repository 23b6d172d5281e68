"""ASGI handler: translates ASGI scope/messages to remux types.

The only component that touches raw ASGI directly. Converts scope dicts
to Request objects, dispatches through the router, and sends the Response
back through ASGI send().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from remux._internal.asgi import Receive, Scope, Send
from remux.http.request import Request
from remux.http.response import Response
from remux.server.errors import handle_internal_error
from remux.server.sender import send_response

if TYPE_CHECKING:
    from remux.routing.router import Router


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
) -> None:
    """Process a single HTTP request through the router."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(dict(scope))

    try:
        response = await router.dispatch(request)
        if not isinstance(response, Response):
            msg = f"Handler for {request.method} {request.path} returned {type(response).__name__}, not Response"
            raise TypeError(msg)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send)


async def handle_lifespan(receive: Receive, send: Send) -> None:
    """Acknowledge ASGI lifespan startup and shutdown.

    The router has no startup or shutdown work of its own.
    """
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
