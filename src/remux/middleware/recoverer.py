"""Recovery boundary middleware.

Converts an exception raised anywhere inside the wrapped handler into a
``500`` response whose body describes the failure. Register it as the
first (outermost) middleware so it covers every layer below it::

    router.register_exact("GET", "/report", report, recoverer, request_logger)

Only ``Exception`` subclasses are caught. ``BaseException`` such as
``asyncio.CancelledError`` and ``KeyboardInterrupt`` keep propagating.
"""

import logging

from remux._internal.invoke import invoke
from remux.http.request import Request
from remux.http.response import Response
from remux.middleware.protocol import Handler

logger = logging.getLogger("remux.server")


def recoverer(handler: Handler) -> Handler:
    """Wrap *handler* in a recovery boundary."""

    async def recover(request: Request) -> Response:
        try:
            return await invoke(handler, request)
        except Exception as exc:
            logger.exception("Recovered from handler failure: %s %s", request.method, request.path)
            return Response(body=str(exc) or type(exc).__name__, status=500)

    return recover
