"""Last-resort error handling for the ASGI bridge.

Routes wrapped in ``recoverer`` never get here. For everything else, an
exception escaping the handler is logged and turned into a bare ``500``
so the server always has a response to send.
"""

import logging

from remux.http.request import Request
from remux.http.response import Response

logger = logging.getLogger("remux.server")


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log *exc* and return a generic ``500`` response."""
    logger.error(
        "Unhandled exception in %s %s",
        request.method,
        request.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return Response(body="Internal Server Error", status=500)
