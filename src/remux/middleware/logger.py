"""Request logging middleware."""

import logging

from remux._internal.invoke import invoke
from remux.http.request import Request
from remux.http.response import Response
from remux.middleware.protocol import Handler

logger = logging.getLogger("remux.request")


def request_logger(handler: Handler) -> Handler:
    """Log every request's method and path before passing it on."""

    async def log_request(request: Request) -> Response:
        logger.info("new request: %s %s", request.method, request.path)
        return await invoke(handler, request)

    return log_request
