"""Middleware: plain ``Handler -> Handler`` transforms.

A middleware is any callable matching:
    def mw(handler: Handler) -> Handler

Middlewares are composed once, at registration time. The first one listed
is the outermost layer.

Built-in middleware:
    recoverer -- Convert handler exceptions into a 500 response
    request_logger -- Log method and path of every request
"""

from remux.middleware.logger import request_logger
from remux.middleware.protocol import Handler, Middleware, chain
from remux.middleware.recoverer import recoverer

__all__ = [
    "Handler",
    "Middleware",
    "chain",
    "recoverer",
    "request_logger",
]
