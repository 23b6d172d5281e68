"""Remux: exact and pattern request routing for ASGI.

Exact routes win; otherwise compiled patterns are tried in registration
order and the first match wins. Middleware is composed once, at
registration time. Routes can be added while requests are being served.

Basic usage::

    import re

    from remux import Request, Response, Router, get_params, recoverer

    router = Router()

    async def user(request: Request) -> Response:
        return Response(f"user {get_params(request)['id']}")

    router.register_pattern("GET", re.compile(r"^/users/(?P<id>\\d+)$"), user, recoverer)

Serve it with any ASGI server, or ``remux run myapp:router``.
"""

__version__ = "0.1.0"
__all__ = [
    "METHODS",
    "AmbiguousMapping",
    "ConfigurationError",
    "Handler",
    "Headers",
    "InvalidMethod",
    "InvalidPath",
    "Method",
    "Middleware",
    "NilHandler",
    "NoParameters",
    "Params",
    "RegistrationError",
    "RemuxError",
    "Request",
    "Response",
    "RouteInfo",
    "Router",
    "ServerConfig",
    "chain",
    "get_params",
    "recoverer",
    "request_logger",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import remux`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from remux.routing.router import Router

        return Router

    if name in ("METHODS", "Method", "RouteInfo"):
        from remux.routing import route as _route

        return getattr(_route, name)

    if name in ("Params", "get_params"):
        from remux.routing import params as _params

        return getattr(_params, name)

    if name == "Request":
        from remux.http.request import Request

        return Request

    if name == "Response":
        from remux.http.response import Response

        return Response

    if name == "Headers":
        from remux.http.headers import Headers

        return Headers

    if name in ("Handler", "Middleware", "chain"):
        from remux.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "recoverer":
        from remux.middleware.recoverer import recoverer

        return recoverer

    if name == "request_logger":
        from remux.middleware.logger import request_logger

        return request_logger

    if name == "ServerConfig":
        from remux.config import ServerConfig

        return ServerConfig

    if name in (
        "AmbiguousMapping",
        "ConfigurationError",
        "InvalidMethod",
        "InvalidPath",
        "NilHandler",
        "NoParameters",
        "RegistrationError",
        "RemuxError",
    ):
        from remux import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
