"""Handler and Middleware type aliases, and chain composition.

A handler is any callable taking a ``Request`` and returning a
``Response``, either directly or as an awaitable::

    async def hello(request: Request) -> Response:
        return Response("hello")

A middleware is a transform from one handler to another. No base class
required::

    def timing(handler: Handler) -> Handler:
        async def timed(request: Request) -> Response:
            start = time.monotonic()
            response = await invoke(handler, request)
            return response.with_header("X-Time", f"{time.monotonic() - start:.3f}")

        return timed
"""

from collections.abc import Awaitable, Callable, Sequence

from remux.http.request import Request
from remux.http.response import Response

# The terminal handler or any wrapped layer around it
type Handler = Callable[[Request], Awaitable[Response] | Response]

# A behavior-modifying wrapper, applied once at registration time
type Middleware = Callable[[Handler], Handler]


def chain(handler: Handler, middlewares: Sequence[Middleware] = ()) -> Handler:
    """Wrap *handler* so requests pass through *middlewares* in list order.

    The first middleware is the outermost layer: a request reaches
    ``middlewares[0]`` first, then ``middlewares[1]``, and finally
    *handler*. Equivalent to ``m1(m2(...mn(handler)...))``.
    """
    for middleware in reversed(middlewares):
        handler = middleware(handler)
    return handler
