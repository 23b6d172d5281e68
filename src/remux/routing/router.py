"""Router: registration API, dispatch, and the ASGI entry point.

The Router owns a ``RoutingTable`` and a fallback handler, both guarded by
one reader/writer lock. Dispatches share the lock; registrations and
fallback replacement take it exclusively. The lock is released before any
handler runs, so a handler may itself register routes or swap the fallback.
"""

import logging
import re
from collections.abc import Callable

from remux._internal.asgi import Receive, Scope, Send
from remux._internal.invoke import invoke
from remux._internal.rwlock import RWLock
from remux.errors import InvalidMethod, InvalidPath, NilHandler
from remux.http.request import Request
from remux.http.response import Response
from remux.middleware.protocol import Handler, Middleware, chain
from remux.routing.params import PARAMS_KEY, Params
from remux.routing.route import METHODS, Method, RouteInfo
from remux.routing.table import RoutingTable

logger = logging.getLogger("remux.routing")


async def not_found(request: Request) -> Response:
    """Default fallback: ``404`` with an empty body."""
    return Response(status=404)


def _validate_method(method: str) -> Method:
    if not isinstance(method, str) or method not in METHODS:
        raise InvalidMethod(method)
    return Method(method)


def _validate_handler(handler: Handler | None) -> Handler:
    if handler is None:
        raise NilHandler
    return handler


class Router:
    """Exact-then-pattern request router.

    Usage::

        router = Router()
        router.register_exact("GET", "/health", health)
        router.register_pattern("GET", re.compile(r"^/users/(?P<id>\\d+)$"), user, recoverer)

    The router is itself an ASGI application; hand it to any ASGI server.
    """

    __slots__ = ("_fallback", "_lock", "_table")

    def __init__(self, fallback: Handler | None = None) -> None:
        self._lock = RWLock()
        self._table = RoutingTable()
        self._fallback: Handler = not_found if fallback is None else fallback

    # -- Registration --

    def register_exact(
        self,
        method: str,
        path: str,
        handler: Handler,
        *middlewares: Middleware,
    ) -> None:
        """Register *handler* for requests whose path equals *path*.

        Raises:
            InvalidMethod: *method* is not GET, POST, PUT, PATCH or DELETE.
            InvalidPath: *path* does not start with ``/``.
            NilHandler: *handler* is ``None``.
            AmbiguousMapping: (*method*, *path*) is already registered.
        """
        checked = _validate_method(method)
        if not isinstance(path, str) or not path.startswith("/"):
            raise InvalidPath(path)
        composed = chain(_validate_handler(handler), middlewares)

        with self._lock.write():
            self._table.add_exact(checked, path, composed)
        logger.debug("Registered %s %s", checked, path)

    def register_pattern(
        self,
        method: str,
        pattern: re.Pattern[str],
        handler: Handler,
        *middlewares: Middleware,
    ) -> None:
        """Register *handler* for requests whose path matches *pattern*.

        *pattern* must be compiled and anchored: its source starts with
        ``^/`` and ends with ``$``. Patterns are tried in registration
        order after exact routes miss; the first match wins.

        The whole path must match (``Pattern.fullmatch``). With a top-level
        alternation such as ``^/a|/b$`` that is stricter than a search:
        ``/a/x`` does not match. Group the alternation, ``^/(?:a|b)$``, to
        anchor both branches explicitly.

        Raises:
            InvalidMethod: *method* is not GET, POST, PUT, PATCH or DELETE.
            InvalidPath: *pattern* is not a compiled, anchored pattern.
            NilHandler: *handler* is ``None``.
            AmbiguousMapping: this compiled pattern object is already
                registered for *method*.
        """
        checked = _validate_method(method)
        if not isinstance(pattern, re.Pattern) or not isinstance(pattern.pattern, str):
            raise InvalidPath(pattern)
        if not pattern.pattern.startswith("^/") or not pattern.pattern.endswith("$"):
            raise InvalidPath(pattern.pattern)
        composed = chain(_validate_handler(handler), middlewares)

        with self._lock.write():
            self._table.add_pattern(checked, pattern, composed)
        logger.debug("Registered %s %s", checked, pattern.pattern)

    def route(
        self,
        method: str,
        spec: str | re.Pattern[str],
        *middlewares: Middleware,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of ``register_exact`` / ``register_pattern``.

        A string *spec* registers an exact route, a compiled pattern
        registers a pattern route. The decorated function is returned
        unchanged::

            @router.route("GET", "/")
            async def index(request: Request) -> Response:
                return Response("home")
        """

        def decorator(handler: Handler) -> Handler:
            if isinstance(spec, re.Pattern):
                self.register_pattern(method, spec, handler, *middlewares)
            else:
                self.register_exact(method, spec, handler, *middlewares)
            return handler

        return decorator

    def set_fallback(self, handler: Handler) -> None:
        """Replace the handler used when no route matches.

        Raises ``NilHandler`` if *handler* is ``None``.
        """
        checked = _validate_handler(handler)
        with self._lock.write():
            self._fallback = checked

    # -- Introspection --

    @property
    def routes(self) -> list[RouteInfo]:
        """Snapshot of every registered route."""
        with self._lock.read():
            return self._table.entries()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._table)

    # -- Dispatch --

    def resolve(self, method: str, path: str) -> tuple[Handler, Params | None]:
        """Select the handler for *method* and *path*.

        Exact routes always win. Otherwise the first pattern, in
        registration order, that matches *path* wins and its captures are
        returned. Otherwise the fallback is returned. Never raises.
        """
        with self._lock.read():
            found = self._table.lookup(method, path)
            if found is None:
                return self._fallback, None
            return found

    async def dispatch(self, request: Request) -> Response:
        """Resolve *request* and run the selected handler.

        Captured parameters are attached to ``request.context`` before the
        handler runs. Parameters left by an earlier dispatch of the same
        request are removed when this one resolves without a pattern.
        The routing lock is not held while the handler runs.
        Exceptions raised by the handler propagate; wrap routes with
        ``recoverer`` to turn them into responses.
        """
        handler, params = self.resolve(request.method, request.path)
        if params is not None:
            request.context[PARAMS_KEY] = params
        else:
            # Captures belong to a single dispatch
            request.context.pop(PARAMS_KEY, None)
        return await invoke(handler, request)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        from remux.server.handler import handle_lifespan, handle_request

        if scope["type"] == "lifespan":
            await handle_lifespan(receive, send)
            return
        await handle_request(scope, receive, send, router=self)
