"""Immutable HTTP request.

Frozen metadata plus one explicit, mutable per-request ``context`` slot.
The router threads the request through every call, so anything attached
to ``context`` (path parameters, middleware state) travels with it and is
discarded when the request is done. No thread-locals, no ContextVars.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from remux.http.headers import Headers

if TYPE_CHECKING:
    from remux.routing.params import Params


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` and ``path`` drive routing. ``context`` is a plain dict scoped
    to this request: the field reference is frozen, its contents are not.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None
    context: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def params(self) -> Params | None:
        """Path parameters attached by a pattern match, or ``None``."""
        from remux.routing.params import PARAMS_KEY

        return self.context.get(PARAMS_KEY)

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers.from_asgi(scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
