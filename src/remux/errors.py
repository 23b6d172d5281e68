"""Remux exception hierarchy.

Shared across the routing table, Router, and server bridge so every module
raises and catches the same types.
"""


class RemuxError(Exception):
    """Base for all remux-specific errors."""


class ConfigurationError(RemuxError):
    """Raised when server configuration is invalid."""


# -- Registration --


class RegistrationError(RemuxError, ValueError):
    """A route or fallback registration was rejected.

    The routing table is left untouched. Registration errors are local
    and recoverable: fix the input and register again.
    """


class InvalidMethod(RegistrationError):  # noqa: N818
    """The HTTP method is not one of GET, POST, PUT, PATCH, DELETE."""

    def __init__(self, method: object) -> None:
        super().__init__(f"invalid http method: {method!r}")
        self.method = method


class InvalidPath(RegistrationError):  # noqa: N818
    """An exact path lacks its leading ``/`` or a pattern is not anchored with ``^/`` and ``$``."""

    def __init__(self, path: object) -> None:
        super().__init__(f"invalid path: {path!r}")
        self.path = path


class NilHandler(RegistrationError):  # noqa: N818
    """A handler argument was ``None``."""

    def __init__(self) -> None:
        super().__init__("handler is None")


class AmbiguousMapping(RegistrationError):  # noqa: N818
    """The (method, path) or (method, pattern) pair is already registered."""

    def __init__(self, method: str, spec: object) -> None:
        super().__init__(f"ambiguous mapping: {method} {spec!r} is already registered")
        self.method = method
        self.spec = spec


# -- Dispatch --


class NoParameters(RemuxError, LookupError):  # noqa: N818
    """No path parameters were attached to this request.

    Expected for requests resolved by exact match or by the fallback.
    Callers treat it as "no parameters available", not as a router failure.
    """

    def __init__(self) -> None:
        super().__init__("no params")
