"""Routing table with an exact index and an insertion-ordered pattern index.

The table is a plain data structure. It is not thread-safe on its own:
the ``Router`` that owns it serializes writers and admits concurrent
readers with a ``RWLock``.
"""

import re

from remux.errors import AmbiguousMapping
from remux.middleware.protocol import Handler
from remux.routing.params import Params
from remux.routing.route import Method, PatternEntry, RouteInfo


class RoutingTable:
    """Method-keyed exact and pattern indexes.

    Lookup order is fixed: the exact index wins outright; otherwise patterns
    are tried in registration order and the first match wins.
    """

    __slots__ = ("_exact", "_patterns")

    def __init__(self) -> None:
        # Method -> path -> handler
        self._exact: dict[str, dict[str, Handler]] = {}
        # Method -> [PatternEntry, ...] in registration order
        self._patterns: dict[str, list[PatternEntry]] = {}

    def add_exact(self, method: Method, path: str, handler: Handler) -> None:
        """Insert an exact route. Raises ``AmbiguousMapping`` on a duplicate."""
        handlers = self._exact.setdefault(method, {})
        if path in handlers:
            raise AmbiguousMapping(method, path)
        handlers[path] = handler

    def add_pattern(self, method: Method, pattern: re.Pattern[str], handler: Handler) -> None:
        """Append a pattern route. Raises ``AmbiguousMapping`` on a duplicate.

        Duplicates are detected by identity of the compiled pattern, so two
        separately compiled patterns with the same text are distinct routes.
        """
        entries = self._patterns.setdefault(method, [])
        if any(entry.pattern is pattern for entry in entries):
            raise AmbiguousMapping(method, pattern.pattern)
        entries.append(PatternEntry(pattern=pattern, handler=handler))

    def lookup(self, method: str, path: str) -> tuple[Handler, Params | None] | None:
        """Find the handler for *method* and *path*.

        Returns ``(handler, None)`` for an exact hit, ``(handler, params)``
        for a pattern hit, or ``None`` when nothing matches.
        """
        handlers = self._exact.get(method)
        if handlers is not None:
            handler = handlers.get(path)
            if handler is not None:
                return handler, None

        for entry in self._patterns.get(method, ()):
            match = entry.pattern.fullmatch(path)
            if match is not None:
                return entry.handler, Params.from_match(match)

        return None

    def entries(self) -> list[RouteInfo]:
        """Snapshot of every route: per method, exact routes then patterns."""
        result: list[RouteInfo] = []
        for method in Method:
            for path, handler in self._exact.get(method, {}).items():
                result.append(RouteInfo(method=method, spec=path, handler=handler))
            for entry in self._patterns.get(method, ()):
                result.append(RouteInfo(method=method, spec=entry.pattern, handler=entry.handler))
        return result

    def __len__(self) -> int:
        exact = sum(len(handlers) for handlers in self._exact.values())
        return exact + sum(len(entries) for entries in self._patterns.values())
