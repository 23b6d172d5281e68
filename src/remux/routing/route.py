"""Route vocabulary: methods, table entries, and introspection records."""

import re
from dataclasses import dataclass
from enum import StrEnum

from remux.middleware.protocol import Handler


class Method(StrEnum):
    """HTTP methods a route may be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


METHODS: frozenset[str] = frozenset(Method)


@dataclass(frozen=True, slots=True)
class PatternEntry:
    """A compiled pattern and the composed handler it dispatches to."""

    pattern: re.Pattern[str]
    handler: Handler


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """Read-only description of one registered route."""

    method: Method
    spec: str | re.Pattern[str]
    handler: Handler

    @property
    def is_pattern(self) -> bool:
        return isinstance(self.spec, re.Pattern)

