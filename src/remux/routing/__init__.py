"""Routing: exact and pattern routes over a concurrency-safe table.

Exact routes are looked up by path; pattern routes are compiled regular
expressions tried in registration order. Routes may be added at any time,
including while requests are being served.
"""

from remux.routing.params import Params, get_params
from remux.routing.route import METHODS, Method, RouteInfo
from remux.routing.router import Router, not_found

__all__ = [
    "METHODS",
    "Method",
    "Params",
    "RouteInfo",
    "Router",
    "get_params",
    "not_found",
]
