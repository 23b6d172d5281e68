"""``remux routes``: list registered routes.

Prints every route with its method, path or pattern, kind, and handler.
Patterns are listed in the order they are tried.
"""

import argparse
import importlib
import re
import sys

from remux.errors import ConfigurationError
from remux.routing.router import Router


def load_router(target: str) -> Router:
    """Load the Router named by ``"module:attribute"``.

    The attribute defaults to ``router``. It may be a Router or a
    zero-argument factory returning one; a factory is called once per load.
    Every failure (missing module or attribute, a factory that raises or
    returns something else) is reported as ``ConfigurationError``.
    """
    module_path, _, attr_name = target.partition(":")
    attr_name = attr_name or "router"

    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        msg = f"cannot import {module_path!r}: {exc}"
        raise ConfigurationError(msg) from exc
    try:
        obj = getattr(module, attr_name)
    except AttributeError:
        msg = f"module {module_path!r} has no attribute {attr_name!r}"
        raise ConfigurationError(msg) from None

    if isinstance(obj, Router):
        return obj
    if not callable(obj):
        msg = f"{target!r} resolved to {type(obj).__name__}, expected a remux.Router or a factory"
        raise ConfigurationError(msg)

    try:
        built = obj()
    except Exception as exc:
        msg = f"router factory {target!r} failed: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(built, Router):
        msg = f"router factory {target!r} returned {type(built).__name__}, expected a remux.Router"
        raise ConfigurationError(msg)
    return built


def run_routes(args: argparse.Namespace) -> None:
    """Print the routing table of the router named by ``args.app``."""
    try:
        router = load_router(args.app)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        path = route.spec.pattern if isinstance(route.spec, re.Pattern) else route.spec
        kind = "pattern" if route.is_pattern else "exact"
        handler_name = getattr(route.handler, "__name__", repr(route.handler))
        rows.append((str(route.method), str(path), kind, handler_name))

    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
    fmt = f"{{:<6}}  {{:<{max_path}}}  {{:<7}}  {{}}"
    print(fmt.format("METHOD", "PATH", "KIND", "HANDLER"))
    sep_len = 6 + max_path + 7 + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
