"""Remux CLI: serve a router and inspect its routing table.

Entry point registered as ``remux`` in ``pyproject.toml``::

    [project.scripts]
    remux = "remux.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``remux`` command."""
    parser = argparse.ArgumentParser(
        prog="remux",
        description="Remux: exact and pattern request routing for ASGI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- remux run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a router with uvicorn")
    run_parser.add_argument("app", help="Import string (e.g. myapp:router)")
    run_parser.add_argument("--host", default=None, help="Bind host address (default: $HOST)")
    run_parser.add_argument(
        "--port", type=int, default=None, help="Bind port number (default: $PORT)"
    )

    # -- remux routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:router)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from remux.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from remux.cli._routes import run_routes

        run_routes(args)
