"""``remux run``: serve a router with uvicorn.

Host and port come from the command line, falling back to the
``HOST``/``PORT`` environment variables, then to ``0.0.0.0:9999``.
"""

import argparse
import logging
import sys
from dataclasses import replace

from remux.cli._routes import load_router
from remux.config import ServerConfig
from remux.errors import ConfigurationError

logger = logging.getLogger("remux.server")


def run_server(args: argparse.Namespace) -> None:
    """Load ``args.app`` and serve it until interrupted."""
    try:
        config = ServerConfig.from_env()
        router = load_router(args.app)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.host is not None:
        config = replace(config, host=args.host)
    if args.port is not None:
        config = replace(config, port=args.port)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    import uvicorn

    logger.info("Serving %s on %s with %d routes", args.app, config.address, len(router))
    uvicorn.run(router, host=config.host, port=config.port, log_level=config.log_level)
