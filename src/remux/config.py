"""Server configuration.

ServerConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups. The router itself needs no configuration; this
covers process bootstrap only.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from remux.errors import ConfigurationError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9999
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Bind address and log level for ``remux run``.

    Override what you need::

        config = ServerConfig(port=3000, log_level="debug")
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        """Build a config from ``HOST``, ``PORT`` and ``LOG_LEVEL``.

        Unset variables keep their defaults. Raises ``ConfigurationError``
        when ``PORT`` is not an integer in 0-65535 or ``LOG_LEVEL`` is not
        one of ``LOG_LEVELS`` (case-insensitive).
        """
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            msg = f"PORT must be an integer, got {raw_port!r}"
            raise ConfigurationError(msg) from None
        if not 0 <= port <= 65535:
            msg = f"PORT out of range: {port}"
            raise ConfigurationError(msg)
        log_level = env.get("LOG_LEVEL", "info").lower()
        if log_level not in LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            raise ConfigurationError(msg)
        return cls(
            host=env.get("HOST", DEFAULT_HOST),
            port=port,
            log_level=log_level,
        )

    @property
    def address(self) -> str:
        """``host:port``, with IPv6 hosts in brackets."""
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"
