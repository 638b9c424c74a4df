"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation, read once
at startup, shared read-only by every request.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from burrow.errors import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})
_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

# field name -> environment variable
_ENV_VARS: dict[str, str] = {
    "host": "BURROW_HOST",
    "port": "PORT",
    "root": "BURROW_ROOT",
    "read_only": "BURROW_READ_ONLY",
    "debug": "BURROW_DEBUG",
    "workers": "BURROW_WORKERS",
    "log_level": "BURROW_LOG_LEVEL",
}


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(port=3000, root="./site", read_only=True)

    Or read the process environment once at startup::

        config = ServerConfig.from_env()
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False

    # Served root (relative paths resolve against the working directory)
    root: str | Path = "public"

    # GET-only deployment: PUT and DELETE answer 405
    read_only: bool = False

    # Production
    workers: int = 0  # 0 = auto-detect from CPU count
    log_level: str = "info"
    max_connections: int = 1000
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.workers < 0:
            msg = f"workers must be >= 0, got {self.workers}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> ServerConfig:
        """Build a config from environment variables.

        Reads ``PORT``, ``BURROW_HOST``, ``BURROW_ROOT``,
        ``BURROW_READ_ONLY``, ``BURROW_DEBUG``, ``BURROW_WORKERS`` and
        ``BURROW_LOG_LEVEL``. Keyword *overrides* that are not ``None``
        win over the environment.

        Raises:
            ConfigurationError: If a variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        types = {f.name: f.type for f in fields(cls)}
        values: dict[str, Any] = {}

        for name, var in _ENV_VARS.items():
            raw = env.get(var)
            if raw is None:
                continue
            values[name] = _parse(var, raw.strip(), types[name])

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _parse(var: str, raw: str, annotation: Any) -> Any:
    """Convert one environment string to the field's type."""
    if annotation in (bool, "bool"):
        lowered = raw.lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        msg = f"{var} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}"
        raise ConfigurationError(msg)
    if annotation in (int, "int"):
        try:
            return int(raw)
        except ValueError:
            msg = f"{var} must be an integer, got {raw!r}"
            raise ConfigurationError(msg) from None
    return raw
