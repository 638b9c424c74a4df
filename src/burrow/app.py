"""Burrow application class.

A ``FileServer`` is an ASGI 3.0 callable bound to one served root.
Configuration is fixed at construction; nothing about the server
changes while it runs.
"""

import logging
from pathlib import Path

from burrow._internal.asgi import Receive, Scope, Send
from burrow.config import ServerConfig
from burrow.errors import ConfigurationError
from burrow.server.handler import handle_request

logger = logging.getLogger("burrow.server")


class FileServer:
    """Serve one directory tree over HTTP: GET reads, PUT writes, DELETE removes.

    Usage::

        from burrow import FileServer, ServerConfig

        app = FileServer(ServerConfig(root="./public", port=8080))
        app.run()

    Or hand it to any ASGI server as ``myapp:app``.

    Thread safety:
        The only shared state is the served root and the config, both
        immutable after ``__init__``. Requests share nothing else.
    """

    __slots__ = ("_root", "config")

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        root: str | Path | None = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        # Canonical once, so per-request confinement is a pure comparison.
        self._root: Path = Path(root if root is not None else self.config.root).resolve()

    @property
    def root(self) -> Path:
        """The canonical served root."""
        return self._root

    def check(self) -> None:
        """Validate that the served root is usable.

        Raises:
            ConfigurationError: If the root is missing or not a directory.
        """
        if not self._root.exists():
            msg = f"Served root {str(self._root)!r} does not exist"
            raise ConfigurationError(msg)
        if not self._root.is_dir():
            msg = f"Served root {str(self._root)!r} is not a directory"
            raise ConfigurationError(msg)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        - **Development mode** (debug=True): single worker, no reload
        - **Production mode** (debug=False): multi-worker

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self.check()

        _host = host or self.config.host
        _port = port if port is not None else self.config.port

        logger.info("Listening on http://%s:%d", _host, _port)
        logger.info("Serving from: %s%s", self._root, " (read-only)" if self.config.read_only else "")

        if self.config.debug:
            from burrow.server.dev import run_dev_server

            run_dev_server(self, _host, _port, reload=False)
        else:
            from burrow.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_level=self.config.log_level,
                max_connections=self.config.max_connections,
                keep_alive_timeout=self.config.keep_alive_timeout,
                request_timeout=self.config.request_timeout,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            root=self._root,
            read_only=self.config.read_only,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Validates the served root at startup so a misconfigured server
        fails before accepting connections, not on the first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self.check()
                except ConfigurationError as exc:
                    logger.error("%s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
