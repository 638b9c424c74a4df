"""Development server.

Starts a pounce ASGI server with the live FileServer object.
Uses single-worker mode. Reload needs an import string (``app_path``).
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    app_path: str | None = None,
) -> None:
    """Start a pounce dev server with the given FileServer.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but burrow has a live ``FileServer`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (FileServer instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
    )
    server = Server(config, app, app_path=app_path)
    server.run()
