"""Burrow — a minimal HTTP file server.

Exposes one directory tree as a resource space: ``GET`` reads a file,
``PUT`` creates or overwrites one, ``DELETE`` removes one. Meant for
local development and simple asset hosting.

Basic usage::

    from burrow import FileServer, ServerConfig

    app = FileServer(ServerConfig(root="./public"))
    app.run()

From the shell::

    burrow serve ./public --port 8080
"""

__version__ = "0.1.0"
__all__ = [
    "BadRequest",
    "BurrowError",
    "ConfigurationError",
    "FileServer",
    "Forbidden",
    "HTTPError",
    "IOFault",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "ServerConfig",
    "resolve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burrow`` fast while providing a clean top-level API.
    """
    if name == "FileServer":
        from burrow.app import FileServer

        return FileServer

    if name == "ServerConfig":
        from burrow.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from burrow.http.request import Request

        return Request

    if name == "Response":
        from burrow.http.response import Response

        return Response

    if name == "resolve":
        from burrow.files.resolver import resolve

        return resolve

    if name in (
        "BadRequest",
        "BurrowError",
        "ConfigurationError",
        "Forbidden",
        "HTTPError",
        "IOFault",
        "MethodNotAllowed",
        "NotFound",
    ):
        from burrow import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
