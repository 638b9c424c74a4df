"""Burrow exception hierarchy.

Shared across the resolver, dispatcher, handler, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class BurrowError(Exception):
    """Base for all burrow-specific errors."""


class ConfigurationError(BurrowError):
    """Raised when server configuration is invalid.

    Typically raised at startup (bad ``PORT``, missing served root),
    never while handling a request.
    """


class ClientDisconnected(BurrowError):  # noqa: N818
    """The client closed the connection while its body was being read."""


@dataclass(frozen=True, slots=True)
class HTTPError(BurrowError):
    """An error that maps directly to an HTTP status code.

    Raised by the resolver and dispatcher. The ASGI handler catches these
    and turns them into plain-text responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class ClientPathError(HTTPError):
    """The request path itself is unacceptable (bad encoding or traversal)."""


class BadRequest(ClientPathError):  # noqa: N818 — conventional name in web frameworks
    """400 — the request path is not valid percent-encoded UTF-8."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class Forbidden(ClientPathError):  # noqa: N818 — conventional name in web frameworks
    """403 — the request path escapes the served root."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(status=403, detail=detail)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — the file, or the parent directory for a write, does not exist."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — the server does not support this HTTP method.

    Includes an ``Allow`` header listing the supported methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=detail or f"Method not allowed. Allowed methods: {allow_value}",
            headers=(("Allow", allow_value),),
        )


class IOFault(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """500 — a filesystem operation failed for a reason other than absence.

    The underlying ``OSError`` is chained as ``__cause__`` for logging;
    it never reaches the response body.
    """

    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(status=500, detail=detail)
