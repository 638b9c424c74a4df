"""Immutable HTTP request.

Frozen metadata with async body access. The body is drained at most
once and cached for the lifetime of the request.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from burrow._internal.asgi import Receive
from burrow.errors import ClientDisconnected

# RFC 3986 pchar delimiters, plus '%' so existing escapes survive re-quoting
_RAW_SAFE = "/%!$&'()*+,;=:@"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the decoded path as supplied by the ASGI server;
    ``raw_path`` is the undecoded request target path (no query);
    ``headers`` holds the raw ASGI byte pairs.
    """

    method: str
    path: str
    raw_path: str
    query_string: str
    headers: tuple[tuple[bytes, bytes], ...]
    http_version: str
    client: tuple[str, int] | None

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    # Private: mutable cache for the drained body
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def url(self) -> str:
        """The undecoded request target (path + query string)."""
        if self.query_string:
            return f"{self.raw_path}?{self.query_string}"
        return self.raw_path

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.

        Raises:
            ClientDisconnected: If the client hangs up mid-body.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                raise ClientDisconnected("client disconnected before the body was complete")
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        path = scope.get("path") or "/"
        raw = scope.get("raw_path")
        # The resolver decodes exactly once, so raw_path must stay encoded.
        # Existing escapes are kept; stray non-ASCII bytes get escaped.
        # Without raw_path (optional in ASGI), re-quote the decoded path.
        raw_path = quote(raw, safe=_RAW_SAFE) if raw else quote(path, safe="/")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=path,
            raw_path=raw_path,
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=tuple(scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
