"""Immutable HTTP response.

The value is complete before it is handed to the sender: no headers are
written piecemeal. ``header()`` and ``text`` are the read side used when
inspecting responses returned by ``burrow.testing.TestClient``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

PLAIN_TEXT = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response.

    Construct with body, status and content type; ``with_header()``
    returns a new ``Response`` with one more header.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = PLAIN_TEXT
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    # -- Lookup helpers --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first header named *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
