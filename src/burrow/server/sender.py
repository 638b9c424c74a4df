"""ASGI response sending — translates a burrow Response into ASGI messages.

The sender owns the headers every response must carry: ``Date``,
``Connection: close``, ``Content-Type`` and a ``Content-Length`` that
matches the bytes actually emitted. Values for those names set on the
Response are replaced, never duplicated.
"""

from email.utils import formatdate

from burrow._internal.asgi import Send
from burrow.http.response import Response

# Headers computed here; any copies on the Response are dropped.
_MANAGED = frozenset({"date", "connection", "content-type", "content-length"})


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def http_date(timeval: float | None = None) -> str:
    """RFC 7231 IMF-fixdate, e.g. ``Sun, 06 Nov 1994 08:49:37 GMT``."""
    return formatdate(timeval, usegmt=True)


async def send_response(response: Response, send: Send) -> None:
    """Translate a burrow Response into ASGI send() calls."""
    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers: list[tuple[bytes, bytes]] = [
        (b"date", http_date().encode("latin-1")),
        (b"connection", b"close"),
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        lowered = name.lower()
        if lowered in _MANAGED:
            continue
        raw_headers.append((lowered.encode("latin-1"), value.encode("latin-1")))

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
