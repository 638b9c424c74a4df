"""ASGI handler — translates ASGI scope/messages to burrow types.

The only component that touches raw ASGI on the request side. Converts
the scope to a typed Request, runs method check → path resolution →
verb dispatch, and sends exactly one Response back through ASGI send().
"""

import logging
from pathlib import Path

from burrow._internal.asgi import Receive, Scope, Send
from burrow.errors import HTTPError, MethodNotAllowed
from burrow.files.dispatcher import allowed_methods, dispatch
from burrow.files.resolver import resolve
from burrow.http.request import Request
from burrow.http.response import Response
from burrow.server.errors import handle_http_error, handle_internal_error
from burrow.server.sender import send_response

logger = logging.getLogger("burrow.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    root: Path,
    read_only: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await _respond(request, root=root, read_only=read_only)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    logger.info("%s %s %d", request.method, request.path, response.status)

    try:
        await send_response(response, send)
    except OSError as exc:
        # Client went away mid-response; nothing is left to tell it.
        logger.debug("%s %s: send failed: %r", request.method, request.path, exc)


async def _respond(request: Request, *, root: Path, read_only: bool) -> Response:
    # Method first: an unsupported method is 405 whatever the path says,
    # and nothing touches the filesystem.
    allowed = allowed_methods(read_only=read_only)
    if request.method not in allowed:
        raise MethodNotAllowed(allowed)

    path = resolve(request.url, root)
    return await dispatch(request.method, path, request, read_only=read_only)
