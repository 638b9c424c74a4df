"""Error handling pipeline for burrow requests.

Maps HTTPError exceptions and unexpected failures to plain-text
responses. Bodies are the canonical reason phrase and a newline: no
detail strings, paths, or tracebacks ever reach the client.
"""

import logging
from http import HTTPStatus

from burrow.errors import ClientPathError, HTTPError, IOFault
from burrow.http.request import Request
from burrow.http.response import PLAIN_TEXT, Response

logger = logging.getLogger("burrow.server")


def error_response(status: int) -> Response:
    """A plain-text response whose body is the reason phrase for *status*."""
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Error"
    return Response(body=f"{phrase}\n", status=status, content_type=PLAIN_TEXT)


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response."""
    if isinstance(exc, IOFault):
        # A real fault on our side: keep the cause for the operator.
        logger.warning(
            "%d %s %s: %s (%r)", exc.status, request.method, request.path, exc.detail, exc.__cause__
        )
    elif isinstance(exc, ClientPathError):
        logger.debug("%d %s %r: rejected request path", exc.status, request.method, request.url)
    else:
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    resp = error_response(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:  # noqa: ARG001
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    return error_response(500)
