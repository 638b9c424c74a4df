"""Verb dispatch — one filesystem operation sequence per request.

Every filesystem call goes through ``anyio.Path``, which runs the
blocking syscall in a worker thread. Each stat/read/write/rename/unlink
is therefore a suspension point, and a slow disk for one client never
stalls the event loop for the others.

No locking: two concurrent PUTs to the same path race and the last
rename wins.
"""

import errno
import logging
import os
import stat
import uuid
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeAlias

import anyio

from burrow.errors import ClientDisconnected, IOFault, MethodNotAllowed, NotFound
from burrow.files.content_types import guess_content_type
from burrow.http.request import Request
from burrow.http.response import Response

logger = logging.getLogger("burrow.files")

READ_METHODS: frozenset[str] = frozenset({"GET"})
ALL_METHODS: frozenset[str] = frozenset({"GET", "PUT", "DELETE"})

# errno values that mean "nothing is there" rather than "something broke"
_MISSING = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG})


def allowed_methods(*, read_only: bool = False) -> frozenset[str]:
    """Methods the server answers; everything else is 405."""
    return READ_METHODS if read_only else ALL_METHODS


def _is_missing(exc: OSError) -> bool:
    return exc.errno in _MISSING


async def _stat_or_none(path: anyio.Path) -> os.stat_result | None:
    """Return the stat result, or ``None`` if nothing exists at *path*.

    Raises:
        IOFault: The stat failed for another reason (e.g. permissions).
    """
    try:
        st = await path.stat()
    except OSError as exc:
        if _is_missing(exc):
            return None
        raise IOFault() from exc
    return st


# ------------------------------------------------------------------
# Verbs
# ------------------------------------------------------------------


async def get_file(path: Path, request: Request) -> Response:  # noqa: ARG001
    """Serve the regular file at *path* in full."""
    target = anyio.Path(path)

    found = await _stat_or_none(target)
    if found is None or not stat.S_ISREG(found.st_mode):
        raise NotFound()

    try:
        data = await target.read_bytes()
    except OSError as exc:
        # Stat succeeded but the read did not: permissions or a race.
        raise IOFault() from exc

    return Response(body=data, content_type=guess_content_type(path))


async def put_file(path: Path, request: Request) -> Response:
    """Create or overwrite the file at *path* with the request body.

    The parent directory must already exist. The body is buffered in
    full, written to a hidden sibling, then renamed over the target, so
    readers see either the old content or the new, never a partial file.
    """
    target = anyio.Path(path)
    parent = target.parent

    parent_found = await _stat_or_none(parent)
    if parent_found is None or not stat.S_ISDIR(parent_found.st_mode):
        raise NotFound()

    found = await _stat_or_none(target)
    if found is not None and stat.S_ISDIR(found.st_mode):
        raise IOFault("target is a directory")
    existed = found is not None and stat.S_ISREG(found.st_mode)

    try:
        body = await request.body()
    except (ClientDisconnected, OSError) as exc:
        raise IOFault() from exc

    temp = parent / f".burrow-{uuid.uuid4().hex}.tmp"
    try:
        await temp.write_bytes(body)
        await temp.replace(target)
    except OSError as exc:
        await _discard(temp)
        raise IOFault() from exc

    logger.debug("wrote %d bytes to %s", len(body), path)
    return Response(status=200 if existed else 201)


async def delete_file(path: Path, request: Request) -> Response:  # noqa: ARG001
    """Remove the file at *path*."""
    try:
        await anyio.Path(path).unlink()
    except OSError as exc:
        if _is_missing(exc):
            raise NotFound() from None
        raise IOFault() from exc

    return Response(status=204)


async def _discard(temp: anyio.Path) -> None:
    """Best-effort removal of a temporary file after a failed write."""
    try:
        await temp.unlink(missing_ok=True)
    except OSError:
        logger.warning("could not remove temporary file %s", temp)


# ------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------

VerbHandler: TypeAlias = Callable[[Path, Request], Awaitable[Response]]

_VERBS: dict[str, VerbHandler] = {
    "GET": get_file,
    "PUT": put_file,
    "DELETE": delete_file,
}


async def dispatch(
    method: str,
    path: Path,
    request: Request,
    *,
    read_only: bool = False,
) -> Response:
    """Run the filesystem operation for *method* on an already-resolved *path*.

    Raises:
        MethodNotAllowed: *method* is not served (or is a write in
            read-only mode). No filesystem call is made.
        NotFound: The file, or the parent directory for PUT, is absent.
        IOFault: Any other filesystem or body-read failure.
    """
    allowed = allowed_methods(read_only=read_only)
    if method not in allowed:
        raise MethodNotAllowed(allowed)
    return await _VERBS[method](path, request)
