"""Static suffix → MIME type table.

Deliberately not ``mimetypes``: the answer must not depend on the host's
``/etc/mime.types``.
"""

from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "text/javascript; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".txt": "text/plain; charset=utf-8",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}


def guess_content_type(path: str | PurePath) -> str:
    """Return the MIME type for *path*'s final suffix (case-insensitive)."""
    suffix = PurePath(path).suffix.lower()
    return CONTENT_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)
