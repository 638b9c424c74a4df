"""Request path → confined filesystem path.

Pure: no filesystem access. Every untrusted URL passes through
``resolve()`` before any file operation happens, and anything that is
not unambiguously inside the served root is rejected.

Confinement is lexical. ``..`` segments are collapsed on the string,
then the result is compared segment-wise against the root, so a sibling
such as ``/srv/app-evil`` never passes for a root of ``/srv/app``.
Symlinks inside the root are not followed here; the OS follows them
when the file is opened.
"""

import os
import re
from pathlib import Path
from urllib.parse import unquote

from burrow.errors import BadRequest, Forbidden

DEFAULT_DOCUMENT = "/index.html"

# A '%' that does not start a two-digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def resolve(raw_url: str, root: Path) -> Path:
    """Map an undecoded request target onto a path under *root*.

    Args:
        raw_url: The request target as received, e.g. ``"/a%20b.txt?x=1"``.
        root: The served root. Must be absolute and canonical.

    Returns:
        The canonical absolute path, equal to *root* or beneath it.

    Raises:
        BadRequest: Malformed percent-encoding, invalid UTF-8, or a NUL byte.
        Forbidden: The path escapes *root*.
    """
    pathname = raw_url.split("?", 1)[0].strip() or "/"
    if pathname == "/":
        pathname = DEFAULT_DOCUMENT

    decoded = percent_decode(pathname)

    candidate = Path(os.path.normpath(os.path.join(root, "./" + decoded)))
    if not candidate.is_relative_to(root):
        raise Forbidden()
    return candidate


def percent_decode(pathname: str) -> str:
    """Strictly decode ``%XX`` escapes as UTF-8.

    Unlike ``urllib.parse.unquote`` on its own, malformed escapes are an
    error rather than being passed through.
    """
    if _BAD_ESCAPE.search(pathname):
        raise BadRequest()
    try:
        decoded = unquote(pathname, errors="strict")
    except UnicodeDecodeError:
        raise BadRequest() from None
    if "\x00" in decoded:
        raise BadRequest()
    return decoded
