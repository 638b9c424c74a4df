"""Tests for burrow.http.request — frozen Request with async body access."""

import pytest

from burrow.errors import ClientDisconnected
from burrow.http.request import Request


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8080),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


def _make_receive(*messages: dict):
    """Create an ASGI receive callable that yields *messages* in order."""
    it = iter(messages or ({"type": "http.request", "body": b"", "more_body": False},))

    async def receive():
        return next(it)

    return receive


def _body(data: bytes, more: bool = False) -> dict:
    return {"type": "http.request", "body": data, "more_body": more}


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        scope = _make_scope(method="PUT", path="/notes.txt", raw_path=b"/notes.txt")
        req = Request.from_asgi(scope, _make_receive())

        assert req.method == "PUT"
        assert req.path == "/notes.txt"
        assert req.raw_path == "/notes.txt"
        assert req.http_version == "1.1"
        assert req.client == ("127.0.0.1", 54321)

    def test_headers_kept_raw(self) -> None:
        scope = _make_scope(headers=[(b"content-length", b"12"), (b"accept", b"*/*")])
        req = Request.from_asgi(scope, _make_receive())

        assert req.headers == ((b"content-length", b"12"), (b"accept", b"*/*"))

    def test_missing_headers(self) -> None:
        scope = _make_scope()
        del scope["headers"]
        assert Request.from_asgi(scope, _make_receive()).headers == ()

    def test_missing_client(self) -> None:
        scope = _make_scope()
        del scope["client"]
        assert Request.from_asgi(scope, _make_receive()).client is None

    def test_frozen(self) -> None:
        req = Request.from_asgi(_make_scope(), _make_receive())
        with pytest.raises(AttributeError):
            req.method = "PUT"  # type: ignore[misc]


class TestRawPath:
    def test_escapes_preserved(self) -> None:
        scope = _make_scope(path="/a b.txt", raw_path=b"/a%20b.txt")
        req = Request.from_asgi(scope, _make_receive())

        assert req.path == "/a b.txt"
        assert req.raw_path == "/a%20b.txt"

    def test_malformed_escape_preserved(self) -> None:
        req = Request.from_asgi(_make_scope(raw_path=b"/%zz"), _make_receive())
        assert req.raw_path == "/%zz"

    def test_non_ascii_bytes_escaped(self) -> None:
        req = Request.from_asgi(_make_scope(raw_path="/café".encode()), _make_receive())
        assert req.raw_path == "/caf%C3%A9"

    def test_falls_back_to_quoted_path(self) -> None:
        scope = _make_scope(path="/100%.txt")
        del scope["raw_path"]
        req = Request.from_asgi(scope, _make_receive())

        assert req.raw_path == "/100%25.txt"

    def test_url_includes_query(self) -> None:
        scope = _make_scope(raw_path=b"/x.txt", query_string=b"a=1")
        assert Request.from_asgi(scope, _make_receive()).url == "/x.txt?a=1"

    def test_url_without_query(self) -> None:
        scope = _make_scope(raw_path=b"/x.txt")
        assert Request.from_asgi(scope, _make_receive()).url == "/x.txt"


class TestRequestBody:
    async def test_single_chunk(self) -> None:
        req = Request.from_asgi(_make_scope(), _make_receive(_body(b"hello")))
        assert await req.body() == b"hello"

    async def test_multiple_chunks(self) -> None:
        receive = _make_receive(_body(b"a", more=True), _body(b"b", more=True), _body(b"c"))
        req = Request.from_asgi(_make_scope(), receive)

        assert await req.body() == b"abc"

    async def test_cached(self) -> None:
        req = Request.from_asgi(_make_scope(), _make_receive(_body(b"once")))

        first = await req.body()
        second = await req.body()

        assert first is second

    async def test_stream(self) -> None:
        receive = _make_receive(_body(b"a", more=True), _body(b""))
        req = Request.from_asgi(_make_scope(), receive)

        assert [chunk async for chunk in req.stream()] == [b"a"]

    async def test_disconnect_mid_body(self) -> None:
        receive = _make_receive(_body(b"part", more=True), {"type": "http.disconnect"})
        req = Request.from_asgi(_make_scope(), receive)

        with pytest.raises(ClientDisconnected):
            await req.body()
