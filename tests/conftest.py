"""Shared pytest fixtures for burrow tests."""

from pathlib import Path

import pytest

from burrow.app import FileServer
from burrow.config import ServerConfig


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """A served root with an index page and a couple of files."""
    public = (tmp_path / "public").resolve()
    public.mkdir()
    (public / "index.html").write_text("<h1>hi</h1>")
    (public / "notes.txt").write_text("hello\n")
    (public / "data.json").write_text('{"a": 1}')

    docs = public / "docs"
    docs.mkdir()
    (docs / "guide.txt").write_text("read me")

    return public


@pytest.fixture
def app(root: Path) -> FileServer:
    """A read-write FileServer over ``root``."""
    return FileServer(ServerConfig(root=root))


@pytest.fixture
def read_only_app(root: Path) -> FileServer:
    """A GET-only FileServer over ``root``."""
    return FileServer(ServerConfig(root=root, read_only=True))
