"""Tests for burrow.files.content_types — the static suffix table."""

from pathlib import Path

import pytest

from burrow.files.content_types import DEFAULT_CONTENT_TYPE, guess_content_type


class TestGuessContentType:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("index.html", "text/html; charset=utf-8"),
            ("style.css", "text/css; charset=utf-8"),
            ("app.js", "text/javascript; charset=utf-8"),
            ("data.json", "application/json; charset=utf-8"),
            ("notes.txt", "text/plain; charset=utf-8"),
            ("logo.png", "image/png"),
            ("photo.jpg", "image/jpeg"),
            ("photo.jpeg", "image/jpeg"),
            ("anim.gif", "image/gif"),
            ("icon.svg", "image/svg+xml"),
        ],
    )
    def test_known_suffixes(self, name: str, expected: str) -> None:
        assert guess_content_type(name) == expected

    def test_suffix_is_case_insensitive(self) -> None:
        assert guess_content_type("LOGO.PNG") == "image/png"
        assert guess_content_type("Index.Html") == "text/html; charset=utf-8"

    def test_unknown_suffix(self) -> None:
        assert guess_content_type("archive.tar.gz") == DEFAULT_CONTENT_TYPE

    def test_no_suffix(self) -> None:
        assert guess_content_type("Makefile") == "application/octet-stream"

    def test_dotfile_has_no_suffix(self) -> None:
        assert guess_content_type(".html") == DEFAULT_CONTENT_TYPE

    def test_only_final_suffix_counts(self) -> None:
        assert guess_content_type("page.html.bak") == DEFAULT_CONTENT_TYPE

    def test_accepts_paths(self) -> None:
        assert guess_content_type(Path("/srv/app/docs/readme.txt")) == "text/plain; charset=utf-8"
