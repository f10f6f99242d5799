"""Tests for the MIME table and the HTML error pages."""

from pathlib import PurePath

import pytest

from demo_server.mime import DEFAULT_MIME_TYPE, MIME_TYPES, get_extension, get_mime_type
from demo_server.pages import not_found_page, render_error_page, server_error_page


class TestMimeTypes:
    @pytest.mark.parametrize(
        "extension, expected",
        [
            (".html", "text/html"),
            (".js", "application/javascript"),
            (".svg", "image/svg+xml"),
            (".ico", "image/x-icon"),
            (".mp3", "audio/mpeg"),
            (".m4a", "audio/mp4"),
        ],
    )
    def test_known_extensions(self, extension, expected):
        assert get_mime_type(extension) == expected

    def test_unknown_extension(self):
        assert get_mime_type(".xyz") == DEFAULT_MIME_TYPE == "application/octet-stream"

    def test_empty_extension(self):
        assert get_mime_type("") == DEFAULT_MIME_TYPE

    def test_lookup_ignores_case(self):
        assert get_mime_type(".JPEG") == "image/jpeg"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MIME_TYPES[".xyz"] = "text/plain"

    def test_extension_keeps_only_last_suffix(self):
        assert get_extension(PurePath("/srv/archive.tar.GZ")) == ".gz"
        assert get_extension(PurePath("/srv/.bashrc")) == ""


class TestErrorPages:
    def test_not_found_page(self):
        page = not_found_page("Rapid Mixer Demo")
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>404 - Not Found</title>" in page
        assert "404 - File Not Found" in page
        assert '<a href="/">' in page
        assert "Back to Rapid Mixer Demo" in page

    def test_server_error_page(self):
        page = server_error_page("Rapid Mixer Demo")
        assert "<title>500 - Server Error</title>" in page
        assert "An error occurred while reading the file." in page
        assert '<a href="/">' in page

    def test_dark_theme_inline_css(self):
        page = not_found_page("x")
        assert "<style>" in page
        assert "background: #1a1a2e" in page

    def test_site_name_is_escaped(self):
        page = render_error_page(404, "Not Found", "gone", "<script>alert(1)</script>")
        assert "<script>" not in page
        assert "&lt;script&gt;" in page
