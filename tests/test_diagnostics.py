"""
Tests for diagnostics.py
"""
import io

from rich.console import Console

from fetch_ask.diagnostics import (
    format_body,
    mask_auth_header,
    mask_headers,
    print_request,
    print_response,
)
from fetch_ask.types import ComposedOptions

from conftest import FakeResponse


def make_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestMasking:
    """Tests for header masking."""

    def test_mask_auth_header(self):
        assert mask_auth_header("Bearer abcdefghijklmnop") == "Bearer abcdefgh***"
        assert mask_auth_header("short") == "*****"
        assert mask_auth_header(None) == "<none>"

    # Decision: only credential headers masked
    def test_mask_headers(self):
        masked = mask_headers({"Authorization": "Bearer abcdefghijklmnop", "Accept": "x"})
        assert masked["Accept"] == "x"
        assert masked["Authorization"].endswith("***")


class TestPrinting:
    """Tests for rich printing."""

    def test_print_request(self):
        out = make_console()
        options = ComposedOptions(
            url="http://h/ok",
            method="POST",
            headers={"Authorization": "Bearer abcdefghijklmnop"},
            body='{"a": 1}',
        )
        print_request(options, out)
        text = out.file.getvalue()
        assert "POST" in text
        assert "http://h/ok" in text
        assert "abcdefghijklmnop" not in text

    def test_print_response(self):
        out = make_console()
        print_response("http://h/ok", FakeResponse(status=404, status_text="Not Found"), out)
        assert "404" in out.file.getvalue()

    def test_format_body(self):
        assert format_body(None) == ""
        assert format_body({"a": 1}) == '{\n  "a": 1\n}'
        assert format_body(b"\xff") == "<binary data: 1 bytes>"
