"""Tests for kitty._internal.asgi: typed ASGI definitions."""

from kitty._internal.asgi import HTTPScope


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope dict."""
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
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestHTTPScope:
    def test_from_scope_basic(self) -> None:
        parsed = HTTPScope.from_scope(_make_scope(method="DELETE", path="/val/kitty"))

        assert parsed.method == "DELETE"
        assert parsed.path == "/val/kitty"
        assert parsed.http_version == "1.1"
        assert parsed.client == ("127.0.0.1", 54321)

    def test_raw_path_decoded_as_latin1_text(self) -> None:
        scope = _make_scope(path="/val/a b", raw_path=b"/val/a%20b")
        parsed = HTTPScope.from_scope(scope)

        assert parsed.raw_path == "/val/a%20b"

    def test_empty_raw_path_uses_path(self) -> None:
        parsed = HTTPScope.from_scope(_make_scope(path="/val", raw_path=b""))
        assert parsed.raw_path == "/val"

    def test_from_scope_headers_become_tuple(self) -> None:
        raw_headers = [(b"content-type", b"application/json"), (b"accept", b"*/*")]
        parsed = HTTPScope.from_scope(_make_scope(headers=raw_headers))

        assert isinstance(parsed.headers, tuple)
        assert parsed.headers[0] == (b"content-type", b"application/json")

    def test_from_scope_defaults_for_missing_keys(self) -> None:
        minimal: dict[str, object] = {"type": "http", "method": "GET", "path": "/"}
        parsed = HTTPScope.from_scope(minimal)

        assert parsed.http_version == "1.1"
        assert parsed.raw_path == "/"
        assert parsed.query_string == b""
        assert parsed.headers == ()
        assert parsed.client is None
