"""Tests for urlshort.app — the ASGI application end to end."""

from typing import Any

from urlshort.app import App
from urlshort.config import AppConfig
from urlshort.decoders import json_handler, yaml_handler
from urlshort.dispatch import map_handler
from urlshort.errors import HTTPError
from urlshort.fallbacks import not_found, text_fallback
from urlshort.testing import TestClient


def _make_app(**config: Any) -> App:
    handler = map_handler(
        {"/a": "https://example.com/a", "/b": "https://example.com/b"},
        not_found,
    )
    return App(handler, AppConfig(**config))


class TestRedirects:
    async def test_mapped_path_redirects(self) -> None:
        async with TestClient(_make_app()) as client:
            response = await client.get("/a")
            assert response.status == 308
            assert ("location", "https://example.com/a") in response.headers
            assert response.content_type == "text/html; charset=utf-8"
            assert b"Permanent Redirect" in response.body_bytes

    async def test_query_string_is_ignored_for_matching(self) -> None:
        async with TestClient(_make_app()) as client:
            response = await client.get("/b?utm=1")
            assert response.status == 308
            assert response.header("location") == "https://example.com/b"

    async def test_post_redirect_keeps_method_semantics(self) -> None:
        async with TestClient(_make_app()) as client:
            response = await client.post("/a", body=b"payload")
            assert response.status == 308
            assert response.body_bytes == b""

    async def test_head_redirect_has_no_body(self) -> None:
        async with TestClient(_make_app()) as client:
            response = await client.head("/a")
            assert response.status == 308
            assert response.header("location") == "https://example.com/a"
            assert response.body_bytes == b""

    async def test_non_ascii_url_is_sent_percent_escaped(self) -> None:
        raw = "- path: /jp\n  url: https://例え.jp/パス\n".encode()
        app = App(yaml_handler(raw, not_found))
        async with TestClient(app) as client:
            response = await client.get("/jp")
            assert response.status == 308
            assert response.header("location") == (
                "https://%E4%BE%8B%E3%81%88.jp/%E3%83%91%E3%82%B9"
            )

    async def test_unmapped_path_is_404(self) -> None:
        async with TestClient(_make_app()) as client:
            response = await client.get("/c")
            assert response.status == 404
            assert response.text == "No redirection for /c"

    async def test_trailing_slash_is_a_different_path(self) -> None:
        async with TestClient(_make_app()) as client:
            response = await client.get("/a/")
            assert response.status == 404


class TestFallbacks:
    async def test_text_fallback(self) -> None:
        app = App(yaml_handler(b"- path: /x\n  url: B\n", text_fallback("Hello, world!")))
        async with TestClient(app) as client:
            response = await client.get("/anything")
            assert response.status == 200
            assert response.text == "Hello, world!"

    async def test_fallback_http_error_headers(self) -> None:
        async def teapot(request):
            raise HTTPError(status=418, detail="short and stout", headers=(("X-Pot", "1"),))

        app = App(json_handler(b"[]", teapot))
        async with TestClient(app) as client:
            response = await client.get("/tea")
            assert response.status == 418
            assert response.text == "short and stout"
            assert ("x-pot", "1") in response.headers

    async def test_fallback_crash_is_500(self) -> None:
        async def broken(request):
            raise RuntimeError("boom")

        app = App(map_handler({}, broken))
        async with TestClient(app) as client:
            response = await client.get("/x")
            assert response.status == 500
            assert response.text == "Internal Server Error"

    async def test_fallback_crash_debug_body(self) -> None:
        async def broken(request):
            raise RuntimeError("boom")

        app = App(map_handler({}, broken), AppConfig(debug=True))
        async with TestClient(app) as client:
            response = await client.get("/x")
            assert response.status == 500
            assert "RuntimeError: boom" in response.text


class TestASGI:
    async def test_lifespan(self) -> None:
        app = _make_app()
        incoming = [{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}]
        sent: list[dict] = []

        async def receive() -> dict:
            return incoming.pop(0)

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    async def test_non_http_scope_is_ignored(self) -> None:
        sent: list[dict] = []

        async def receive() -> dict:
            return {}

        async def send(message: dict) -> None:
            sent.append(message)

        await _make_app()({"type": "websocket"}, receive, send)
        assert sent == []

    def test_default_config(self) -> None:
        app = App(not_found)
        assert app.config == AppConfig()
