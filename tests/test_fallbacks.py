"""Tests for urlshort.fallbacks."""

import pytest

from urlshort.errors import NotFound
from urlshort.fallbacks import not_found, text_fallback

from conftest import build_request


async def test_not_found_raises() -> None:
    with pytest.raises(NotFound) as exc_info:
        await not_found(build_request("/nope"))
    assert exc_info.value.detail == "No redirection for /nope"


async def test_text_fallback_same_response_every_time() -> None:
    fallback = text_fallback("Hello, world!", status=202)
    first = await fallback(build_request("/a"))
    second = await fallback(build_request("/b"))
    assert first is second
    assert first.status == 202
    assert first.text == "Hello, world!"
