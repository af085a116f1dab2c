"""Shared fixtures for urlshort tests."""

from typing import Any

import pytest

from urlshort.http.request import Request
from urlshort.http.response import Response


async def _empty_receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


def build_request(path: str, method: str = "GET", query_string: bytes = b"") -> Request:
    """Build a Request directly, without going through ASGI."""
    return Request(
        method=method,
        path=path,
        headers=(),
        query_string=query_string,
        http_version="1.1",
        server=("testserver", 80),
        client=("127.0.0.1", 0),
        _receive=_empty_receive,
    )


class RecordingFallback:
    """Fallback that records every request and returns one fixed response."""

    def __init__(self) -> None:
        self.requests: list[Request] = []
        self.response = Response(body="fallback", status=200)

    async def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        return self.response

    @property
    def paths(self) -> list[str]:
        return [r.path for r in self.requests]


@pytest.fixture
def fallback() -> RecordingFallback:
    return RecordingFallback()
