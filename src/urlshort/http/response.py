"""HTTP response values.

``Response`` is built through immutable ``.with_*()`` transformations.
``Redirect`` is the value a dispatcher produces on a match; it renders
to a ``Response`` whose ``Location`` is the stored URL, with only
non-ASCII bytes percent-escaped so the header stays on the wire.
ASCII URLs are never rewritten.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from dataclasses import dataclass, replace
from http import HTTPStatus
from urllib.parse import quote

PERMANENT_REDIRECT = HTTPStatus.PERMANENT_REDIRECT.value

# Every ASCII character passes through; only non-ASCII bytes are escaped
_ASCII = "".join(chr(i) for i in range(128))


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to *url*, permanent (308) unless told otherwise."""

    url: str
    status: int = PERMANENT_REDIRECT

    def to_response(self, method: str = "GET") -> Response:
        """Render as a ``Response``.

        ``Location`` carries the configured URL with only its non-ASCII
        bytes percent-escaped; ASCII URLs go out unchanged. GET gets a
        short HTML note pointing at the target, HEAD gets the matching
        content type with no body, and other methods get neither.
        """
        location = quote(self.url, safe=_ASCII)
        response = Response(body="", status=self.status).with_header("Location", location)
        if method == "HEAD":
            return response.with_content_type("text/html; charset=utf-8")
        if method != "GET":
            return response
        phrase = HTTPStatus(self.status).phrase
        note = f'<a href="{html.escape(location)}">{phrase}</a>.\n'
        return replace(response, body=note, content_type="text/html; charset=utf-8")
