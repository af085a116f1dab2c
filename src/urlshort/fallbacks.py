"""Ready-made fallback handlers.

Any ``async (Request) -> Response`` callable can be a fallback; these
cover the two common cases of a redirect-only service.
"""

from urlshort.dispatch import Handler
from urlshort.errors import NotFound
from urlshort.http.request import Request
from urlshort.http.response import Response


async def not_found(request: Request) -> Response:
    """Fail every request with 404."""
    raise NotFound(f"No redirection for {request.path}")


def text_fallback(body: str, *, status: int = 200) -> Handler:
    """Answer every request with the same plain-text body."""
    response = Response(body=body, status=status)

    async def fallback(request: Request) -> Response:  # noqa: ARG001
        return response

    return fallback
