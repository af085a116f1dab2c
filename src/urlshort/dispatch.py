"""Redirect-or-fallback dispatch.

A handler is any callable matching::

    async def handler(request: Request) -> Response: ...

``map_handler`` wraps a path→URL mapping and a fallback handler into a
new handler. On an exact path match it answers with a 308 redirect;
otherwise it awaits the fallback with the untouched request and returns
whatever the fallback returns.
"""

from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response

# Any response type the pipeline can produce
AnyResponse: TypeAlias = Response

# A request handler; also the shape of a fallback
Handler: TypeAlias = Callable[[Request], Awaitable[AnyResponse]]


def redirect_response(paths: Mapping[str, str], request: Request) -> AnyResponse | None:
    """Return the redirect for *request* if its exact path is mapped, else None."""
    url = paths.get(request.path)
    if url is None:
        return None
    return Redirect(url).to_response(request.method)


class RedirectHandler:
    """Exact-path redirect table in front of a fallback handler.

    The mapping is copied at construction and exposed read-only, so one
    instance can serve any number of concurrent requests without locks.
    Failures raised by the fallback propagate untouched.
    """

    __slots__ = ("_fallback", "_paths")

    def __init__(self, paths_to_urls: Mapping[str, str], fallback: Handler) -> None:
        self._paths: Mapping[str, str] = MappingProxyType(dict(paths_to_urls))
        self._fallback = fallback

    @property
    def paths(self) -> Mapping[str, str]:
        """The read-only path→URL mapping this handler matches against."""
        return self._paths

    @property
    def fallback(self) -> Handler:
        return self._fallback

    def lookup(self, path: str) -> str | None:
        """Return the URL configured for exactly *path*, or None."""
        return self._paths.get(path)

    async def __call__(self, request: Request) -> AnyResponse:
        response = redirect_response(self._paths, request)
        if response is not None:
            return response
        return await self._fallback(request)

    def __repr__(self) -> str:
        return f"RedirectHandler({len(self._paths)} paths, fallback={self._fallback!r})"


def map_handler(paths_to_urls: Mapping[str, str], fallback: Handler) -> RedirectHandler:
    """Build a handler that redirects mapped paths and delegates the rest.

    Args:
        paths_to_urls: Exact request paths mapped to destination URLs.
            Keys are matched against ``Request.path`` with no
            normalization (trailing slashes, case, and query strings all
            count).
        fallback: Handler awaited for every path not in the mapping.

    Returns:
        A ``RedirectHandler``, itself usable as a fallback for another.
    """
    return RedirectHandler(paths_to_urls, fallback)
