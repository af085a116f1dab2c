"""Middleware protocol and the redirect middleware.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> AnyResponse: ...

No base class required. ``RedirectMiddleware`` is the dispatcher in this
shape: ``next`` plays the part of the fallback.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol, TypeAlias

from urlshort.dispatch import AnyResponse, Handler, redirect_response
from urlshort.http.request import Request
from urlshort.redirections import Redirections

# The next handler in the middleware chain
Next: TypeAlias = Handler


class Middleware(Protocol):
    """Protocol for urlshort middleware.

    Accepts both functions and callable objects::

        async def timing(request: Request, next: Next) -> AnyResponse:
            start = time.monotonic()
            response = await next(request)
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")
    """

    async def __call__(self, request: Request, next: Next) -> AnyResponse: ...


class RedirectMiddleware:
    """Redirect configured paths, pass everything else down the chain.

    Accepts either a path→URL mapping or a decoded ``Redirections``
    table (reduced with last-wins)::

        mw = RedirectMiddleware({"/docs": "https://example.com/docs"})
        app = App(chain(mw, not_found))
    """

    __slots__ = ("_paths",)

    def __init__(self, paths_to_urls: Mapping[str, str] | Redirections) -> None:
        if isinstance(paths_to_urls, Redirections):
            paths_to_urls = paths_to_urls.map()
        self._paths: Mapping[str, str] = MappingProxyType(dict(paths_to_urls))

    @property
    def paths(self) -> Mapping[str, str]:
        return self._paths

    async def __call__(self, request: Request, next: Next) -> AnyResponse:
        response = redirect_response(self._paths, request)
        if response is None:
            return await next(request)
        return response


def chain(middleware: Middleware, handler: Handler) -> Handler:
    """Wrap *handler* with *middleware*, yielding a plain handler."""

    async def wrapped(request: Request) -> AnyResponse:
        return await middleware(request, handler)

    return wrapped
