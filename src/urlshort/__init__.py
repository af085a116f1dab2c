"""urlshort — exact-path permanent redirects with a fallback handler.

Redirections come from a YAML or JSON document; everything not listed
is handed to a fallback you supply.

Basic usage::

    from urlshort import App, yaml_handler
    from urlshort.fallbacks import not_found

    handler = yaml_handler(b"- path: /gh\\n  url: https://github.com\\n", not_found)
    App(handler).run()

Or from a plain mapping::

    from urlshort import map_handler
    handler = map_handler({"/gh": "https://github.com"}, fallback)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DecodeError",
    "HTTPError",
    "Handler",
    "NotFound",
    "Redirect",
    "RedirectHandler",
    "RedirectMiddleware",
    "Redirection",
    "Redirections",
    "Request",
    "Response",
    "UrlshortError",
    "json_handler",
    "map_handler",
    "reduce_to_mapping",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` from importing PyYAML until a decoder is
    actually used.
    """
    if name == "App":
        from urlshort.app import App

        return App

    if name == "AppConfig":
        from urlshort.config import AppConfig

        return AppConfig

    if name == "Request":
        from urlshort.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from urlshort.http import response as _resp

        return getattr(_resp, name)

    if name in ("Handler", "RedirectHandler", "map_handler"):
        from urlshort import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name == "RedirectMiddleware":
        from urlshort.middleware import RedirectMiddleware

        return RedirectMiddleware

    if name in ("Redirection", "Redirections", "reduce_to_mapping"):
        from urlshort import redirections as _redirections

        return getattr(_redirections, name)

    if name in ("json_handler", "yaml_handler"):
        from urlshort import decoders as _decoders

        return getattr(_decoders, name)

    if name in ("ConfigurationError", "DecodeError", "HTTPError", "NotFound", "UrlshortError"):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
