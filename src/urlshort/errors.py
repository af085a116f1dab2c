"""urlshort exception hierarchy.

Shared across decoders, the ASGI handler, and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when a redirect source cannot be set up.

    Unknown decoder formats and unreadable config files end up here.
    """


class SchemaError(ValueError):
    """A parsed document does not have the redirection shape.

    Raised inside the decoders and always chained as the cause of a
    ``DecodeError``.
    """

    def __init__(self, message: str, *, index: int | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.field = field


class DecodeError(UrlshortError):
    """Raw configuration bytes could not be decoded into redirections.

    Always raised ``from`` the underlying parser or schema exception, so
    ``__cause__`` carries the original diagnostic unchanged.
    """

    def __init__(self, format: str, detail: str) -> None:  # noqa: A002
        super().__init__(f"invalid {format} redirections: {detail}")
        self.format = format
        self.detail = detail


@dataclass(frozen=True, slots=True)
class HTTPError(UrlshortError):
    """An error that maps directly to an HTTP status code.

    Raised by fallback handlers. The ASGI handler catches these and
    turns them into a plain response with the given status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — nothing is configured for the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
