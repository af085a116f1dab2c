"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups. Redirections are not configuration: they come
from a decoder and are baked into the handler.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Server settings. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=9000, fallback_body="Hello, world!")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False

    # Logging
    log_level: str = "info"

    # Plain-text answer for unmatched paths; None means 404
    fallback_body: str | None = None
