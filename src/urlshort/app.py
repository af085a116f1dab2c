"""urlshort ASGI application.

Wraps one request handler (usually a ``RedirectHandler``) as an ASGI 3.0
callable, answering the lifespan protocol itself.
"""

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.config import AppConfig
from urlshort.dispatch import Handler
from urlshort.server.handler import handle_request

logger = logging.getLogger("urlshort.server")


class App:
    """ASGI application serving a single handler.

    Usage::

        handler = yaml_handler(Path("redirects.yaml").read_bytes(), not_found)
        app = App(handler)
        app.run()
    """

    __slots__ = ("config", "handler")

    def __init__(self, handler: Handler, config: AppConfig | None = None) -> None:
        self.handler = handler
        self.config: AppConfig = config or AppConfig()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, handler=self.handler, debug=self.config.debug)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge startup and shutdown; there is nothing to set up."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.debug("startup")
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                logger.debug("shutdown")
                await send({"type": "lifespan.shutdown.complete"})
                return

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with uvicorn until interrupted."""
        import uvicorn

        uvicorn.run(
            self,
            host=host or self.config.host,
            port=port or self.config.port,
            log_level=self.config.log_level,
        )
