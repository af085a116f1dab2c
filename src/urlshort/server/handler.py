"""ASGI handler — translates ASGI scope/messages to urlshort types.

The only component that touches raw HTTP scopes directly. Converts the
scope to a ``Request``, awaits the handler, and sends the ``Response``
back through ASGI ``send()``.
"""

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.dispatch import Handler
from urlshort.errors import HTTPError
from urlshort.http.request import Request
from urlshort.server.errors import handle_http_error, handle_internal_error
from urlshort.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    handler: Handler,
    debug: bool = False,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug=debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send)
