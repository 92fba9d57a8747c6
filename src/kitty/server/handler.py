"""ASGI handler: translates ASGI scope/messages to kitty types.

Builds a Request from the scope, dispatches it through the router on
its escaped path, and sends the Response back through ASGI send().
Exceptions escaping a handler stop here: they are logged and answered
with a 500, the router never sees them again.
"""

from typing import TYPE_CHECKING

from kitty._internal.asgi import Receive, Scope, Send
from kitty.http.request import Request
from kitty.server.errors import handle_internal_error
from kitty.server.sender import send_response

if TYPE_CHECKING:
    from kitty.routing.router import Router


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: "Router",
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the router."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await router.dispatch(request.method, request.raw_path, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send)
