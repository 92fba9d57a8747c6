"""Request-scoped context via ContextVar.

``request_var`` holds the request being handled: the derived request
carrying path parameters when the route captured any. The dispatcher
sets it around each handler call and resets it afterwards, so code
deep inside a handler can reach the request without it being passed
down.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. Concurrent requests never see each other's value.
"""

from contextvars import ContextVar

from kitty.http.request import Request

request_var: ContextVar[Request] = ContextVar("kitty_request")
"""The current request. Set by ``Router.dispatch`` around the handler call."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a handler.
    """
    return request_var.get()
