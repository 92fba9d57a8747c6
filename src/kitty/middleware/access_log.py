"""Access log wrapper.

Wraps any ASGI app (usually a ``Router``) and logs one line per HTTP
request: method, path, client address, user agent and status::

    app = AccessLog(router)

This is a plain wrapper, not a middleware chain; compose by nesting.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from kitty._internal.asgi import ASGIApp, Receive, Scope, Send
from kitty.http.request import Request

access_logger = logging.getLogger("kitty.access")


class AccessLog:
    """Log each HTTP request handled by the wrapped app."""

    __slots__ = ("app", "logger")

    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None) -> None:
        self.app = app
        self.logger = logger or access_logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request.from_asgi(scope, receive)
        status = 0

        async def send_wrapper(message: MutableMapping[str, Any]) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            self.logger.info(
                "%s %s %s %s %d",
                request.method,
                request.path,
                request.remote_addr,
                request.user_agent or "-",
                status,
            )
