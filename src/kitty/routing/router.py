"""Router: first-registered, first-matched dispatch over a route table.

Routes are matched segment by segment in registration order. There is
no specificity ranking: ``/found/:key`` registered before
``/found/hello`` wins for ``/found/hello``.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from kitty._internal.asgi import Receive, Scope, Send
from kitty._internal.invoke import invoke
from kitty._internal.types import Handler
from kitty.config import RouterConfig
from kitty.context import request_var
from kitty.http.request import Request
from kitty.http.response import Response, to_response
from kitty.routing.params import DecodeFallback, decode_segment
from kitty.routing.route import Literal, Route, RouteMatch
from kitty.routing.table import RouteTable, clean_path, split_path
from kitty.server.handler import handle_request

logger = logging.getLogger("kitty.routing")

DEFAULT_NOT_FOUND_BODY = "404.4 – No handler configured."


def default_not_found(request: Request) -> Response:
    """Built-in fallback used when no not-found handler is configured."""
    return Response(body=DEFAULT_NOT_FOUND_BODY, status=404)


def match_route(route: Route, method: str, segments: Sequence[str]) -> RouteMatch | None:
    """Match request *segments* against one route.

    Method and segment count must be equal. Literal segments compare
    exactly; parameter segments always match and capture the decoded
    request segment. A repeated parameter name keeps the last value.
    Nothing is decoded until every literal segment has matched.
    """
    if method != route.method or len(segments) != len(route.segments):
        return None

    pairs = list(zip(route.segments, segments, strict=True))
    for pattern, text in pairs:
        if isinstance(pattern, Literal) and pattern.text != text:
            return None

    params: dict[str, str] = {}
    fallbacks: list[DecodeFallback] = []

    for pattern, text in pairs:
        if isinstance(pattern, Literal):
            continue

        result = decode_segment(text)
        if isinstance(result, DecodeFallback):
            fallbacks.append(result)
        params[pattern.name] = result.value

    return RouteMatch(route=route, path_params=params, fallbacks=tuple(fallbacks))


async def _call(handler: Handler, request: Request) -> Response:
    """Run *handler* with *request* published as the current request."""
    token = request_var.set(request)
    try:
        return to_response(await invoke(handler, request))
    finally:
        request_var.reset(token)


class Router:
    """Registers routes and dispatches requests to their handlers.

    A ``Router`` is also an ASGI application, so it can be served
    directly or wrapped (e.g. by ``AccessLog``)::

        router = Router(not_found=not_found)
        router.add("GET", "/val/:key", get_val)

        @router.route("DELETE", "/val/:key")
        async def delete_val(request): ...

        router.run()

    Thread safety:
        Registration is single-threaded and must finish before serving.
        The first ASGI call freezes the router; later ``add()`` calls
        raise ``RuntimeError``. Dispatch only reads the table.
    """

    __slots__ = ("_frozen", "config", "not_found", "table")

    def __init__(
        self,
        not_found: Handler | None = None,
        *,
        config: RouterConfig | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self.not_found: Handler | None = not_found
        self.table = RouteTable(strict=self.config.strict)
        self._frozen = False

    # -- Registration --

    def add(self, method: str, path: str, handler: Handler) -> None:
        """Register a route. See ``RouteTable.add``."""
        self._check_not_frozen()
        self.table.add(method, path, handler)

    def route(self, method: str, path: str) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator."""

        def decorator(func: Handler) -> Handler:
            self.add(method, path, func)
            return func

        return decorator

    @property
    def routes(self) -> tuple[Route, ...]:
        return self.table.routes

    # -- Matching and dispatch --

    def match(self, method: str, raw_path: str) -> RouteMatch | None:
        """Return the first route matching *method* and *raw_path*, if any.

        *raw_path* is the escaped request path; it is cleaned and split
        exactly like registered paths, without decoding first.
        """
        segments = split_path(clean_path(raw_path))
        for route in self.table:
            found = match_route(route, method, segments)
            if found is not None:
                for fallback in found.fallbacks:
                    logger.debug(
                        "Binding raw segment %r for %s %s: %s",
                        fallback.value,
                        method,
                        raw_path,
                        fallback.reason,
                    )
                return found
        return None

    async def dispatch(self, method: str, raw_path: str, request: Request) -> Response:
        """Invoke exactly one handler for the request and return its response.

        The matched handler receives a derived request carrying the
        captured parameters, or the original request when there are
        none. Without a match the not-found handler runs. Handler
        exceptions are not caught here.
        """
        found = self.match(method, raw_path)
        if found is None:
            return await _call(self.not_found or default_not_found, request)

        if found.path_params:
            request = request.with_path_params(found.path_params)
        return await _call(found.route.handler, request)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Freezes the router on first use, answers lifespan scopes, and
        hands HTTP scopes to the request handler.
        """
        self._ensure_frozen()

        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, router=self, debug=self.config.debug)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.info("Serving %d route(s)", len(self.table))
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def run(self, host: str | None = None, port: int | None = None, **overrides: Any) -> None:
        """Serve this router with pounce. Blocks until the server stops."""
        from kitty.server.run import serve

        serve(self, host=host, port=port, **overrides)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot add routes after the router has started serving requests. "
                "Register every route before calling router.run()."
            )
            raise RuntimeError(msg)
