"""Serve a router with pounce.

Pounce's ``run()`` takes an import string, but we hold a live router
object, so ``pounce.Server`` is used directly with the ASGI callable.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from kitty.middleware.access_log import AccessLog

if TYPE_CHECKING:
    from kitty.routing.router import Router

logger = logging.getLogger("kitty.server")


def serve(
    router: Router,
    *,
    host: str | None = None,
    port: int | None = None,
    app_path: str | None = None,
    **overrides: Any,
) -> None:
    """Start a pounce server for *router*. Blocks until shutdown.

    Args:
        router: The router to serve.
        host: Override ``router.config.host``.
        port: Override ``router.config.port``.
        app_path: Optional ``"module:attribute"`` import string, lets
            pounce reimport the router when reloading.
        overrides: Any other ``RouterConfig`` field (``workers``,
            ``reload``, ``access_log``...).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = replace(router.config, **overrides)
    if host is not None:
        config = replace(config, host=host)
    if port is not None:
        config = replace(config, port=port)

    app: Any = AccessLog(router) if config.access_log else router

    server_config = ServerConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,
        reload=config.reload,
    )
    logger.info(
        "kitty serving %d route(s) on http://%s:%d", len(router.routes), config.host, config.port
    )
    Server(server_config, app, app_path=app_path).run()
