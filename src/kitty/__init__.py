"""kitty - a small, precise HTTP router.

Routes are precise: a request for ``/hello/world`` does not match the
route ``/hello/``. Named ``:param`` segments capture one path segment
each, and the first registered route that matches wins.

Basic usage::

    from kitty import Router, var

    async def get_val(request):
        key, found = var(request, "key")
        ...

    router = Router()
    router.add("GET", "/val/:key", get_val)
    router.run()
"""

__version__ = "0.1.0"
__all__ = [
    "AccessLog",
    "ConfigurationError",
    "KittyError",
    "Request",
    "Response",
    "Router",
    "RouterConfig",
    "get_request",
    "var",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API."""
    if name == "Router":
        from kitty.routing.router import Router

        return Router

    if name == "RouterConfig":
        from kitty.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from kitty.http.request import Request

        return Request

    if name == "Response":
        from kitty.http.response import Response

        return Response

    if name == "var":
        from kitty.routing.params import var

        return var

    if name == "get_request":
        from kitty.context import get_request

        return get_request

    if name == "AccessLog":
        from kitty.middleware.access_log import AccessLog

        return AccessLog

    if name in ("KittyError", "ConfigurationError"):
        from kitty import errors

        return getattr(errors, name)

    msg = f"module 'kitty' has no attribute {name!r}"
    raise AttributeError(msg)
