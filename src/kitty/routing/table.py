"""Append-only route table.

Routes keep their registration order; that order is the match priority.
There is no removal operation.
"""

import logging
from collections.abc import Iterator

from kitty._internal.types import Handler
from kitty.errors import ConfigurationError
from kitty.routing.route import Parameter, Route, Segment, parse_segment

logger = logging.getLogger("kitty.routing")


def clean_path(path: str) -> str:
    """Normalize a path for splitting.

    Prepends a missing leading ``/`` and strips one trailing ``/``
    unless the path is the root. Shared by registration and dispatch
    so both sides split identically.

    Examples::

        "/a/"  -> "/a"
        "a"    -> "/a"
        "/"    -> "/"
    """
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def split_path(path: str) -> list[str]:
    """Split a cleaned path, dropping the component before the leading slash."""
    return path.split("/")[1:]


def parse_path(path: str) -> tuple[Segment, ...]:
    """Parse a route path string into segments.

    Examples::

        "/val"              -> (Literal("val"),)
        "/val/:key"         -> (Literal("val"), Parameter("key"))
        "/val/:key/:action" -> (Literal("val"), Parameter("key"), Parameter("action"))
    """
    return tuple(parse_segment(text) for text in split_path(clean_path(path)))


def pattern_problems(segments: tuple[Segment, ...]) -> list[str]:
    """Describe empty or duplicate parameter names in a parsed pattern."""
    problems: list[str] = []
    seen: set[str] = set()
    for position, seg in enumerate(segments):
        if not isinstance(seg, Parameter):
            continue
        if not seg.name:
            problems.append(f"segment {position} is a bare ':' with no parameter name")
        elif seg.name in seen:
            problems.append(f"parameter {seg.name!r} is repeated at segment {position}")
        seen.add(seg.name)
    return problems


class RouteTable:
    """Ordered, append-only collection of routes.

    Usage::

        table = RouteTable()
        table.add("GET", "/val/:key", get_val)
        for route in table:
            ...

    With ``strict=True``, patterns with a bare ``:`` or a repeated
    parameter name raise ``ConfigurationError``. Otherwise they are
    registered as written (a repeated name binds the last occurrence)
    and a warning is logged.
    """

    __slots__ = ("_routes", "strict")

    def __init__(self, *, strict: bool = False) -> None:
        self._routes: list[Route] = []
        self.strict = strict

    def add(self, method: str, path: str, handler: Handler) -> None:
        """Register *handler* for *method* and *path*. An empty *path* is ignored."""
        if not path:
            logger.debug("Ignoring %s route with an empty path", method)
            return

        cleaned = clean_path(path)
        segments = parse_path(cleaned)

        problems = pattern_problems(segments)
        if problems:
            detail = "; ".join(problems)
            if self.strict:
                msg = f"Invalid route pattern {method} {path!r}: {detail}"
                raise ConfigurationError(msg)
            logger.warning("Route pattern %s %r: %s", method, path, detail)

        self._routes.append(Route(method=method, path=cleaned, segments=segments, handler=handler))

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in match priority order."""
        return tuple(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)
