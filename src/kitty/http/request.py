"""Immutable HTTP request.

Frozen metadata with async body access. Captured path parameters ride
on the request itself: the dispatcher derives a new request carrying
them instead of mutating the original.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from kitty._internal.asgi import HTTPScope, Receive


async def _empty_receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the decoded path, ``raw_path`` the escaped one the router
    splits. ``path_params`` is ``None`` until a route with parameter
    segments matched; see ``kitty.routing.params.var``.
    """

    method: str
    path: str
    raw_path: str = ""
    headers: tuple[tuple[bytes, bytes], ...] = ()
    query_string: bytes = b""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None
    path_params: Mapping[str, str] | None = None

    # Private: ASGI receive callable for body streaming
    _receive: Receive = field(default=_empty_receive, repr=False, compare=False)

    # Private: body cache, shared with derived requests
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.raw_path:
            object.__setattr__(self, "raw_path", self.path)

    # -- Headers --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        key = name.lower().encode("latin-1")
        for raw_name, value in self.headers:
            if raw_name.lower() == key:
                return value.decode("latin-1")
        return default

    @property
    def user_agent(self) -> str:
        return self.header("user-agent", "") or ""

    @property
    def remote_addr(self) -> str:
        """Client address as ``host:port``, or ``"-"`` when unknown."""
        if self.client is None:
            return "-"
        host, port = self.client
        return f"{host}:{port}"

    # -- Path parameters --

    def param(self, key: str, default: str | None = None) -> str | None:
        """Return the captured path parameter *key*, or *default*."""
        if self.path_params is None:
            return default
        return self.path_params.get(key, default)

    def with_path_params(self, params: Mapping[str, str]) -> Request:
        """Return a new Request carrying *params*. ``self`` is unchanged."""
        return replace(self, path_params=MappingProxyType(dict(params)))

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached, so the ASGI receive is consumed once.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON."""
        return json.loads(await self.body())

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        parsed = HTTPScope.from_scope(scope)
        return cls(
            method=parsed.method,
            path=parsed.path,
            raw_path=parsed.raw_path,
            headers=parsed.headers,
            query_string=parsed.query_string,
            http_version=parsed.http_version,
            client=parsed.client,
            _receive=receive,
        )
