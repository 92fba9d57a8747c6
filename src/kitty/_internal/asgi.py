"""Typed ASGI definitions.

Raw ASGI aliases plus a typed view of the HTTP scope for internal use.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from a raw ASGI scope dict.

    ``raw_path`` is the still-escaped path as sent on the wire; routing
    splits this form, never the decoded ``path``.
    """

    method: str
    path: str
    raw_path: str
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    http_version: str
    client: tuple[str, int] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse a raw ASGI scope into a typed object."""
        raw = scope.get("raw_path")
        raw_path = raw.decode("latin-1") if raw else scope["path"]
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            raw_path=raw_path,
            query_string=scope.get("query_string", b""),
            headers=tuple(scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
