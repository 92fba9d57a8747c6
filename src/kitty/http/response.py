"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

TEXT_PLAIN = "text/plain; charset=utf-8"
APPLICATION_JSON = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = TEXT_PLAIN
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_json(cls, data: Any, status: int = 200) -> Response:
        """Build an ``application/json`` response from *data*."""
        return cls(body=json_module.dumps(data), status=status, content_type=APPLICATION_JSON)

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    @property
    def json(self) -> Any:
        """Body parsed as JSON."""
        return json_module.loads(self.body_bytes)


def to_response(value: Any) -> Response:
    """Convert a handler's return value to a Response.

    ``Response`` passes through, ``str``/``bytes`` become ``text/plain``,
    ``dict``/``list`` become JSON, ``None`` becomes an empty 200.
    """
    if isinstance(value, Response):
        return value
    if isinstance(value, str | bytes):
        return Response(body=value)
    if isinstance(value, dict | list):
        return Response.from_json(value)
    if value is None:
        return Response()
    msg = f"Handler returned {type(value).__name__}; expected Response, str, bytes, dict or list"
    raise TypeError(msg)
