"""HTTP types: immutable Request and Response."""

from kitty.http.request import Request
from kitty.http.response import Response

__all__ = ["Request", "Response"]
