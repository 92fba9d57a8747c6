"""ASGI wrappers that sit in front of a router."""

from kitty.middleware.access_log import AccessLog

__all__ = ["AccessLog"]
