"""Test utilities for kitty routers.

    from kitty.testing import TestClient
"""

from kitty.testing.client import TestClient

__all__ = ["TestClient"]
