"""Shared type aliases used across kitty modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: takes the (possibly derived) Request, returns a response value
Handler: TypeAlias = Callable[..., Any]
