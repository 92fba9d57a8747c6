"""Kitty exception hierarchy.

Route matching itself never raises: a missing route is the not-found
fallback, a bad escape is a ``DecodeFallback``, a missing parameter is
``found=False``. These types cover configuration mistakes only.
"""


class KittyError(Exception):
    """Base for all kitty-specific errors."""


class ConfigurationError(KittyError):
    """Raised when a route pattern or router setting is invalid.

    Only raised for malformed patterns when the route table is strict;
    lenient tables log a warning and register the route as written.
    """
