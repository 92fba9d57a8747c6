"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router and server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(port=8080, access_log=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 1
    reload: bool = False

    # Logging
    access_log: bool = True
    log_level: str = "info"

    # Routing: reject bare ``:`` and duplicate parameter names at registration
    strict: bool = False
