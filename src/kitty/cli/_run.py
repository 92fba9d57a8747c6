"""``kitty run``: serve a router with pounce."""

import argparse
import sys
from typing import Any

from kitty.cli import configure_logging
from kitty.cli._resolve import resolve_router
from kitty.server.run import serve


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it. CLI flags override router config."""
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(args.log_level or router.config.log_level)

    overrides: dict[str, Any] = {}
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.reload:
        overrides["reload"] = True
    if args.no_access_log:
        overrides["access_log"] = False

    serve(router, host=args.host, port=args.port, app_path=args.app, **overrides)
