"""Kitty CLI: serve a router or list its routes.

Entry point registered as ``kitty`` in ``pyproject.toml``::

    [project.scripts]
    kitty = "kitty.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``kitty`` command."""
    parser = argparse.ArgumentParser(
        prog="kitty",
        description="kitty - a small, precise HTTP router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- kitty run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a router with pounce")
    run_parser.add_argument("app", help="Import string (e.g. myapp:router)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument("--workers", type=int, default=None, help="Worker count")
    run_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    run_parser.add_argument(
        "--no-access-log",
        action="store_true",
        help="Do not log one line per request",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Log level (defaults to the router config)",
    )

    # -- kitty routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:router)")

    args = parser.parse_args(argv)

    if args.command == "run":
        from kitty.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from kitty.cli._routes import run_routes

        run_routes(args)
    else:
        parser.print_help()
        sys.exit(0)


def configure_logging(level: str) -> None:
    """Send kitty's loggers to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
