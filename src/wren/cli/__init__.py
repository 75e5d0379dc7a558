"""Wren CLI — inspect a router from the command line.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — a small HTTP request router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- wren url ---------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Build a URL from a route name or template")
    url_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    url_parser.add_argument("route", help="Route name or raw template (e.g. /blog/:id)")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Placeholder values",
    )

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a request would hit")
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("uri", help="Request target (e.g. /blog/42?ref=feed)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "url":
        from wren.cli._url import run_url

        run_url(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
