"""``wren url`` — build a URL from a route name or raw template."""

import argparse
import sys

from wren.cli._resolve import load_router


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=42", "slug=hello"]`` into ``{"id": "42", "slug": "hello"}``.

    Raises ``ValueError`` for an item without ``=``.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    router = load_router(args.router)
    try:
        params = parse_params(args.params)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    print(router.build_url(args.route, params))
