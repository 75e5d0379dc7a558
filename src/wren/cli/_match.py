"""``wren match`` — show which route a request would be dispatched to.

Only matches; the handler is never invoked.
"""

import argparse
import sys

from wren.cli._resolve import load_router
from wren.errors import HTTPError


def run_match(args: argparse.Namespace) -> None:
    router = load_router(args.router)
    try:
        found = router.match(args.uri, args.method)
    except HTTPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    route = found.route
    print(f"{route.describe()}  ->  {route.handler.label}")
    if route.name:
        print(f"name: {route.name}")
    for key, value in zip(route.placeholders, found.params, strict=True):
        print(f"  {key} = {value}")
