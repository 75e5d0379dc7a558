"""Locate the router a ``wren`` subcommand should inspect.

Targets are ``module[:attr]`` (``myapp:router``) or a Python file with an
optional attribute (``examples/blog/app.py:router``). The attribute
defaults to ``router``. Files are executed with the same loader script
handlers use, so nothing is added to ``sys.modules``.
"""

import importlib
import sys
from pathlib import Path

from wren.errors import InvalidHandler
from wren.routing.handlers import load_module
from wren.routing.router import Router


def load_router(target: str) -> Router:
    """Return the ``Router`` named by *target*, or print why not and exit 1."""
    source, _, attr_name = target.partition(":")
    attr_name = attr_name or "router"

    try:
        if source.endswith(".py"):
            module = load_module(Path(source))
        else:
            module = importlib.import_module(source)
        router = getattr(module, attr_name)
    except (ImportError, AttributeError, FileNotFoundError, InvalidHandler) as exc:
        print(f"Error: cannot load {target!r}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not isinstance(router, Router):
        print(
            f"Error: {target!r} is a {type(router).__name__}, not a wren.Router",
            file=sys.stderr,
        )
        raise SystemExit(1)
    return router
