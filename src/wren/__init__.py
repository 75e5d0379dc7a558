"""Wren — a small HTTP request router.

Maps a method and path to a handler, extracts typed ``:name`` parameters,
and builds URLs back from named routes.

Basic usage::

    from wren import Router

    router = Router()
    router.get("/", lambda: "Home", name="home")
    router.get("/blog/:id/:slug", "pages/blog_detail.py", name="blog_show")

    router.dispatch("/blog/42/hello", "GET")
    router.build_url("blog_show", id=42, slug="hello")  # "/blog/42/hello"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Group",
    "HTTPError",
    "InvalidHandler",
    "Invocable",
    "MethodNotSupported",
    "NotFound",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "ScriptReference",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("Group", "Invocable", "Route", "RouteMatch", "Router", "ScriptReference"):
        from wren import routing as _routing

        return getattr(_routing, name)

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name in (
        "ConfigurationError",
        "HTTPError",
        "InvalidHandler",
        "MethodNotSupported",
        "NotFound",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
