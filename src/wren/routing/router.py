"""Route table with first-match-wins dispatch.

Routes are kept per HTTP method in registration order. Dispatch walks the
method's list and invokes the first route whose matcher accepts the path.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeAlias
from urllib.parse import urlsplit

from wren.config import RouterConfig
from wren.errors import ConfigurationError, MethodNotSupported, NotFound
from wren.routing.compiler import compile_template, normalize_path, parse_template
from wren.routing.handlers import invoke
from wren.routing.params import PatternRegistry
from wren.routing.route import Route, RouteMatch, as_handler
from wren.routing.urls import expand_template

logger = logging.getLogger("wren.routing")

Decorator: TypeAlias = Callable[[Callable[..., Any]], Callable[..., Any]]


class _Registrar(ABC):
    """HTTP-verb shortcuts shared by ``Router`` and ``Group``.

    Each shortcut takes ``(path, handler, name)``. Without a handler it
    returns a decorator that registers the decorated function::

        @router.get("/blog/:id", name="blog_show")
        def show(post_id): ...
    """

    __slots__ = ()

    @abstractmethod
    def add_route(
        self, method: str, path: str, handler: object, name: str | None = None
    ) -> Route: ...

    def _verb(
        self, method: str, path: str, handler: object | None, name: str | None
    ) -> Route | Decorator:
        if handler is not None:
            return self.add_route(method, path, handler, name)

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add_route(method, path, func, name)
            return func

        return decorator

    def get(self, path: str, handler: object | None = None, name: str | None = None) -> Any:
        return self._verb("GET", path, handler, name)

    def post(self, path: str, handler: object | None = None, name: str | None = None) -> Any:
        return self._verb("POST", path, handler, name)

    def put(self, path: str, handler: object | None = None, name: str | None = None) -> Any:
        return self._verb("PUT", path, handler, name)

    def patch(self, path: str, handler: object | None = None, name: str | None = None) -> Any:
        return self._verb("PATCH", path, handler, name)

    def delete(self, path: str, handler: object | None = None, name: str | None = None) -> Any:
        return self._verb("DELETE", path, handler, name)

    def group(self, prefix: str, body: "Callable[[Group], object]") -> None:
        """Register the routes in *body* under a common path prefix.

        *body* is called immediately with a ``Group`` whose registrations
        land in this registrar with ``prefix/`` prepended::

            router.group("admin", lambda r: r.get("users/:id", show_user))
            # registers GET admin/users/:id
        """
        body(Group(prefix.rstrip("/"), self))


class Group(_Registrar):
    """A prefix bound to a parent registrar.

    Built by ``group()`` and handed to its body. Registrations are
    forwarded to the parent with the prefix applied; nested groups stack
    their prefixes.
    """

    __slots__ = ("parent", "prefix")

    def __init__(self, prefix: str, parent: _Registrar) -> None:
        self.prefix = prefix
        self.parent = parent

    def add_route(
        self, method: str, path: str, handler: object, name: str | None = None
    ) -> Route:
        return self.parent.add_route(method, f"{self.prefix}/{path.lstrip('/')}", handler, name)

    def __repr__(self) -> str:
        return f"<Group {self.prefix!r}>"


class Router(_Registrar):
    """Per-method route table with named-route URL generation.

    Usage::

        router = Router()
        router.get("/", index, name="home")
        router.get("/blog/:id/:slug", "pages/blog_detail.py", name="blog_show")

        router.dispatch("/blog/42/hello?ref=feed", "get")
        router.build_url("blog_show", {"id": 42, "slug": "hello"})

    Register everything before dispatching; the router does no locking.
    """

    __slots__ = ("_frozen", "_named", "_patterns", "_routes", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig()
        if self.config.duplicate_names not in ("replace", "error"):
            msg = (
                f"duplicate_names must be 'replace' or 'error', "
                f"got {self.config.duplicate_names!r}"
            )
            raise ConfigurationError(msg)
        self._patterns = PatternRegistry(self.config.patterns)
        self._routes: dict[str, list[Route]] = {
            method.upper(): [] for method in self.config.methods
        }
        self._named: dict[str, str] = {}
        self._frozen = False

    # -- Registration --

    def add_route(
        self, method: str, path: str, handler: object, name: str | None = None
    ) -> Route:
        """Compile *path* and append a route for *method*.

        *handler* is a callable or a path to a script file. A non-empty
        *name* makes the template available to ``build_url()``.
        """
        if self._frozen:
            msg = "Cannot add routes after the router is frozen."
            raise RuntimeError(msg)

        method = method.upper()
        if method not in self._routes and not self.config.allow_new_methods:
            allowed = ", ".join(sorted(self._routes))
            msg = f"HTTP method {method!r} is not declared. Declared methods: {allowed}"
            raise ConfigurationError(msg)

        route = Route(
            method=method,
            path=path,
            matcher=compile_template(path, self._patterns),
            handler=as_handler(handler),
            placeholders=parse_template(path),
            name=name or None,
        )
        if route.name is not None:
            self._register_name(route.name, path)
        self._routes.setdefault(method, []).append(route)
        logger.debug("Registered %s %s -> %s", method, path, route.handler.label)
        return route

    def _register_name(self, name: str, path: str) -> None:
        previous = self._named.get(name)
        if previous is not None:
            if self.config.duplicate_names == "error":
                msg = f"Route name {name!r} is already registered for {previous!r}"
                raise ConfigurationError(msg)
            logger.warning("Route name %r re-registered: %r replaces %r", name, path, previous)
        self._named[name] = path

    def freeze(self) -> None:
        """End the registration phase. Later registrations raise ``RuntimeError``."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Introspection --

    @property
    def methods(self) -> frozenset[str]:
        """Every method with a route list, including empty declared ones."""
        return frozenset(self._routes)

    @property
    def routes(self) -> list[Route]:
        """All routes, grouped by method, each group in registration order."""
        return [route for routes in self._routes.values() for route in routes]

    @property
    def named_routes(self) -> Mapping[str, str]:
        return MappingProxyType(self._named)

    # -- Dispatch --

    def match(self, uri: str, method: str) -> RouteMatch:
        """Find the first route for *method* that matches the path of *uri*.

        Scheme, host, query string and fragment of *uri* are ignored.

        Raises ``MethodNotSupported`` if *method* has no route list.
        Raises ``NotFound`` if no route for *method* matches the path.
        """
        path = normalize_path(urlsplit(uri).path)
        method = method.upper()

        routes = self._routes.get(method)
        if routes is None:
            raise MethodNotSupported(method, self.methods)

        for route in routes:
            found = route.matcher.match(path)
            if found is not None:
                return RouteMatch(route=route, params=found.groups())

        logger.debug("No route matches %s %s", method, path)
        raise NotFound(f"No route matches {method} {path!r}")

    def dispatch(self, uri: str, method: str) -> Any:
        """Match *uri* and invoke the route's handler with the captured params.

        Returns whatever the handler returns. Raises the ``match()`` errors,
        ``InvalidHandler`` for an unusable script, and lets handler
        exceptions through untouched. Handlers that are neither callable nor
        a path never reach dispatch: ``add_route()`` rejects them with
        ``ConfigurationError``.
        """
        route_match = self.match(uri, method)
        logger.debug(
            "Dispatching %s to %s with %r",
            route_match.route.describe(),
            route_match.route.handler.label,
            route_match.params,
        )
        return invoke(
            route_match.route.handler,
            route_match.params,
            entrypoint=self.config.script_entrypoint,
        )

    # -- URL generation --

    def build_url(
        self, route_or_name: str, params: Mapping[str, object] | None = None, **kwargs: object
    ) -> str:
        """Build a URL from a route name or a raw template.

        Names registered with a route resolve to their template; anything
        else is expanded as a template itself. Placeholders without a value
        are left in place::

            router.build_url("blog_show", id=42, slug="hello")  # "/blog/42/hello"
            router.build_url("/blog/:id/:slug", {"id": 7})       # "/blog/7/:slug"
        """
        template = self._named.get(route_or_name, route_or_name)
        return expand_template(template, {**(params or {}), **kwargs})

    url_for = build_url

    def __repr__(self) -> str:
        counts = ", ".join(f"{m}={len(r)}" for m, r in self._routes.items())
        return f"<Router {counts}>"
