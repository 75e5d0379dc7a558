"""Route, RouteMatch and the handler variants, all frozen dataclasses."""

import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Invocable:
    """A handler called directly with the captured path parameters."""

    func: Callable[..., Any]

    @property
    def label(self) -> str:
        return getattr(self.func, "__qualname__", None) or repr(self.func)


@dataclass(frozen=True, slots=True)
class ScriptReference:
    """A handler backed by a Python file on disk.

    The file is loaded fresh on every dispatch and its entry-point function
    is called with the captured path parameters.
    """

    path: Path

    @property
    def label(self) -> str:
        return str(self.path)


Handler = Invocable | ScriptReference


def as_handler(value: object) -> Handler:
    """Coerce a registration argument into a handler variant.

    Callables become ``Invocable``; strings and path-likes become
    ``ScriptReference``. Existence of a script is checked at dispatch time.
    """
    if isinstance(value, (Invocable, ScriptReference)):
        return value
    if isinstance(value, (str, os.PathLike)):
        return ScriptReference(Path(value))
    if callable(value):
        return Invocable(value)
    msg = (
        f"Route handler must be a callable or a path to a script, "
        f"got {type(value).__name__}"
    )
    raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``matcher`` and ``placeholders`` are derived from ``path`` once, at
    registration, by the router.
    """

    method: str
    path: str
    matcher: re.Pattern[str]
    handler: Handler
    placeholders: tuple[str, ...] = ()
    name: str | None = None

    def describe(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: tuple[str, ...]

    @property
    def path_params(self) -> dict[str, str]:
        """Captured values keyed by placeholder name.

        A name used twice in one template keeps its last value.
        """
        return dict(zip(self.route.placeholders, self.params, strict=True))
