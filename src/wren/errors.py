"""Wren exception hierarchy.

Shared across the router, the handler invoker, and the CLI so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when router configuration or a route registration is invalid.

    Always raised during the registration phase, never by ``dispatch()``.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher. The transport layer catches these and turns
    ``status``, ``detail`` and ``headers`` into a wire response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — the method is known but no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotSupported(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — no route collection exists for the request method at all.

    Carries an ``Allow`` header listing the methods the router knows.
    """

    def __init__(
        self, method: str, allowed: frozenset[str] = frozenset(), detail: str = ""
    ) -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method {method!r} not supported"
        if allow_value:
            default_detail = f"{default_detail}. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),) if allow_value else (),
        )


class InvalidHandler(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """500 — the matched route's handler cannot be invoked.

    Raised when a script handler's file is missing or does not expose
    a callable entry point.
    """

    def __init__(self, detail: str = "Invalid route handler") -> None:
        super().__init__(status=500, detail=detail)
