"""Placeholder types and their regex fragments.

Built-in types for route placeholders like ``:id`` or ``:slug``. The
placeholder name selects the type; unknown names match like ``:any``.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from wren.errors import ConfigurationError

FALLBACK_TYPE = "any"

# Each fragment is exactly one capturing group so captures stay positional
BUILTIN_PATTERNS: Mapping[str, str] = MappingProxyType(
    {
        "id": r"([0-9]+)",
        "slug": r"([a-zA-Z0-9-]+)",
        "any": r"([^/]+)",
    }
)


def _check_fragment(name: str, fragment: str) -> None:
    try:
        compiled = re.compile(fragment)
    except re.error as exc:
        msg = f"Pattern for placeholder type {name!r} is not a valid regex: {exc}"
        raise ConfigurationError(msg) from exc
    if compiled.groups != 1:
        msg = (
            f"Pattern for placeholder type {name!r} must contain exactly one "
            f"capturing group, found {compiled.groups}: {fragment!r}"
        )
        raise ConfigurationError(msg)


class PatternRegistry:
    """Immutable mapping from placeholder type name to regex fragment.

    Usage::

        registry = PatternRegistry({"year": r"([0-9]{4})"})
        registry.resolve("year")     # "([0-9]{4})"
        registry.resolve("unknown")  # "([^/]+)"

    Extra patterns may also override a built-in. Every fragment is
    validated once, here, so compilation never has to.
    """

    __slots__ = ("_patterns",)

    def __init__(self, extra: Mapping[str, str] | None = None) -> None:
        patterns = dict(BUILTIN_PATTERNS)
        for name, fragment in (extra or {}).items():
            _check_fragment(name, fragment)
            patterns[name] = fragment
        self._patterns: Mapping[str, str] = MappingProxyType(patterns)

    def resolve(self, type_name: str) -> str:
        """Return the fragment for *type_name*, falling back to ``any``."""
        return self._patterns.get(type_name, self._patterns[FALLBACK_TYPE])

    @property
    def types(self) -> frozenset[str]:
        return frozenset(self._patterns)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._patterns
