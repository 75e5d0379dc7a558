"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(
            duplicate_names="error",
            patterns={"year": r"([0-9]{4})"},
        )
    """

    # Methods that exist (with an empty route list) before any registration
    methods: tuple[str, ...] = ("GET", "POST")
    # Create a route list for an unknown method on its first registration
    allow_new_methods: bool = True

    # Named routes: "replace" keeps the last registration, "error" rejects repeats
    duplicate_names: Literal["replace", "error"] = "replace"

    # Extra placeholder types, name -> regex fragment with one capturing group
    patterns: Mapping[str, str] = field(default_factory=dict)

    # Function a script handler must define; called with the captured params
    script_entrypoint: str = "handle"
