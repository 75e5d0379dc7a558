"""Template compilation — ``/blog/:id/:slug`` to an anchored regex.

Literal spans are escaped, placeholders are replaced by the fragment
registered for their name, and the result must match the whole path.
"""

import re

from wren.routing.params import PatternRegistry

PLACEHOLDER_RE = re.compile(r":([a-zA-Z0-9_]+)")


def normalize_path(path: str) -> str:
    """Normalize a template or request path for matching.

    Guarantees a leading slash and strips one trailing slash, except for
    the root itself::

        "/blog/42/"    -> "/blog/42"
        "admin/users"  -> "/admin/users"
        ""             -> "/"
    """
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def parse_template(template: str) -> tuple[str, ...]:
    """Return placeholder names in left-to-right order.

    Examples::

        "/blog/:id/:slug" -> ("id", "slug")
        "/about"          -> ()
    """
    return tuple(PLACEHOLDER_RE.findall(template))


def compile_template(template: str, registry: PatternRegistry) -> re.Pattern[str]:
    """Compile a route template into an anchored matcher.

    ``/item/:id.json`` compiles to ``^(?:/item/(?:([0-9]+))\\.json)\\Z``: the
    dot is literal, ``:id`` resolves through *registry*. Each fragment and
    the whole body sit in non-capturing groups, so a fragment with a
    top-level ``|`` stays inside its own segment and both anchors hold.
    """
    path = normalize_path(template)
    parts: list[str] = []
    pos = 0
    for match in PLACEHOLDER_RE.finditer(path):
        parts.append(re.escape(path[pos : match.start()]))
        parts.append("(?:" + registry.resolve(match.group(1)) + ")")
        pos = match.end()
    parts.append(re.escape(path[pos:]))
    return re.compile("^(?:" + "".join(parts) + r")\Z")
