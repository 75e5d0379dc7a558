"""URL generation — expand ``:name`` placeholders in a template.

Missing parameters are not an error: the placeholder is kept as-is, so
``/blog/:id/:slug`` with ``{"id": 7}`` expands to ``/blog/7/:slug``.
"""

import re
from collections.abc import Mapping

from wren.routing.compiler import PLACEHOLDER_RE


def expand_template(template: str, params: Mapping[str, object]) -> str:
    """Substitute ``str(params[name])`` for every ``:name`` in *template*.

    Values are not checked against the placeholder's type.
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in params:
            return str(params[key])
        return match.group(0)

    return PLACEHOLDER_RE.sub(_replace, template)
