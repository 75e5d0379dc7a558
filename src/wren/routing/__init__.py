"""Routing — per-method route tables with first-match-wins dispatch.

Routes are registered during startup and read-only afterwards. Templates
use ``:name`` placeholders whose name selects the matching pattern.
"""

from wren.routing.route import Invocable, Route, RouteMatch, ScriptReference
from wren.routing.router import Group, Router

__all__ = [
    "Group",
    "Invocable",
    "Route",
    "RouteMatch",
    "Router",
    "ScriptReference",
]
