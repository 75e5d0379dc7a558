"""Handler invocation — call an ``Invocable`` or run a ``ScriptReference``.

Both variants receive the captured path parameters positionally, as
strings. Whatever the handler raises propagates to the caller unchanged.

Script files define a function (``handle`` by default)::

    # scripts/blog_detail.py
    def handle(post_id, slug):
        return f"Post {post_id}: {slug}"
"""

import importlib.util
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import Any

from wren.errors import InvalidHandler
from wren.routing.route import Handler, Invocable, ScriptReference


def load_module(path: Path) -> ModuleType:
    """Execute the Python file at *path* in a new, unregistered module.

    Nothing is added to ``sys.modules``; every call gets its own globals.
    Raises ``InvalidHandler`` if the file is not loadable as Python.
    """
    spec = importlib.util.spec_from_file_location(f"_wren_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise InvalidHandler(f"Not a loadable Python file: {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def load_script(script: ScriptReference, entrypoint: str) -> Callable[..., Any]:
    """Load *script* fresh and return its entry-point function.

    Raises ``InvalidHandler`` if the file is missing, cannot be loaded, or
    does not define a callable *entrypoint*.
    """
    if not script.path.is_file():
        raise InvalidHandler(f"Script handler not found: {script.path}")

    func = getattr(load_module(script.path), entrypoint, None)
    if func is None or not callable(func):
        raise InvalidHandler(f"Script handler {script.path} does not define {entrypoint}()")
    return func


def invoke(handler: Handler, params: tuple[str, ...], *, entrypoint: str = "handle") -> Any:
    """Call *handler* with *params* and return its result."""
    if isinstance(handler, Invocable):
        return handler.func(*params)
    return load_script(handler, entrypoint)(*params)
