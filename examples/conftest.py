"""Shared pytest configuration for wren examples.

``example_router`` runs the ``app.py`` next to the requesting test through
wren's own file loader, so each test gets a freshly built route table.
"""

from pathlib import Path

import pytest

from wren.routing.handlers import load_module


@pytest.fixture
def example_router(request: pytest.FixtureRequest):
    return load_module(Path(request.path).parent / "app.py").router
