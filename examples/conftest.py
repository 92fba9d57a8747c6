"""Fixtures for the example apps.

Each example directory holds an ``app.py`` exposing a module-level
``router``, plus the helper modules it imports by bare name (the
key-value example imports ``store``).
"""

import importlib.util
from pathlib import Path

import pytest

from kitty import Router


@pytest.fixture
def example_router(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> Router:
    """A router built by a fresh run of the test's sibling ``app.py``.

    Running the module again per test gives every test its own store.
    """
    example_dir = Path(request.path).parent
    monkeypatch.syspath_prepend(str(example_dir))

    module_name = f"_kitty_example_{example_dir.name}"
    loader_spec = importlib.util.spec_from_file_location(module_name, example_dir / "app.py")
    assert loader_spec is not None and loader_spec.loader is not None
    app_module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(app_module)

    router = app_module.router
    assert isinstance(router, Router)
    return router
