"""Fixtures for the runnable examples.

Each example directory holds an ``app.py`` that renders its pages at import
time. ``example_app`` imports that script afresh for every test, so a test
only ever sees the output of its own run.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Import the app.py beside the requesting test and return the module."""
    script = Path(request.path).with_name("app.py")
    module_spec = importlib.util.spec_from_file_location(
        f"strata_example_{script.parent.name}", script
    )
    assert module_spec is not None and module_spec.loader is not None
    app = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(app)
    return app
