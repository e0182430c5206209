"""Shared test fixtures for unitconv tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from unitconv.server.factory import create_app
from unitconv.web.rendering import PageRenderer

# ---------------------------------------------------------------------------
# Minimal templates for renderer tests that need to control template content
# ---------------------------------------------------------------------------

MINIMAL_TEMPLATES = {
    "form.html": "FORM {{ category.label }}:{% for unit in category.units %}[{{ unit }}]{% endfor %}",
    "result.html": "RESULT {{ num }} {{ to_unit }}",
    "error.html": "ERROR {{ message }}",
}

BROKEN_TEMPLATE = "{{ nothing.here }}"


def write_templates(directory: Path, **overrides: str) -> Path:
    """Write the minimal page templates into ``directory``.

    Keyword overrides replace a template's content, keyed by file stem
    (``form``, ``result``, ``error``).
    """
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in MINIMAL_TEMPLATES.items():
        stem = name.removesuffix(".html")
        (directory / name).write_text(overrides.get(stem, content))
    return directory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> PageRenderer:
    """Renderer over the packaged templates."""
    return PageRenderer.default()


@pytest.fixture
def app() -> Starlette:
    return create_app()


@pytest.fixture
def client(app: Starlette) -> TestClient:
    return TestClient(app)


@pytest.fixture
def minimal_templates_dir(tmp_path: Path) -> Path:
    return write_templates(tmp_path / "templates")
