"""Shared pytest fixtures for the Firebase Architect UI test suite.

Provides reusable fixtures for:
- Temporary project directories (with and without a web app package.json)
- Sample architecture documents with a ``uiTemplate`` block
- Fresh configurators and resolution contexts
- A template that targets an unrecognised framework
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from firebase_architect.configurator import TemplateConfigurator
from firebase_architect.context import DesignSystemContext, create_context
from firebase_architect.template_library import UITemplate, get_template


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory for generated projects (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def project_with_package_json(tmp_project_dir: Path) -> Path:
    """Project whose web app already has a package.json."""
    web = tmp_project_dir / "apps" / "web"
    web.mkdir(parents=True)
    (web / "package.json").write_text(
        json.dumps(
            {
                "name": "web",
                "version": "0.0.1",
                "dependencies": {"react": "^18.2.0", "@mui/material": "^5.0.0"},
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    return tmp_project_dir


# ---------------------------------------------------------------------------
# Architecture documents
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_architecture() -> dict[str, Any]:
    """Architecture document selecting material-modern with overrides."""
    return {
        "projectName": "refill-tracker",
        "uiTemplate": {
            "templateId": "material-modern",
            "customization": {
                "colors": {"primary": "#6c63ff"},
                "typography": {"fontSize": 15},
                "borderRadius": 12,
            },
        },
    }


# ---------------------------------------------------------------------------
# Configurators & contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def material_configurator() -> TemplateConfigurator:
    return TemplateConfigurator("material-modern")


@pytest.fixture
def material_context() -> DesignSystemContext:
    return create_context("material", "blue")


@pytest.fixture
def linear_context() -> DesignSystemContext:
    return create_context("linear", "blue")


@pytest.fixture
def unknown_framework_template() -> UITemplate:
    """A copy of material-modern relabelled with a framework nothing renders."""
    base = get_template("material-modern")
    assert base is not None
    return base.model_copy(update={"id": "retro-web", "framework": "Retro Web 1.0"})
