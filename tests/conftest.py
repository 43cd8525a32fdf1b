"""
Pytest configuration and fixtures for oodesign tests.
"""

import textwrap
from pathlib import Path

import pytest
import yaml

from oodesign.application.linter import HandbookLinter
from oodesign.application.renderer import HandbookRenderer
from oodesign.infrastructure.catalog_loader import CatalogLoader
from oodesign.infrastructure.config import DEFAULT_CATALOG_PATH, LintConfig, RenderConfig


@pytest.fixture
def loader():
    """Loader over the catalog shipped with the package."""
    return CatalogLoader(DEFAULT_CATALOG_PATH)


@pytest.fixture
def lint_config():
    return LintConfig()


@pytest.fixture
def linter(lint_config):
    return HandbookLinter(lint_config)


@pytest.fixture
def render_config():
    return RenderConfig()


@pytest.fixture
def renderer(loader, render_config):
    return HandbookRenderer(loader, render_config)


@pytest.fixture
def principle_data():
    """A valid catalog entry pointing at real example modules."""
    return {
        "id": "demo",
        "acronym": "DEMO",
        "title": "Demo Principle",
        "family": "guideline",
        "order": 1,
        "summary": "A principle used by tests.",
        "violations": ["Something is wrong."],
        "before": {"module": "oodesign.examples.lsp.before", "symbols": ["Rectangle"]},
        "after": {"module": "oodesign.examples.lsp.after", "symbols": ["Shape", "Rectangle"]},
    }


@pytest.fixture
def write_catalog(tmp_path):
    """Write {file stem: data} as YAML files and return the catalog directory."""
    catalog_dir = tmp_path / "catalog"
    catalog_dir.mkdir()

    def _write(entries: dict) -> Path:
        for stem, data in entries.items():
            text = data if isinstance(data, str) else yaml.safe_dump(data, sort_keys=False)
            (catalog_dir / f"{stem}.yaml").write_text(text, encoding="utf-8")
        return catalog_dir

    return _write


@pytest.fixture
def markdown():
    """Dedent an inline markdown document."""
    def _md(text: str) -> str:
        return textwrap.dedent(text).lstrip("\n")
    return _md


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: Tests spanning catalog, renderer and linter"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
