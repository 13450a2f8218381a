"""Shared pytest fixtures for shallot tests."""

from pathlib import Path

import pytest

from shallot.core import DesignTokens, HSLColor


@pytest.fixture
def seed() -> HSLColor:
    """Return a mid-saturation blue seed color."""
    return HSLColor(210, 60, 45)


@pytest.fixture
def default_tokens() -> DesignTokens:
    """Return the library default theme."""
    return DesignTokens.default()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project root for themespec files."""
    root = tmp_path / "project"
    root.mkdir()
    return root
