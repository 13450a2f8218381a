"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from shallot.cli import app
from shallot.core.design_tokens import DesignTokens
from shallot.core.dtcg_export import generate_dtcg_tokens
from shallot.core.hsl import HSLColor
from shallot.core.palette import ColorScheme


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def themed_project(project_dir: Path) -> Path:
    """Create a project with a themespec.yaml."""
    (project_dir / "themespec.yaml").write_text(
        """
seed:
  hex: "#0ea5e9"
scheme: triadic
prefix: brand
"""
    )
    return project_dir


def test_version(cli_runner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "shallot" in result.stdout


def test_css_defaults(cli_runner, project_dir: Path):
    """Without a themespec the default theme is printed."""
    result = cli_runner.invoke(app, ["css", "--project", str(project_dir)])
    assert result.exit_code == 0
    assert result.stdout == DesignTokens.default().to_css_string() + "\n"


def test_css_uses_themespec(cli_runner, themed_project: Path):
    result = cli_runner.invoke(app, ["css", "--project", str(themed_project)])
    assert result.exit_code == 0
    assert "--brand-color-primary:" in result.stdout
    assert "--sh-" not in result.stdout


def test_css_seed_override(cli_runner, project_dir: Path):
    result = cli_runner.invoke(
        app,
        ["css", "--project", str(project_dir), "--seed", "#3b82f6", "--scheme", "complementary"],
    )
    assert result.exit_code == 0
    expected = DesignTokens.new(HSLColor.from_hex("#3b82f6"), ColorScheme.COMPLEMENTARY)
    assert result.stdout == expected.to_css_string() + "\n"


def test_css_custom_selector(cli_runner, project_dir: Path):
    result = cli_runner.invoke(
        app, ["css", "--project", str(project_dir), "--selector", "[data-theme=brand]"]
    )
    assert result.exit_code == 0
    assert result.stdout.startswith("[data-theme=brand] {")


def test_invalid_seed_fails(cli_runner, project_dir: Path):
    result = cli_runner.invoke(app, ["css", "--project", str(project_dir), "--seed", "#12"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_invalid_themespec_fails(cli_runner, project_dir: Path):
    (project_dir / "themespec.yaml").write_text("spacing:\n  ratio: 10\n")
    result = cli_runner.invoke(app, ["css", "--project", str(project_dir)])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_variables_json(cli_runner, project_dir: Path):
    result = cli_runner.invoke(app, ["variables", "--project", str(project_dir)])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == DesignTokens.default().to_css_variables()
    assert data["sh-breakpoint-md"] == "768px"


def test_contrast_table(cli_runner, project_dir: Path):
    result = cli_runner.invoke(app, ["contrast", "--project", str(project_dir)])
    assert result.exit_code == 0
    assert "Contrast against surface" in result.stdout
    assert "text_muted" in result.stdout


def test_contrast_unknown_role(cli_runner, project_dir: Path):
    result = cli_runner.invoke(
        app, ["contrast", "--project", str(project_dir), "--against", "wallpaper"]
    )
    assert result.exit_code == 1
    assert "Unknown palette role" in result.output


def test_dtcg_writes_file(cli_runner, project_dir: Path, tmp_path: Path):
    output = tmp_path / "out" / "tokens.json"
    result = cli_runner.invoke(app, ["dtcg", str(output), "--project", str(project_dir)])
    assert result.exit_code == 0
    assert "Wrote" in result.stdout
    assert json.loads(output.read_text()) == generate_dtcg_tokens(DesignTokens.default())


def test_breakpoints(cli_runner):
    result = cli_runner.invoke(app, ["breakpoints"])
    assert result.exit_code == 0
    assert "768px" in result.stdout
    assert "(base)" in result.stdout


def test_css_preset_option(cli_runner, project_dir: Path):
    result = cli_runner.invoke(app, ["css", "--project", str(project_dir), "--preset", "ocean"])
    assert result.exit_code == 0
    assert result.stdout == DesignTokens.preset("ocean").to_css_string() + "\n"


def test_preset_option_replaces_file_seed(cli_runner, themed_project: Path):
    result = cli_runner.invoke(
        app, ["variables", "--project", str(themed_project), "--preset", "frost"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    expected = DesignTokens.preset("frost").palette.primary.to_css()
    assert data["brand-color-primary"] == expected


def test_unknown_preset_fails(cli_runner, project_dir: Path):
    result = cli_runner.invoke(app, ["css", "--project", str(project_dir), "--preset", "neon"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_presets_listing(cli_runner):
    result = cli_runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    assert "obsidian" in result.stdout
    assert "midnight" in result.stdout


def test_version_falls_back_when_not_installed(monkeypatch, tmp_path: Path):
    from importlib.metadata import PackageNotFoundError

    from shallot import _version

    def not_installed(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(_version, "__file__", str(tmp_path / "a" / "b" / "_version.py"))
    monkeypatch.setattr(_version, "_metadata_version", not_installed)
    assert _version.get_version() == "0.0.0"


def test_version_lookup_errors_propagate(monkeypatch, tmp_path: Path):
    from shallot import _version

    def broken(name: str) -> str:
        raise RuntimeError("metadata unreadable")

    monkeypatch.setattr(_version, "__file__", str(tmp_path / "a" / "b" / "_version.py"))
    monkeypatch.setattr(_version, "_metadata_version", broken)
    with pytest.raises(RuntimeError):
        _version.get_version()
