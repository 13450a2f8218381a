"""
ThemeSpec persistence layer.

Handles reading and writing theme configurations to themespec.yaml in a
project root. A ThemeSpec drives deterministic token generation from a
small set of declarative parameters.

Default location: {project_root}/themespec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ErrorContext, ThemeSpecError
from .ir.themespec import ThemeSpecYAML

logger = logging.getLogger(__name__)

THEMESPEC_FILE = "themespec.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_themespec_path(project_root: Path) -> Path:
    """Get the themespec.yaml file path."""
    return project_root / THEMESPEC_FILE


def themespec_exists(project_root: Path) -> bool:
    """Check if a themespec.yaml exists in the project."""
    return get_themespec_path(project_root).exists()


def create_default_themespec() -> ThemeSpecYAML:
    return ThemeSpecYAML()


# =============================================================================
# Loading
# =============================================================================


def _first_error_field(error: ValidationError) -> str | None:
    errors = error.errors()
    if not errors:
        return None
    return ".".join(str(part) for part in errors[0]["loc"]) or None


def parse_themespec_data(data: dict[str, Any], source: Path | None = None) -> ThemeSpecYAML:
    """Validate raw YAML data into a ThemeSpecYAML.

    Raises:
        ThemeSpecError: If the data does not match the schema.
    """
    try:
        return ThemeSpecYAML.model_validate(data)
    except ValidationError as e:
        context = ErrorContext(file=source, field=_first_error_field(e)) if source else None
        raise ThemeSpecError(f"Invalid ThemeSpec schema: {e}", context) from e


def load_themespec(project_root: Path, *, use_defaults: bool = True) -> ThemeSpecYAML:
    """Load ThemeSpec from themespec.yaml.

    Args:
        project_root: Root directory of the project.
        use_defaults: If True, return default ThemeSpec when file doesn't exist.

    Returns:
        ThemeSpecYAML instance.

    Raises:
        ThemeSpecError: If file doesn't exist (when use_defaults=False) or invalid.
    """
    themespec_path = get_themespec_path(project_root)

    if not themespec_path.exists():
        if use_defaults:
            logger.debug("No themespec.yaml found, using defaults")
            return create_default_themespec()
        raise ThemeSpecError(f"ThemeSpec not found: {themespec_path}")

    try:
        content = themespec_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ThemeSpecError(f"Invalid YAML in {themespec_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty themespec.yaml at {themespec_path}, using defaults")
            return create_default_themespec()
        raise ThemeSpecError(f"Empty or invalid YAML in {themespec_path}")

    if not isinstance(data, dict):
        raise ThemeSpecError(
            f"Expected a mapping at the top of {themespec_path}, got {type(data).__name__}"
        )

    logger.debug(f"Loaded ThemeSpec from {themespec_path}")
    return parse_themespec_data(data, source=themespec_path)


def save_themespec(project_root: Path, themespec: ThemeSpecYAML) -> Path:
    """Save ThemeSpec to themespec.yaml.

    Args:
        project_root: Root directory of the project.
        themespec: ThemeSpecYAML to save.

    Returns:
        Path to the saved themespec.yaml file.
    """
    themespec_path = get_themespec_path(project_root)

    # Only fields the user set, so a preset is not pinned by dumped defaults
    data = themespec.model_dump(mode="json", exclude_unset=True, exclude_none=True)

    themespec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved ThemeSpec to {themespec_path}")
    return themespec_path
