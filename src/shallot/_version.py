"""Single source of truth for the shallot version."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """Version from pyproject.toml in a source checkout, else from installed metadata."""
    pyproject = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text(encoding="utf-8")
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)
    try:
        return _metadata_version("shallot")
    except PackageNotFoundError:
        return _FALLBACK_VERSION
