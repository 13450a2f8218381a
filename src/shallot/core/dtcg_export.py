"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG-compliant tokens.json file from DesignTokens.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .design_tokens import DesignTokens

logger = logging.getLogger(__name__)


def generate_dtcg_tokens(tokens: DesignTokens) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens.

    Groups tokens into: color, fontSize, fontFamily, dimension, shadow.
    Colors are exported as hex since DTCG tools expect sRGB hex values.

    Args:
        tokens: DesignTokens to export.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    groups = tokens.token_groups()
    dtcg: dict[str, Any] = {}

    # Color group, one entry per palette role
    color_group: dict[str, Any] = {}
    for role, color in tokens.palette.roles().items():
        color_group[role.replace("_", "-")] = {"$type": "color", "$value": color.to_hex()}
    dtcg["color"] = color_group

    typography = groups["typography"]
    dtcg["fontSize"] = {
        name.removeprefix("font-size-"): {"$type": "fontSize", "$value": value}
        for name, value in typography.items()
        if name.startswith("font-size-")
    }
    dtcg["fontFamily"] = {
        name.removeprefix("font-family-"): {"$type": "fontFamily", "$value": value}
        for name, value in typography.items()
        if name.startswith("font-family-")
    }

    # Dimension group (spacing + radii + breakpoints)
    dimension_group: dict[str, Any] = {}
    for group in ("spacing", "radius", "breakpoint"):
        for name, value in groups[group].items():
            dimension_group[name] = {"$type": "dimension", "$value": value}
    dtcg["dimension"] = dimension_group

    dtcg["shadow"] = {
        name: {"$type": "shadow", "$value": value} for name, value in groups["shadow"].items()
    }

    return dtcg


def export_dtcg_file(tokens: DesignTokens, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        tokens: DesignTokens to export.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.
    """
    data = generate_dtcg_tokens(tokens)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(data, indent=2),
        encoding="utf-8",
    )

    logger.info(f"Wrote DTCG tokens to {output_path}")
    return output_path
