# SPDX-License-Identifier: MIT
"""Values the glTF 2.0 format applies when a property is omitted."""

from __future__ import annotations

# Node transform
DEFAULT_MATRIX = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)  # fmt: skip
DEFAULT_ROTATION = (0.0, 0.0, 0.0, 1.0)
DEFAULT_SCALE = (1.0, 1.0, 1.0)
DEFAULT_TRANSLATION = (0.0, 0.0, 0.0)

# Material
DEFAULT_ALPHA_CUTOFF = 0.5
DEFAULT_BASE_COLOR_FACTOR = (1.0, 1.0, 1.0, 1.0)
DEFAULT_METALLIC_FACTOR = 1.0
DEFAULT_ROUGHNESS_FACTOR = 1.0
DEFAULT_EMISSIVE_FACTOR = (0.0, 0.0, 0.0)
DEFAULT_OCCLUSION_STRENGTH = 1.0
DEFAULT_NORMAL_SCALE = 1.0
DEFAULT_TEX_COORD = 0


def is_zero(values: tuple[float, ...]) -> bool:
    """Check for the all-zero encoding some exporters write for 'unset'."""
    return all(v == 0 for v in values)
