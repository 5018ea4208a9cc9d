# SPDX-License-Identifier: MIT
"""Color and transform math for glTF scenes."""

from .color import RGB, RGBA, srgb_to_linear, srgb_to_linear_array
from .transforms import Transform, parse_transform_matrix

__all__ = [
    "RGB",
    "RGBA",
    "srgb_to_linear",
    "srgb_to_linear_array",
    "Transform",
    "parse_transform_matrix",
]
