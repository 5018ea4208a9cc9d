# SPDX-License-Identifier: MIT
"""Document entities with format-default resolution."""

from .buffers import Buffer, Image
from .materials import (
    AlphaMode,
    Material,
    NormalTexture,
    OcclusionTexture,
    PBRMetallicRoughness,
    TextureInfo,
)
from .nodes import Node

__all__ = [
    "Buffer",
    "Image",
    "Node",
    "Material",
    "PBRMetallicRoughness",
    "NormalTexture",
    "OcclusionTexture",
    "TextureInfo",
    "AlphaMode",
]
