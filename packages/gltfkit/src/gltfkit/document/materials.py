# SPDX-License-Identifier: MIT
"""glTF materials and their format defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from gltfkit.document.defaults import (
    DEFAULT_ALPHA_CUTOFF,
    DEFAULT_BASE_COLOR_FACTOR,
    DEFAULT_EMISSIVE_FACTOR,
    DEFAULT_METALLIC_FACTOR,
    DEFAULT_NORMAL_SCALE,
    DEFAULT_OCCLUSION_STRENGTH,
    DEFAULT_ROUGHNESS_FACTOR,
    DEFAULT_TEX_COORD,
)
from gltfkit.scene.color import RGBA


class AlphaMode(Enum):
    """How the alpha value of the base color is interpreted."""

    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"


def _optional_float(d: dict[str, Any], key: str) -> float | None:
    value = d.get(key)
    return None if value is None else float(value)


def _optional_int(d: dict[str, Any], key: str) -> int | None:
    value = d.get(key)
    return None if value is None else int(value)


@dataclass
class TextureInfo:
    """Reference to a texture and the UV set it uses."""

    index: int
    tex_coord: int = DEFAULT_TEX_COORD

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TextureInfo:
        """Create from a textureInfo JSON object.

        Raises:
            ValueError: If the texture index is missing
        """
        index = _optional_int(d, "index")
        if index is None:
            raise ValueError("Texture reference is missing its index")
        return cls(index=index, tex_coord=int(d.get("texCoord", DEFAULT_TEX_COORD)))


@dataclass
class NormalTexture:
    """Tangent-space normal map reference."""

    index: int | None = None
    tex_coord: int = DEFAULT_TEX_COORD
    scale: float | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> NormalTexture:
        return cls(
            index=_optional_int(d, "index"),
            tex_coord=int(d.get("texCoord", DEFAULT_TEX_COORD)),
            scale=_optional_float(d, "scale"),
        )

    def scale_or_default(self) -> float:
        """Return the normal scale, 1.0 when unset."""
        if self.scale is None:
            return DEFAULT_NORMAL_SCALE
        return self.scale


@dataclass
class OcclusionTexture:
    """Ambient occlusion map reference."""

    index: int | None = None
    tex_coord: int = DEFAULT_TEX_COORD
    strength: float | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> OcclusionTexture:
        return cls(
            index=_optional_int(d, "index"),
            tex_coord=int(d.get("texCoord", DEFAULT_TEX_COORD)),
            strength=_optional_float(d, "strength"),
        )

    def strength_or_default(self) -> float:
        """Return the occlusion strength, 1.0 when unset."""
        if self.strength is None:
            return DEFAULT_OCCLUSION_STRENGTH
        return self.strength


@dataclass
class PBRMetallicRoughness:
    """Metallic-roughness parameters of a material."""

    base_color_factor: RGBA | None = None
    base_color_texture: TextureInfo | None = None
    metallic_factor: float | None = None
    roughness_factor: float | None = None
    metallic_roughness_texture: TextureInfo | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PBRMetallicRoughness:
        """Create from the pbrMetallicRoughness JSON object.

        Raises:
            ValueError: If baseColorFactor does not have 4 components
        """
        factor = d.get("baseColorFactor")
        base_tex = d.get("baseColorTexture")
        mr_tex = d.get("metallicRoughnessTexture")
        return cls(
            base_color_factor=None if factor is None else RGBA.from_sequence(factor),
            base_color_texture=None if base_tex is None else TextureInfo.from_dict(base_tex),
            metallic_factor=_optional_float(d, "metallicFactor"),
            roughness_factor=_optional_float(d, "roughnessFactor"),
            metallic_roughness_texture=None if mr_tex is None else TextureInfo.from_dict(mr_tex),
        )

    def base_color_factor_or_default(self) -> RGBA:
        """Return the base color factor, opaque white when unset."""
        if self.base_color_factor is None:
            return RGBA(*DEFAULT_BASE_COLOR_FACTOR)
        return self.base_color_factor

    def metallic_factor_or_default(self) -> float:
        """Return the metallic factor, 1.0 when unset."""
        if self.metallic_factor is None:
            return DEFAULT_METALLIC_FACTOR
        return self.metallic_factor

    def roughness_factor_or_default(self) -> float:
        """Return the roughness factor, 1.0 when unset."""
        if self.roughness_factor is None:
            return DEFAULT_ROUGHNESS_FACTOR
        return self.roughness_factor


@dataclass
class Material:
    """A glTF material."""

    name: str = ""
    pbr_metallic_roughness: PBRMetallicRoughness | None = None
    normal_texture: NormalTexture | None = None
    occlusion_texture: OcclusionTexture | None = None
    emissive_texture: TextureInfo | None = None
    emissive_factor: tuple[float, float, float] | None = None
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    alpha_cutoff: float | None = None
    double_sided: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Material:
        """Create a Material from a parsed JSON object.

        Raises:
            ValueError: On an unknown alphaMode or a malformed factor
        """
        pbr = d.get("pbrMetallicRoughness")
        normal = d.get("normalTexture")
        occlusion = d.get("occlusionTexture")
        emissive_tex = d.get("emissiveTexture")

        emissive = d.get("emissiveFactor")
        if emissive is not None:
            if len(emissive) != 3:
                raise ValueError(f"Expected 3 elements for emissiveFactor, got {len(emissive)}")
            emissive = tuple(float(v) for v in emissive)

        return cls(
            name=d.get("name", ""),
            pbr_metallic_roughness=None if pbr is None else PBRMetallicRoughness.from_dict(pbr),
            normal_texture=None if normal is None else NormalTexture.from_dict(normal),
            occlusion_texture=None if occlusion is None else OcclusionTexture.from_dict(occlusion),
            emissive_texture=None if emissive_tex is None else TextureInfo.from_dict(emissive_tex),
            emissive_factor=emissive,
            alpha_mode=AlphaMode(d.get("alphaMode", AlphaMode.OPAQUE.value)),
            alpha_cutoff=_optional_float(d, "alphaCutoff"),
            double_sided=bool(d.get("doubleSided", False)),
        )

    def alpha_cutoff_or_default(self) -> float:
        """Return the alpha cutoff, 0.5 when unset."""
        if self.alpha_cutoff is None:
            return DEFAULT_ALPHA_CUTOFF
        return self.alpha_cutoff

    def emissive_factor_or_default(self) -> tuple[float, float, float]:
        if self.emissive_factor is None:
            return DEFAULT_EMISSIVE_FACTOR
        return self.emissive_factor

    def pbr_metallic_roughness_or_default(self) -> PBRMetallicRoughness:
        """Return the PBR block; an empty one resolves every factor to its default."""
        if self.pbr_metallic_roughness is None:
            return PBRMetallicRoughness()
        return self.pbr_metallic_roughness
