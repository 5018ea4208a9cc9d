# SPDX-License-Identifier: MIT
"""Conversion of 8-bit sRGB samples to glTF material factors.

glTF stores color factors (baseColorFactor, emissiveFactor) in linear
space, while textures and picked colors are usually 8-bit sRGB. Color
channels go through the sRGB transfer function; alpha is an opacity and
is only normalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

# sRGB transfer function constants (IEC 61966-2-1)
SRGB_THRESHOLD = 0.04045
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4


def srgb_to_linear(c: float) -> float:
    """Convert a normalized sRGB component to linear.

    Args:
        c: sRGB value in [0, 1]

    Returns:
        Linear value
    """
    if c <= SRGB_THRESHOLD:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def _channel(value: int) -> float:
    return srgb_to_linear(value / 255.0)


@dataclass(frozen=True)
class RGB:
    """Linear RGB color factor."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def white(cls) -> RGB:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_8bit(cls, r: int, g: int, b: int) -> RGB:
        """Create from 8-bit sRGB channels (0-255)."""
        return cls(r=_channel(r), g=_channel(g), b=_channel(b))

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class RGBA:
    """Linear RGB color factor with linear alpha."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def white(cls) -> RGBA:
        """Opaque white, the default base color factor."""
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def from_8bit(cls, r: int, g: int, b: int, a: int = 255) -> RGBA:
        """Create from 8-bit sRGB channels and an 8-bit alpha."""
        return cls(r=_channel(r), g=_channel(g), b=_channel(b), a=a / 255.0)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> RGBA:
        """Create from four already linear floats."""
        if len(values) != 4:
            raise ValueError(f"Expected 4 color components, got {len(values)}")
        r, g, b, a = (float(v) for v in values)
        return cls(r=r, g=g, b=b, a=a)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to RGBA tuple."""
        return (self.r, self.g, self.b, self.a)


def srgb_to_linear_array(colors: np.ndarray) -> np.ndarray:
    """Convert many 8-bit sRGB samples at once.

    Args:
        colors: Array of shape (N, 3) or (N, 4) with values 0-255

    Returns:
        float64 array of the same shape; the alpha column is normalized only
    """
    colors = np.asarray(colors)
    if colors.ndim != 2 or colors.shape[1] not in (3, 4):
        raise ValueError(f"Expected an (N, 3) or (N, 4) array, got {colors.shape}")

    normalized = colors.astype(np.float64) / 255.0
    rgb = normalized[:, :3]
    normalized[:, :3] = np.where(
        rgb <= SRGB_THRESHOLD,
        rgb / SRGB_SLOPE,
        ((rgb + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )
    return normalized
