# SPDX-License-Identifier: MIT
"""Scene nodes and their transform defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from gltfkit.document.defaults import (
    DEFAULT_MATRIX,
    DEFAULT_ROTATION,
    DEFAULT_SCALE,
    DEFAULT_TRANSLATION,
    is_zero,
)
from gltfkit.scene.transforms import Transform, parse_transform_matrix


def _vector(values: Sequence[float] | None, size: int, prop: str) -> tuple[float, ...] | None:
    if values is None:
        return None
    if len(values) != size:
        raise ValueError(f"Expected {size} elements for {prop}, got {len(values)}")
    return tuple(float(v) for v in values)


@dataclass
class Node:
    """A glTF node.

    Each transform attribute is None when the document omits it. The
    matrix is stored as 16 column-major floats.
    """

    name: str = ""
    children: list[int] = field(default_factory=list)
    mesh: int | None = None
    camera: int | None = None
    skin: int | None = None
    matrix: tuple[float, ...] | None = None
    rotation: tuple[float, float, float, float] | None = None
    scale: tuple[float, float, float] | None = None
    translation: tuple[float, float, float] | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Node:
        """Create a Node from a parsed JSON object.

        Raises:
            ValueError: If a transform property has the wrong length
        """
        return cls(
            name=d.get("name", ""),
            children=list(d.get("children", [])),
            mesh=d.get("mesh"),
            camera=d.get("camera"),
            skin=d.get("skin"),
            matrix=_vector(d.get("matrix"), 16, "matrix"),
            rotation=_vector(d.get("rotation"), 4, "rotation"),
            scale=_vector(d.get("scale"), 3, "scale"),
            translation=_vector(d.get("translation"), 3, "translation"),
        )

    def matrix_or_default(self) -> tuple[float, ...]:
        """Return the matrix, or identity when unset or all zeros."""
        if self.matrix is None or is_zero(self.matrix):
            return DEFAULT_MATRIX
        return self.matrix

    def rotation_or_default(self) -> tuple[float, float, float, float]:
        """Return the rotation, or the identity quaternion when unset or all zeros."""
        if self.rotation is None or is_zero(self.rotation):
            return DEFAULT_ROTATION
        return self.rotation

    def scale_or_default(self) -> tuple[float, float, float]:
        """Return the scale, or (1, 1, 1) when unset or all zeros."""
        if self.scale is None or is_zero(self.scale):
            return DEFAULT_SCALE
        return self.scale

    def translation_or_default(self) -> tuple[float, float, float]:
        """Return the translation, or the origin when unset.

        A zero translation is a real value and is returned as is.
        """
        if self.translation is None:
            return DEFAULT_TRANSLATION
        return self.translation

    def has_matrix(self) -> bool:
        return self.matrix is not None and not is_zero(self.matrix)

    def local_matrix(self) -> np.ndarray:
        """Get the node's local 4x4 transform.

        Uses the matrix when one is set, otherwise composes T * R * S from
        the resolved translation, rotation and scale.

        Returns:
            4x4 row-major numpy array
        """
        if self.has_matrix():
            return parse_transform_matrix(self.matrix_or_default())

        return Transform(
            translation=self.translation_or_default(),
            rotation=self.rotation_or_default(),
            scale=self.scale_or_default(),
        ).to_matrix()
