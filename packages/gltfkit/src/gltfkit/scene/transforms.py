# SPDX-License-Identifier: MIT
"""Transform utilities for glTF node data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Transform:
    """Decomposed transform with translation, rotation, and scale."""

    translation: tuple[float, float, float]
    rotation: tuple[float, float, float, float]  # Quaternion (x, y, z, w)
    scale: tuple[float, float, float]

    @classmethod
    def identity(cls) -> Transform:
        """Create an identity transform."""
        return cls(
            translation=(0.0, 0.0, 0.0),
            rotation=(0.0, 0.0, 0.0, 1.0),
            scale=(1.0, 1.0, 1.0),
        )

    def to_matrix(self) -> np.ndarray:
        """Convert to a 4x4 transformation matrix (T * R * S)."""
        trans_mat = np.eye(4, dtype=np.float64)
        trans_mat[:3, 3] = self.translation

        rot = np.eye(4, dtype=np.float64)
        rot[:3, :3] = quaternion_to_rotation_matrix(self.rotation)

        scale_mat = np.diag([self.scale[0], self.scale[1], self.scale[2], 1.0])

        return trans_mat @ rot @ scale_mat


def quaternion_to_rotation_matrix(
    q: Sequence[float],
) -> np.ndarray:
    """Convert a unit quaternion (x, y, z, w) to a 3x3 rotation matrix."""
    x, y, z, w = q
    return np.array(
        [
            [1 - 2 * y * y - 2 * z * z, 2 * x * y - 2 * z * w, 2 * x * z + 2 * y * w],
            [2 * x * y + 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z - 2 * x * w],
            [2 * x * z - 2 * y * w, 2 * y * z + 2 * x * w, 1 - 2 * x * x - 2 * y * y],
        ],
        dtype=np.float64,
    )


def parse_transform_matrix(matrix_data: Sequence[float] | np.ndarray) -> np.ndarray:
    """Parse a column-major 4x4 matrix as stored in glTF.

    Args:
        matrix_data: 16 floats in column-major order

    Returns:
        4x4 numpy array
    """
    if isinstance(matrix_data, np.ndarray):
        data = matrix_data.flatten()
    else:
        data = matrix_data

    if len(data) != 16:
        raise ValueError(f"Expected 16 matrix elements, got {len(data)}")

    # Column-major to row-major conversion
    return np.array(data, dtype=np.float64).reshape(4, 4).T
