################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Rotation helpers for the motion math layer

Conventions:
    * Quaternions are stored in xyzw order, matching the pose stream
    * Rotation matrices are active rotations applied to column vectors
    * Homogeneous matrices are 4x4 row-major numpy arrays; flattening with
      order="F" gives the column-major layout used by the renderer
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def quat_to_rotation_matrix_xyzw(q_xyzw: Sequence[float]) -> np.ndarray:
    """
    Build the 3x3 rotation matrix of a unit quaternion in xyzw order

    The quaternion is used as given. A non-unit quaternion produces a
    non-orthonormal matrix.
    """

    x: float = float(q_xyzw[0])
    y: float = float(q_xyzw[1])
    z: float = float(q_xyzw[2])
    w: float = float(q_xyzw[3])

    xx: float = x * x
    yy: float = y * y
    zz: float = z * z

    xy: float = x * y
    xz: float = x * z
    yz: float = y * z

    wx: float = w * x
    wy: float = w * y
    wz: float = w * z

    return np.array(
        [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy)],
            [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx)],
            [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy)],
        ],
        dtype=np.float64,
    )


def axis_angle_rotation_matrix(angle_rad: float, axis: Sequence[float]) -> np.ndarray:
    """
    Build the 3x3 rotation matrix for a right-handed rotation about an axis

    The axis is normalized first. Rodrigues' formula:
        R = I + sin(a) K + (1 - cos(a)) K^2
    where K is the skew matrix of the unit axis.
    """

    axis_vec: np.ndarray = np.asarray(axis, dtype=np.float64)
    if axis_vec.shape != (3,):
        raise ValueError("axis must have 3 components")
    norm: float = float(np.linalg.norm(axis_vec))
    if norm <= 0.0:
        raise ValueError("axis norm must be positive")

    ux, uy, uz = (axis_vec / norm).tolist()
    k: np.ndarray = np.array(
        [[0.0, -uz, uy], [uz, 0.0, -ux], [-uy, ux, 0.0]], dtype=np.float64
    )

    sin_a: float = math.sin(angle_rad)
    cos_a: float = math.cos(angle_rad)
    return np.eye(3, dtype=np.float64) + sin_a * k + (1.0 - cos_a) * (k @ k)


def homogeneous(
    rotation: np.ndarray, translation: Sequence[float] = (0.0, 0.0, 0.0)
) -> np.ndarray:
    """
    Embed a 3x3 block and a translation into a 4x4 homogeneous matrix
    """

    matrix: np.ndarray = np.eye(4, dtype=np.float64)
    matrix[:3, :3] = rotation
    matrix[:3, 3] = np.asarray(translation, dtype=np.float64)
    return matrix
