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
Render transforms for the camera model

All public functions return 16-element float64 arrays in column-major order,
ready to be loaded as an OpenGL matrix. Element 12..14 hold the translation.

Pose path:
    The tracker's frame is rotated 180 degrees about y to match the renderer,
    which negates the first and third columns of the rotation block.

Orientation path:
    The model is rotated by the estimated angles as three successive axis
    rotations, with roll offset by -pi/2 so that a level device renders
    upright.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from rs_motion.math_utils.quat import axis_angle_rotation_matrix
from rs_motion.math_utils.quat import homogeneous
from rs_motion.math_utils.quat import quat_to_rotation_matrix_xyzw
from rs_motion.motion_types.fused_pose import FusedPose
from rs_motion.motion_types.orientation import Orientation


# Column signs of the 180 degree rotation about y
_AXIS_CORRECTION: np.ndarray = np.array([-1.0, 1.0, -1.0], dtype=np.float64)

# Axes of the three rotations applied on the orientation path
_PITCH_AXIS: tuple[float, float, float] = (0.0, 0.0, -1.0)
_YAW_AXIS: tuple[float, float, float] = (0.0, -1.0, 0.0)
_ROLL_AXIS: tuple[float, float, float] = (-1.0, 0.0, 0.0)

# Units: rad. Meaning: roll offset so a level device is drawn upright
_ROLL_OFFSET_RAD: float = math.pi / 2.0

# Flip applied ahead of the pose transform on the pose path
_POSE_FLIP_AXIS: tuple[float, float, float] = (1.0, 0.0, 0.0)


def to_render_transform(pose: FusedPose) -> np.ndarray:
    """
    Convert a fused pose to a column-major 4x4 rotation+translation matrix.

    Any quaternion and translation yields a matrix; the quaternion is not
    normalized.
    """

    rotation: np.ndarray = quat_to_rotation_matrix_xyzw(pose.rotation_xyzw)
    rotation = rotation * _AXIS_CORRECTION[np.newaxis, :]

    return _column_major(homogeneous(rotation, pose.translation_xyz))


def column_major_to_matrix(values: Sequence[float]) -> np.ndarray:
    """
    Unpack a 16-element column-major array into a 4x4 matrix.
    """

    flat: np.ndarray = np.asarray(values, dtype=np.float64)
    if flat.shape != (16,):
        raise ValueError("render transform must have 16 elements")
    return flat.reshape((4, 4), order="F")


def axis_angle_matrix(angle_rad: float, axis: Sequence[float]) -> np.ndarray:
    """
    Return the 4x4 homogeneous rotation of angle_rad about axis.
    """

    return homogeneous(axis_angle_rotation_matrix(angle_rad, axis))


def orientation_to_model_matrix(orientation: Orientation) -> np.ndarray:
    """
    Build the camera model rotation for an estimated orientation.
    """

    model: np.ndarray = (
        axis_angle_matrix(orientation.pitch, _PITCH_AXIS)
        @ axis_angle_matrix(orientation.yaw, _YAW_AXIS)
        @ axis_angle_matrix(orientation.roll - _ROLL_OFFSET_RAD, _ROLL_AXIS)
    )
    return _column_major(model)


def pose_to_model_matrix(pose: FusedPose) -> np.ndarray:
    """
    Build the camera model transform for a fused pose.
    """

    flip: np.ndarray = axis_angle_matrix(math.pi, _POSE_FLIP_AXIS)
    transform: np.ndarray = column_major_to_matrix(to_render_transform(pose))
    return _column_major(flip @ transform)


def _column_major(matrix: np.ndarray) -> np.ndarray:
    return np.asarray(matrix, dtype=np.float64).flatten(order="F")
