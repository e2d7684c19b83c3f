################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class FusedPose:
    """Rigid-body pose produced by an upstream visual-inertial tracker.

    Data contract:
        rotation_xyzw:
            Unit quaternion in [x, y, z, w] order
        translation_xyz:
            Translation in meters

    Determinism and edge cases:
        - The quaternion is not renormalized; a non-unit quaternion yields a
          scaled rotation block downstream rather than an error
    """

    rotation_xyzw: tuple[float, float, float, float]
    translation_xyz: tuple[float, float, float]

    def __post_init__(self) -> None:
        """Coerce the rotation and translation into float tuples"""
        object.__setattr__(
            self,
            "rotation_xyzw",
            _as_float_tuple("rotation_xyzw", self.rotation_xyzw, 4),
        )
        object.__setattr__(
            self,
            "translation_xyz",
            _as_float_tuple("translation_xyz", self.translation_xyz, 3),
        )

    @classmethod
    def from_sequences(
        cls, rotation_xyzw: Sequence[float], translation_xyz: Sequence[float]
    ) -> FusedPose:
        """Build a pose from plain sequences."""
        return cls(
            rotation_xyzw=tuple(rotation_xyzw),  # type: ignore[arg-type]
            translation_xyz=tuple(translation_xyz),  # type: ignore[arg-type]
        )

    @classmethod
    def identity(cls) -> FusedPose:
        return cls(rotation_xyzw=(0.0, 0.0, 0.0, 1.0), translation_xyz=(0.0, 0.0, 0.0))


def _as_float_tuple(name: str, values: object, size: int) -> tuple[float, ...]:
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        raise ValueError(f"{name} must be a sequence")
    if len(values) != size:
        raise ValueError(f"{name} must have {size} components")
    result: list[float] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{name} entries must be real numbers")
        result.append(float(value))
    return tuple(result)
