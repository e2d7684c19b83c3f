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

import numpy as np


@dataclass(frozen=True, slots=True)
class LinearAccelSample:
    """Accelerometer measurement of gravity plus motion in sensor units.

    Only the direction of the vector is used, so no timestamp is carried.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Coerce fields to float and validate their types"""
        for name in ("x", "y", "z"):
            value: object = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a real number")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> LinearAccelSample:
        """Build a sample from an (x, y, z) acceleration vector."""
        if len(values) != 3:
            raise ValueError("acceleration must have 3 components")
        return cls(x=values[0], y=values[1], z=values[2])

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)
