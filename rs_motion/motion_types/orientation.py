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

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Orientation:
    """Snapshot of the estimated camera rotation angles.

    Angles are in radians and follow the rendering convention: pitch is the
    x component, yaw the y component and roll the z component.
    """

    pitch: float
    yaw: float
    roll: float

    @classmethod
    def zero(cls) -> Orientation:
        return cls(pitch=0.0, yaw=0.0, roll=0.0)

    def as_array(self) -> np.ndarray:
        """Return (pitch, yaw, roll) as a float64 array."""
        return np.array([self.pitch, self.yaw, self.roll], dtype=np.float64)

    def as_degrees(self) -> tuple[float, float, float]:
        """Return (pitch, yaw, roll) in degrees."""
        return (
            math.degrees(self.pitch),
            math.degrees(self.yaw),
            math.degrees(self.roll),
        )
