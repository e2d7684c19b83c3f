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
class AngularRateSample:
    """Gyroscope measurement delivered by the motion stream.

    Data contract:
        timestamp_ms:
            Arrival time of the frame in milliseconds. Timestamps are
            monotonically increasing within a stream
        x:
            Pitch rate in rad/s
        y:
            Yaw rate in rad/s
        z:
            Roll rate in rad/s

    Determinism and edge cases:
        - Components are stored as Python floats
        - Non-finite values are accepted and propagate into the estimate
    """

    timestamp_ms: float
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Coerce fields to float and validate their types"""
        for name in ("timestamp_ms", "x", "y", "z"):
            value: object = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a real number")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_sequence(
        cls, timestamp_ms: float, values: Sequence[float]
    ) -> AngularRateSample:
        """Build a sample from a timestamp and an (x, y, z) rate vector."""
        if len(values) != 3:
            raise ValueError("angular rate must have 3 components")
        return cls(timestamp_ms=timestamp_ms, x=values[0], y=values[1], z=values[2])

    def as_array(self) -> np.ndarray:
        """Return the rate vector as a float64 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)
