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
import numbers
from dataclasses import dataclass
from typing import Mapping


# Units: unitless. Meaning: weight of the integrated gyro angle in the
# complementary filter, the accelerometer receives 1 - alpha
DEFAULT_ALPHA: float = 0.98

# Units: rad. Meaning: yaw assigned when the accelerometer seeds the pose,
# gravity carries no heading information
DEFAULT_INITIAL_YAW_RAD: float = math.pi

# Units: timestamp units per second. Meaning: motion frames are stamped in
# milliseconds
DEFAULT_TIMESTAMP_SCALE: float = 1000.0


@dataclass(frozen=True, slots=True)
class MotionParams:
    """Tuning parameters for the rotation estimator.

    Data contract:
        alpha:
            Complementary filter weight in the open interval (0, 1). Higher
            values trust the gyro more and correct drift more slowly
        initial_yaw_rad:
            Yaw convention used when the first accelerometer sample seeds
            the orientation
        timestamp_scale:
            Number of timestamp units per second, used to turn gyro
            timestamp differences into seconds

    Determinism and edge cases:
        - validate() rejects alpha outside (0, 1)
        - validate() rejects non-finite values and a non-positive scale
    """

    alpha: float = DEFAULT_ALPHA
    initial_yaw_rad: float = DEFAULT_INITIAL_YAW_RAD
    timestamp_scale: float = DEFAULT_TIMESTAMP_SCALE

    @staticmethod
    def defaults() -> MotionParams:
        """Return the default parameter set."""
        params: MotionParams = MotionParams()
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> MotionParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        unknown_keys: list[str] = sorted(
            str(key) for key in set(params.keys()) - set(cls._field_order())
        )
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: MotionParams = cls.defaults()
        result: MotionParams = cls(
            alpha=cls._as_float("alpha", params.get("alpha", defaults.alpha)),
            initial_yaw_rad=cls._as_float(
                "initial_yaw_rad",
                params.get("initial_yaw_rad", defaults.initial_yaw_rad),
            ),
            timestamp_scale=cls._as_float(
                "timestamp_scale",
                params.get("timestamp_scale", defaults.timestamp_scale),
            ),
        )
        result.validate()
        return result

    def as_dict(self) -> dict[str, object]:
        """Return a YAML-serializable dict representation."""
        return {name: getattr(self, name) for name in self._field_order()}

    def validate(self) -> None:
        """Validate parameters and raise ValueError on failure."""
        for name in self._field_order():
            value: float = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite")
        if not 0.0 < self.alpha < 1.0:
            raise ValueError("alpha must be in (0, 1)")
        if self.timestamp_scale <= 0.0:
            raise ValueError("timestamp_scale must be positive")

    @staticmethod
    def _field_order() -> tuple[str, ...]:
        return ("alpha", "initial_yaw_rad", "timestamp_scale")

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{name} must be a number")
        return float(value)
