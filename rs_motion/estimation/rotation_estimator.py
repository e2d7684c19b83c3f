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

import logging
import math
import threading
from typing import Optional

import numpy as np

from rs_motion.config.motion_params import MotionParams
from rs_motion.motion_types.angular_rate_sample import AngularRateSample
from rs_motion.motion_types.linear_accel_sample import LinearAccelSample
from rs_motion.motion_types.orientation import Orientation


_LOG: logging.Logger = logging.getLogger(__name__)


################################################################################
# Complementary filter
################################################################################


class RotationEstimator:
    """
    Complementary filter estimating camera rotation from gyro and accel.

    State:
        theta = [pitch, yaw, roll] in radians (x, y, z of the render frame)

    Gyro path (high-pass):
        delta = omega * dt
        theta += [-delta.z, -delta.y, delta.x]

    Accel path (low-pass):
        pitch_a = atan2(ax, sqrt(ay^2 + az^2))
        roll_a  = atan2(ay, az)

        first sample:  theta = [pitch_a, initial_yaw, roll_a]
        afterwards:    theta.x = alpha * theta.x + (1 - alpha) * pitch_a
                       theta.z = alpha * theta.z + (1 - alpha) * roll_a

    Gyro samples arriving before the first accel sample are integrated from
    a zero theta, so get_theta() may report non-zero angles before
    is_initialized is True. The accel seed then overwrites all three angles.

    Yaw is only ever changed by the gyro path. The sign flips and axis
    remapping of the gyro path align the sensor axes with the renderer and
    must be kept as is.

    Threading:
        process_gyro() and process_accel() are called from the sensor
        callback contexts and get_theta() from the render loop. All state is
        guarded by one re-entrant lock held only for the duration of each
        update or read.

    Numerical notes:
        NaN or infinite inputs are not rejected. They propagate into theta
        and stay there until reset().
    """

    def __init__(self, params: Optional[MotionParams] = None) -> None:
        """
        Initialize the estimator.

        Args:
            params: Filter parameters, defaults to MotionParams.defaults()
        """

        if params is None:
            params = MotionParams.defaults()
        params.validate()

        self._alpha: float = params.alpha
        self._initial_yaw_rad: float = params.initial_yaw_rad
        self._timestamp_scale: float = params.timestamp_scale

        self._theta_lock: threading.RLock = threading.RLock()
        self._theta: np.ndarray = np.zeros(3, dtype=np.float64)
        self._initialized: bool = False
        self._last_ts_gyro: Optional[float] = None

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def is_initialized(self) -> bool:
        """
        Return True once an accelerometer sample has seeded the pose.
        """

        with self._theta_lock:
            return self._initialized

    def reset(self) -> None:
        """
        Return to the freshly constructed state.
        """

        with self._theta_lock:
            self._theta = np.zeros(3, dtype=np.float64)
            self._initialized = False
            self._last_ts_gyro = None

        _LOG.debug("Rotation estimator reset")

    def process_gyro(self, sample: AngularRateSample) -> None:
        """
        Integrate an angular rate sample into theta.

        The first sample ever received only records its timestamp, since
        there is no earlier frame to difference against.
        """

        with self._theta_lock:
            if self._last_ts_gyro is None:
                self._last_ts_gyro = sample.timestamp_ms
                _LOG.debug("First gyro timestamp recorded: %.3f", sample.timestamp_ms)
                return

            # Units: s. Meaning: time since the previous gyro frame
            dt_gyro: float = (
                sample.timestamp_ms - self._last_ts_gyro
            ) / self._timestamp_scale
            self._last_ts_gyro = sample.timestamp_ms

            # Units: rad. Meaning: change in angle as (pitch, yaw, roll)
            gyro_angle: np.ndarray = sample.as_array() * dt_gyro

            self._theta += np.array(
                [-gyro_angle[2], -gyro_angle[1], gyro_angle[0]], dtype=np.float64
            )

    def process_accel(self, sample: LinearAccelSample) -> None:
        """
        Correct pitch and roll toward the gravity direction.

        The first sample sets the absolute pose with yaw fixed to the
        configured convention.
        """

        ax: float = sample.x
        ay: float = sample.y
        az: float = sample.z

        # Units: rad. Meaning: inclination from the gravity vector
        accel_pitch: float = math.atan2(ax, math.sqrt(ay * ay + az * az))
        accel_roll: float = math.atan2(ay, az)

        with self._theta_lock:
            if not self._initialized:
                self._initialized = True
                self._theta = np.array(
                    [accel_pitch, self._initial_yaw_rad, accel_roll],
                    dtype=np.float64,
                )
                _LOG.info(
                    "Orientation seeded from accelerometer: pitch=%.4f rad, "
                    "roll=%.4f rad",
                    accel_pitch,
                    accel_roll,
                )
                return

            alpha: float = self._alpha
            self._theta[0] = self._theta[0] * alpha + accel_pitch * (1.0 - alpha)
            self._theta[2] = self._theta[2] * alpha + accel_roll * (1.0 - alpha)

    def get_theta(self) -> Orientation:
        """
        Return a consistent snapshot of the current rotation angles.
        """

        with self._theta_lock:
            pitch, yaw, roll = self._theta.tolist()

        return Orientation(pitch=pitch, yaw=yaw, roll=roll)
