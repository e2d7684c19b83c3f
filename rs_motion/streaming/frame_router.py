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

import enum
import logging
import numbers
from dataclasses import dataclass
from typing import Iterable
from typing import Optional
from typing import Protocol

from rs_motion.motion_types.angular_rate_sample import AngularRateSample
from rs_motion.motion_types.linear_accel_sample import LinearAccelSample


_LOG: logging.Logger = logging.getLogger(__name__)


class MotionStream(enum.Enum):
    GYRO = "gyro"
    ACCEL = "accel"
    POSE = "pose"


class MotionFormat(enum.Enum):
    MOTION_XYZ32F = "motion_xyz32f"
    SIX_DOF = "6dof"


@dataclass(frozen=True, slots=True)
class MotionFrame:
    """Frame as delivered by the streaming callback.

    Data contract:
        stream:
            Stream the frame belongs to
        fmt:
            Payload format of the frame
        timestamp_ms:
            Frame timestamp in milliseconds
        data:
            Payload vector, (x, y, z) for motion frames
    """

    stream: MotionStream
    fmt: MotionFormat
    timestamp_ms: float
    data: tuple[float, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.stream, MotionStream):
            raise ValueError("stream must be a MotionStream")
        if not isinstance(self.fmt, MotionFormat):
            raise ValueError("fmt must be a MotionFormat")
        if isinstance(self.timestamp_ms, bool) or not isinstance(
            self.timestamp_ms, numbers.Real
        ):
            raise ValueError("timestamp_ms must be a real number")
        object.__setattr__(self, "timestamp_ms", float(self.timestamp_ms))
        if isinstance(self.data, (str, bytes)) or not isinstance(self.data, Iterable):
            raise ValueError("data must be a sequence of real numbers")
        values: list[float] = []
        for value in self.data:
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError("data entries must be real numbers")
            values.append(float(value))
        object.__setattr__(self, "data", tuple(values))

    def is_motion(self) -> bool:
        """Return True for gyro or accel frames with an xyz payload."""
        return (
            self.stream in (MotionStream.GYRO, MotionStream.ACCEL)
            and self.fmt == MotionFormat.MOTION_XYZ32F
            and len(self.data) == 3
        )


class _EstimatorProtocol(Protocol):
    def process_gyro(self, sample: AngularRateSample) -> None: ...

    def process_accel(self, sample: LinearAccelSample) -> None: ...


class MotionFrameRouter:
    """
    Dispatch streamed motion frames to a rotation estimator.

    Gyro frames become AngularRateSample values and accel frames become
    LinearAccelSample values. Frames from other streams or in other formats
    are dropped and counted.
    """

    def __init__(self, estimator: _EstimatorProtocol) -> None:
        self._estimator: _EstimatorProtocol = estimator
        self._dispatched_count: int = 0
        self._ignored_count: int = 0

    @property
    def dispatched_count(self) -> int:
        return self._dispatched_count

    @property
    def ignored_count(self) -> int:
        return self._ignored_count

    def handle_frame(self, frame: MotionFrame) -> bool:
        """
        Route a frame to the estimator.

        Returns:
            True if the frame was dispatched, False if it was ignored
        """

        sample: Optional[AngularRateSample | LinearAccelSample] = self._to_sample(
            frame
        )
        if sample is None:
            self._ignored_count += 1
            _LOG.debug(
                "Ignoring %s frame in format %s", frame.stream.value, frame.fmt.value
            )
            return False

        if isinstance(sample, AngularRateSample):
            self._estimator.process_gyro(sample)
        else:
            self._estimator.process_accel(sample)

        self._dispatched_count += 1
        return True

    @staticmethod
    def _to_sample(
        frame: MotionFrame,
    ) -> Optional[AngularRateSample | LinearAccelSample]:
        if not frame.is_motion():
            return None
        if frame.stream == MotionStream.GYRO:
            return AngularRateSample.from_sequence(frame.timestamp_ms, frame.data)
        return LinearAccelSample.from_sequence(frame.data)
