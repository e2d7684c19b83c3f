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

import pytest

from rs_motion.estimation.rotation_estimator import RotationEstimator
from rs_motion.motion_types.angular_rate_sample import AngularRateSample
from rs_motion.motion_types.linear_accel_sample import LinearAccelSample
from rs_motion.streaming.frame_router import MotionFormat
from rs_motion.streaming.frame_router import MotionFrame
from rs_motion.streaming.frame_router import MotionFrameRouter
from rs_motion.streaming.frame_router import MotionStream


class _RecordingEstimator:
    def __init__(self) -> None:
        self.gyro: list[AngularRateSample] = []
        self.accel: list[LinearAccelSample] = []

    def process_gyro(self, sample: AngularRateSample) -> None:
        self.gyro.append(sample)

    def process_accel(self, sample: LinearAccelSample) -> None:
        self.accel.append(sample)


def _frame(
    stream: MotionStream,
    fmt: MotionFormat = MotionFormat.MOTION_XYZ32F,
    timestamp_ms: float = 0.0,
    data: tuple[float, ...] = (0.0, 0.0, 1.0),
) -> MotionFrame:
    return MotionFrame(stream=stream, fmt=fmt, timestamp_ms=timestamp_ms, data=data)


def test_routes_gyro_and_accel_frames() -> None:
    estimator: _RecordingEstimator = _RecordingEstimator()
    router: MotionFrameRouter = MotionFrameRouter(estimator)

    assert router.handle_frame(
        _frame(MotionStream.GYRO, timestamp_ms=12.5, data=(0.1, 0.2, 0.3))
    )
    assert router.handle_frame(_frame(MotionStream.ACCEL, data=(0.0, -9.8, 0.1)))

    assert estimator.gyro == [
        AngularRateSample(timestamp_ms=12.5, x=0.1, y=0.2, z=0.3)
    ]
    assert estimator.accel == [LinearAccelSample(x=0.0, y=-9.8, z=0.1)]
    assert router.dispatched_count == 2
    assert router.ignored_count == 0


def test_ignores_pose_and_unexpected_formats() -> None:
    estimator: _RecordingEstimator = _RecordingEstimator()
    router: MotionFrameRouter = MotionFrameRouter(estimator)

    assert not router.handle_frame(
        _frame(MotionStream.POSE, fmt=MotionFormat.SIX_DOF, data=(0.0,) * 7)
    )
    assert not router.handle_frame(_frame(MotionStream.GYRO, fmt=MotionFormat.SIX_DOF))
    assert not router.handle_frame(_frame(MotionStream.ACCEL, data=(1.0, 2.0)))

    assert estimator.gyro == []
    assert estimator.accel == []
    assert router.ignored_count == 3
    assert router.dispatched_count == 0


def test_frame_validation() -> None:
    with pytest.raises(ValueError):
        MotionFrame(
            stream="gyro",  # type: ignore[arg-type]
            fmt=MotionFormat.MOTION_XYZ32F,
            timestamp_ms=0.0,
            data=(0.0, 0.0, 0.0),
        )
    with pytest.raises(ValueError):
        MotionFrame(
            stream=MotionStream.GYRO,
            fmt=MotionFormat.MOTION_XYZ32F,
            timestamp_ms=None,  # type: ignore[arg-type]
            data=(0.0, 0.0, 0.0),
        )


def test_router_drives_real_estimator() -> None:
    estimator: RotationEstimator = RotationEstimator()
    router: MotionFrameRouter = MotionFrameRouter(estimator)

    router.handle_frame(_frame(MotionStream.ACCEL, data=(0.0, 0.0, 1.0)))
    router.handle_frame(
        _frame(MotionStream.GYRO, timestamp_ms=0.0, data=(0.0, 0.5, 0.0))
    )
    router.handle_frame(
        _frame(MotionStream.GYRO, timestamp_ms=100.0, data=(0.0, 0.5, 0.0))
    )

    assert math.isclose(estimator.get_theta().yaw, math.pi - 0.05, abs_tol=1e-12)


@pytest.mark.parametrize(
    "data",
    [
        ("1.5", 0.0, 0.0),
        (True, 0.0, 0.0),
        (None, 0.0, 0.0),
        "xyz",
        None,
    ],
)
def test_frame_rejects_non_numeric_data(data: object) -> None:
    with pytest.raises(ValueError):
        MotionFrame(
            stream=MotionStream.ACCEL,
            fmt=MotionFormat.MOTION_XYZ32F,
            timestamp_ms=0.0,
            data=data,  # type: ignore[arg-type]
        )
