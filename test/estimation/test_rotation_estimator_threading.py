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
import threading

from rs_motion.estimation.rotation_estimator import RotationEstimator
from rs_motion.motion_types.angular_rate_sample import AngularRateSample
from rs_motion.motion_types.linear_accel_sample import LinearAccelSample
from rs_motion.motion_types.orientation import Orientation


# Number of gyro frames pushed by the producer thread
GYRO_FRAME_COUNT: int = 5000


def test_snapshots_never_observe_partial_gyro_update() -> None:
    estimator: RotationEstimator = RotationEstimator()
    estimator.process_accel(LinearAccelSample(x=0.0, y=0.0, z=1.0))

    # With dt = 1 s this rate adds exactly (+1, +1, +1) to theta per frame
    rate: tuple[float, float, float] = (1.0, -1.0, -1.0)

    stop_event: threading.Event = threading.Event()
    torn_snapshots: list[Orientation] = []
    snapshot_count: list[int] = [0]

    def producer() -> None:
        for index in range(GYRO_FRAME_COUNT + 1):
            estimator.process_gyro(
                AngularRateSample.from_sequence(1000.0 * index, rate)
            )
        stop_event.set()

    def reader() -> None:
        while not stop_event.is_set():
            theta: Orientation = estimator.get_theta()
            snapshot_count[0] += 1
            if not (
                theta.pitch == theta.roll
                and math.isclose(theta.yaw - math.pi, theta.pitch, abs_tol=1e-6)
            ):
                torn_snapshots.append(theta)

    producer_thread: threading.Thread = threading.Thread(target=producer)
    reader_thread: threading.Thread = threading.Thread(target=reader)
    reader_thread.start()
    producer_thread.start()
    producer_thread.join()
    reader_thread.join()

    assert torn_snapshots == []
    assert snapshot_count[0] > 0

    final: Orientation = estimator.get_theta()
    assert final.pitch == float(GYRO_FRAME_COUNT)
    assert final.roll == float(GYRO_FRAME_COUNT)
    assert math.isclose(final.yaw, math.pi + GYRO_FRAME_COUNT, abs_tol=1e-6)


def test_concurrent_producers_keep_yaw_owned_by_gyro() -> None:
    estimator: RotationEstimator = RotationEstimator()
    estimator.process_accel(LinearAccelSample(x=0.0, y=0.0, z=1.0))

    def gyro_producer() -> None:
        for index in range(1001):
            estimator.process_gyro(
                AngularRateSample(timestamp_ms=float(index), x=0.0, y=-1.0, z=0.0)
            )

    def accel_producer() -> None:
        for _ in range(1000):
            estimator.process_accel(LinearAccelSample(x=0.0, y=0.0, z=1.0))

    threads: list[threading.Thread] = [
        threading.Thread(target=gyro_producer),
        threading.Thread(target=accel_producer),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    theta: Orientation = estimator.get_theta()

    # 1000 frames of 1 ms at -1 rad/s on y add +1 rad of yaw
    assert math.isclose(theta.yaw, math.pi + 1.0, abs_tol=1e-9)
    assert theta.pitch == 0.0
    assert theta.roll == 0.0
