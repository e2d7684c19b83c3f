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
from dataclasses import dataclass

import numpy as np

from rs_motion.estimation.pose_transform import to_render_transform
from rs_motion.estimation.rotation_estimator import RotationEstimator
from rs_motion.motion_types.orientation import Orientation
from rs_motion.streaming.frame_router import MotionFrameRouter
from rs_motion.streaming.motion_log import MotionLog


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayResult:
    """Outcome of replaying a motion log.

    Attributes:
        orientation: Estimator snapshot after the last motion frame
        dispatched: Number of frames routed to the estimator
        ignored: Number of frames dropped by the router
        transforms: Column-major render transform for each recorded pose
    """

    orientation: Orientation
    dispatched: int
    ignored: int
    transforms: tuple[np.ndarray, ...]


def replay_motion_log(log: MotionLog, estimator: RotationEstimator) -> ReplayResult:
    """
    Feed recorded frames through the estimator in file order.
    """

    router: MotionFrameRouter = MotionFrameRouter(estimator)
    for frame in log.motion_frames:
        router.handle_frame(frame)

    transforms: tuple[np.ndarray, ...] = tuple(
        to_render_transform(pose) for pose in log.poses
    )

    _LOG.info(
        "Replayed %d motion frames (%d ignored) and %d poses",
        router.dispatched_count,
        router.ignored_count,
        len(transforms),
    )

    return ReplayResult(
        orientation=estimator.get_theta(),
        dispatched=router.dispatched_count,
        ignored=router.ignored_count,
        transforms=transforms,
    )
