################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from rs_motion.motion_types.angular_rate_sample import AngularRateSample
from rs_motion.motion_types.fused_pose import FusedPose
from rs_motion.motion_types.linear_accel_sample import LinearAccelSample
from rs_motion.motion_types.orientation import Orientation


__all__ = [
    "AngularRateSample",
    "FusedPose",
    "LinearAccelSample",
    "Orientation",
]
