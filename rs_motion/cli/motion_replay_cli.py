################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Entry point for replaying recorded motion frames through the estimator.
"""

import argparse
import logging
import sys
from typing import Optional

from rs_motion.config.motion_config import MotionConfigError
from rs_motion.config.motion_config import load_motion_params
from rs_motion.config.motion_params import MotionParams
from rs_motion.estimation.rotation_estimator import RotationEstimator
from rs_motion.streaming.motion_log import MotionLog
from rs_motion.streaming.motion_log import MotionLogError
from rs_motion.streaming.motion_log import load_motion_log
from rs_motion.streaming.replay import ReplayResult
from rs_motion.streaming.replay import replay_motion_log


_LOG: logging.Logger = logging.getLogger(__name__)


################################################################################
# Entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replay recorded gyro, accel and pose frames"
    )
    parser.add_argument("log", help="YAML file with recorded frames")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with rotation estimator parameters",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(args=args)


def main(args: Optional[list[str]] = None) -> int:
    options = _parse_args(args=args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params: MotionParams = (
            load_motion_params(options.config)
            if options.config is not None
            else MotionParams.defaults()
        )
        log: MotionLog = load_motion_log(options.log)
    except (OSError, MotionConfigError, MotionLogError) as exc:
        _LOG.error("Failed to load inputs: %s", exc)
        return 1

    estimator: RotationEstimator = RotationEstimator(params)
    result: ReplayResult = replay_motion_log(log, estimator)

    pitch_deg, yaw_deg, roll_deg = result.orientation.as_degrees()
    print(f"pitch={pitch_deg:.3f} yaw={yaw_deg:.3f} roll={roll_deg:.3f} (deg)")

    if result.transforms:
        values: str = " ".join(f"{value:.6f}" for value in result.transforms[-1])
        print(f"pose_transform={values}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
