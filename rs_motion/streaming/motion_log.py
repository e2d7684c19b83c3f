################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML schema for recorded motion streams.

Example document:

    frames:
      - {stream: gyro, timestamp_ms: 1000.0, data: [0.01, 0.0, -0.02]}
      - {stream: accel, timestamp_ms: 1001.2, data: [0.1, -9.7, 0.3]}
      - stream: pose
        timestamp_ms: 1002.0
        rotation: [0.0, 0.0, 0.0, 1.0]
        translation: [0.1, 0.0, 0.0]

Gyro records require a timestamp. Accel and pose records may omit it, in
which case 0.0 is stored.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Mapping

import yaml

from rs_motion.motion_types.fused_pose import FusedPose
from rs_motion.streaming.frame_router import MotionFormat
from rs_motion.streaming.frame_router import MotionFrame
from rs_motion.streaming.frame_router import MotionStream


class MotionLogError(ValueError):
    """Raised when a recorded motion log is invalid."""


@dataclass(frozen=True)
class MotionLog:
    """Recorded frames split by path.

    Attributes:
        motion_frames: Gyro and accel frames in file order
        poses: Fused poses in file order
    """

    motion_frames: tuple[MotionFrame, ...]
    poses: tuple[FusedPose, ...]


def motion_log_from_yaml(text: str) -> MotionLog:
    """Parse a MotionLog from YAML text."""
    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MotionLogError(f"invalid YAML: {exc}") from exc

    if not isinstance(document, Mapping):
        raise MotionLogError("motion log must be a mapping")
    records: Any = document.get("frames")
    if not isinstance(records, list):
        raise MotionLogError("'frames' must be a list")

    motion_frames: list[MotionFrame] = []
    poses: list[FusedPose] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise MotionLogError(f"frames[{index}] must be a mapping")
        try:
            stream: MotionStream = MotionStream(record.get("stream"))
        except ValueError as exc:
            raise MotionLogError(
                f"frames[{index}].stream must be one of gyro, accel, pose"
            ) from exc

        if stream == MotionStream.POSE:
            poses.append(_parse_pose(record, index))
        else:
            motion_frames.append(_parse_motion(record, stream, index))

    return MotionLog(motion_frames=tuple(motion_frames), poses=tuple(poses))


def load_motion_log(path: Path | str) -> MotionLog:
    """Load a MotionLog from a YAML file.

    Raises:
        OSError: If the file cannot be read
        MotionLogError: If the contents are invalid
    """
    try:
        text: str = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MotionLogError(f"motion log is not UTF-8 text: {exc}") from exc
    return motion_log_from_yaml(text)


def _parse_motion(
    record: Mapping[str, Any], stream: MotionStream, index: int
) -> MotionFrame:
    timestamp: object = record.get("timestamp_ms")
    if timestamp is None:
        if stream == MotionStream.GYRO:
            raise MotionLogError(f"frames[{index}].timestamp_ms is required for gyro")
        timestamp = 0.0
    data: list[float] = _require_vector(record.get("data"), 3, f"frames[{index}].data")
    return MotionFrame(
        stream=stream,
        fmt=MotionFormat.MOTION_XYZ32F,
        timestamp_ms=_require_number(timestamp, f"frames[{index}].timestamp_ms"),
        data=tuple(data),
    )


def _parse_pose(record: Mapping[str, Any], index: int) -> FusedPose:
    rotation: list[float] = _require_vector(
        record.get("rotation"), 4, f"frames[{index}].rotation"
    )
    translation: list[float] = _require_vector(
        record.get("translation"), 3, f"frames[{index}].translation"
    )
    return FusedPose.from_sequences(rotation, translation)


def _require_number(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MotionLogError(f"{name} must be a number")
    return float(value)


def _require_vector(value: object, size: int, name: str) -> list[float]:
    if not isinstance(value, list) or len(value) != size:
        raise MotionLogError(f"{name} must be a list of {size} numbers")
    return [_require_number(item, name) for item in value]
