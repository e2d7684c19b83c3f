################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML loading for rotation estimator parameters.

Accepted documents are either a flat mapping of MotionParams fields or the
same mapping nested under a top-level ``motion`` key:

    motion:
      alpha: 0.98
      initial_yaw_rad: 3.141592653589793
      timestamp_scale: 1000.0

An empty document yields the defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from typing import Mapping

import yaml

from rs_motion.config.motion_params import MotionParams


# Top-level key that may wrap the parameter mapping
MOTION_SECTION: str = "motion"


class MotionConfigError(ValueError):
    """Raised when a motion configuration document is invalid."""


def motion_params_from_yaml(text: str) -> MotionParams:
    """Parse MotionParams from YAML text."""
    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MotionConfigError(f"invalid YAML: {exc}") from exc

    if document is None:
        return MotionParams.defaults()
    if not isinstance(document, Mapping):
        raise MotionConfigError("motion configuration must be a mapping")

    section: Any = document
    if MOTION_SECTION in document:
        if len(document) != 1:
            raise MotionConfigError(
                f"'{MOTION_SECTION}' must be the only top-level key"
            )
        section = document[MOTION_SECTION]
        if section is None:
            return MotionParams.defaults()
        if not isinstance(section, Mapping):
            raise MotionConfigError(f"'{MOTION_SECTION}' must be a mapping")

    try:
        return MotionParams.from_dict(section)
    except ValueError as exc:
        raise MotionConfigError(str(exc)) from exc


def load_motion_params(path: Path | str) -> MotionParams:
    """Load MotionParams from a YAML file.

    Raises:
        OSError: If the file cannot be read
        MotionConfigError: If the contents are invalid
    """
    try:
        text: str = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MotionConfigError(f"configuration is not UTF-8 text: {exc}") from exc
    return motion_params_from_yaml(text)


def dump_motion_params(params: MotionParams) -> str:
    """Serialize MotionParams to YAML text nested under ``motion``."""
    return yaml.safe_dump({MOTION_SECTION: params.as_dict()}, sort_keys=False)
