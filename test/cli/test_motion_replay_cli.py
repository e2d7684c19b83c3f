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

from pathlib import Path

import pytest

from rs_motion.cli.motion_replay_cli import main


LOG_TEXT: str = """
frames:
  - {stream: accel, data: [0.0, 0.0, 1.0]}
  - {stream: gyro, timestamp_ms: 0.0, data: [0.0, 0.0, 0.0]}
  - {stream: pose, rotation: [0.0, 0.0, 0.0, 1.0], translation: [0.0, 0.0, 0.0]}
"""


def test_replay_prints_orientation_and_transform(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    log_path: Path = tmp_path / "log.yaml"
    log_path.write_text(LOG_TEXT, encoding="utf-8")

    assert main([str(log_path)]) == 0

    lines: list[str] = capsys.readouterr().out.splitlines()
    assert lines[0] == "pitch=0.000 yaw=180.000 roll=0.000 (deg)"
    assert lines[1].startswith("pose_transform=-1.000000 ")


def test_replay_uses_config_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    log_path: Path = tmp_path / "log.yaml"
    log_path.write_text(LOG_TEXT, encoding="utf-8")
    config_path: Path = tmp_path / "motion.yaml"
    config_path.write_text("motion:\n  initial_yaw_rad: 0.0\n", encoding="utf-8")

    assert main([str(log_path), "--config", str(config_path)]) == 0

    assert "yaw=0.000" in capsys.readouterr().out


def test_missing_log_returns_error(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.yaml")]) == 1


def test_invalid_config_returns_error(tmp_path: Path) -> None:
    log_path: Path = tmp_path / "log.yaml"
    log_path.write_text(LOG_TEXT, encoding="utf-8")
    config_path: Path = tmp_path / "motion.yaml"
    config_path.write_text("alpha: 1.5\n", encoding="utf-8")

    assert main([str(log_path), "--config", str(config_path), "--verbose"]) == 1


def test_non_utf8_log_returns_error(tmp_path: Path) -> None:
    log_path: Path = tmp_path / "log.yaml"
    log_path.write_bytes(b"\xff\xfe\x00frames")

    assert main([str(log_path)]) == 1


def test_non_utf8_config_returns_error(tmp_path: Path) -> None:
    log_path: Path = tmp_path / "log.yaml"
    log_path.write_text(LOG_TEXT, encoding="utf-8")
    config_path: Path = tmp_path / "motion.yaml"
    config_path.write_bytes(b"\xff\xfealpha: 0.9\n")

    assert main([str(log_path), "--config", str(config_path)]) == 1


def test_config_with_mixed_key_types_returns_error(tmp_path: Path) -> None:
    log_path: Path = tmp_path / "log.yaml"
    log_path.write_text(LOG_TEXT, encoding="utf-8")
    config_path: Path = tmp_path / "motion.yaml"
    config_path.write_text("1: 0.5\nfoo: 0.2\n", encoding="utf-8")

    assert main([str(log_path), "--config", str(config_path)]) == 1
