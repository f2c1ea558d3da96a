"""
Pytest fixtures for Video Grid tests.
"""
import argparse
import subprocess
from pathlib import Path

import pytest

from video_grid.domain.plan import GridPlan


@pytest.fixture(autouse=True)
def no_configured_tool_dir(monkeypatch):
    """Resolve ffmpeg/ffprobe by bare name regardless of any local config.user.yaml."""
    monkeypatch.setattr("video_grid.utils.module_updater.MODULE_PATH", None)


@pytest.fixture
def completed():
    """Factory for fake `subprocess.CompletedProcess` results."""
    def _completed(stdout: str = "", returncode: int = 0, stderr: str = ""):
        return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)
    return _completed


@pytest.fixture
def input_paths(tmp_path):
    """Four (empty) input files in grid order."""
    paths = []
    for name in ("a.mp4", "b.mp4", "c.mp4", "d.mp4"):
        path = tmp_path / name
        path.write_bytes(b"")
        paths.append(path)
    return paths


@pytest.fixture
def hd_plan():
    """Plan for a 1920x1080 grid at 30 fps, 15 seconds."""
    return GridPlan(
        frame_rate=30.0,
        duration=15,
        cell_width=960,
        cell_height=540,
        output_width=1920,
        output_height=1080,
    )


@pytest.fixture
def grid_args(input_paths, tmp_path):
    """Parsed-argument namespace as produced by the CLI defaults."""
    return argparse.Namespace(
        in1=input_paths[0],
        in2=input_paths[1],
        in3=input_paths[2],
        in4=input_paths[3],
        width=1920,
        height=1080,
        duration=15,
        max_framerate=None,
        output_path=tmp_path / "out" / "grid.mp4",
        open=False,
        probe_workers=1,
        log_level="INFO",
        error_log_dir=None,
        success_log_dir=None,
    )


@pytest.fixture
def fake_ffprobe(completed):
    """
    Factory for a `run_cmd` stand-in answering ffprobe calls for a.mp4 .. d.mp4.

    Frame rate probes select `stream=r_frame_rate`, duration probes `format=duration`.
    """
    def _factory(rates, durations, failing_index=None):
        def _run_cmd(cmd_list, **kwargs):
            index = int(Path(cmd_list[-1]).stem, 36) - 10  # a.mp4 -> 0 ... d.mp4 -> 3
            if index == failing_index:
                return completed(returncode=1, stderr="Invalid data found when processing input")
            if "stream=r_frame_rate" in cmd_list:
                return completed(stdout=f"{rates[index]}\n")
            return completed(stdout=f"{durations[index]}\n")
        return _run_cmd
    return _factory
