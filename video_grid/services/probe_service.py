"""
Probes the grid inputs with ffprobe.

Each input needs two ffprobe calls: one for the first video stream's
`r_frame_rate` and one for the container `duration`. Both ask ffprobe for a
single bare token so the output can be parsed without JSON.
"""

import concurrent.futures
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from ..config.grid import (
    DEFAULT_PROBE_WORKERS,
    GRID_POSITIONS,
    PROBE_DURATION_ENTRY,
    PROBE_FRAME_RATE_ENTRY,
    PROBE_OUTPUT_FORMAT,
    PROBE_VERBOSITY,
    PROBE_VIDEO_STREAM,
)
from ..domain.exceptions import ProbeError
from ..domain.media import VideoInput, parse_duration, parse_frame_rate
from ..utils.ffmpeg_utils import run_cmd
from ..utils.module_updater import Modules


def frame_rate_command(video_path: Path) -> List[str]:
    return [
        Modules.ffprobe(),
        *PROBE_VERBOSITY,
        *PROBE_VIDEO_STREAM,
        "-show_entries",
        PROBE_FRAME_RATE_ENTRY,
        *PROBE_OUTPUT_FORMAT,
        str(video_path),
    ]


def duration_command(video_path: Path) -> List[str]:
    return [
        Modules.ffprobe(),
        *PROBE_VERBOSITY,
        "-show_entries",
        PROBE_DURATION_ENTRY,
        *PROBE_OUTPUT_FORMAT,
        str(video_path),
    ]


def _run_probe(cmd_list: List[str], video_path: Path, error_log_dir: Optional[Path]) -> str:
    """Runs one ffprobe command and returns its stripped stdout."""
    res = run_cmd(
        cmd_list,
        src_file_for_log=video_path,
        error_log_dir_for_run_cmd=error_log_dir,
        show_cmd=True,
    )
    if res is None:
        raise ProbeError(f"ffprobe could not be started for {video_path}")
    if res.returncode != 0:
        raise ProbeError(f"ffprobe failed for {video_path} (return code {res.returncode})")

    output = res.stdout.strip()
    if not output:
        raise ProbeError(f"ffprobe returned no output for {video_path}")
    return output


def probe_frame_rate(video_path: Path, error_log_dir: Optional[Path] = None) -> float:
    """
    Returns the frame rate of the first video stream of `video_path`.

    Raises:
        ProbeError: If ffprobe cannot run, fails, or prints an unusable rate.
    """
    output = _run_probe(frame_rate_command(video_path), video_path, error_log_dir)
    try:
        return parse_frame_rate(output)
    except ProbeError as e:
        raise ProbeError(f"{e} in {video_path}") from e


def probe_duration(video_path: Path, error_log_dir: Optional[Path] = None) -> int:
    """
    Returns the container duration of `video_path` in whole seconds (floored).

    Raises:
        ProbeError: If ffprobe cannot run, fails, or prints an unusable duration.
    """
    output = _run_probe(duration_command(video_path), video_path, error_log_dir)
    try:
        return parse_duration(output)
    except ProbeError as e:
        raise ProbeError(f"{e} in {video_path}") from e


def probe(video_path: Path, position: str, error_log_dir: Optional[Path] = None) -> VideoInput:
    """Probes one input and returns it as a `VideoInput` for the given grid position."""
    frame_rate = probe_frame_rate(video_path, error_log_dir)
    duration = probe_duration(video_path, error_log_dir)
    video_input = VideoInput(Path(video_path), position, frame_rate, duration)
    logger.debug(f"Probed {position}: {video_input}")
    return video_input


def probe_all(
    video_paths: Sequence[Path],
    workers: int = DEFAULT_PROBE_WORKERS,
    error_log_dir: Optional[Path] = None,
) -> List[VideoInput]:
    """
    Probes all grid inputs and returns them in grid order.

    With `workers > 1` the probes run on a thread pool. Results are collected by
    input index, so the order never depends on which probe finishes first, and
    the first failing input in grid order is the error that propagates.

    Raises:
        ProbeError: For the first input that cannot be probed.
    """
    if len(video_paths) != len(GRID_POSITIONS):
        raise ProbeError(f"Expected {len(GRID_POSITIONS)} inputs, got {len(video_paths)}")

    jobs = list(zip(video_paths, GRID_POSITIONS))
    if workers <= 1:
        return [probe(path, position, error_log_dir) for path, position in jobs]

    logger.debug(f"Probing {len(jobs)} inputs with {workers} worker thread(s).")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(probe, path, position, error_log_dir) for path, position in jobs]
        return [future.result() for future in futures]
