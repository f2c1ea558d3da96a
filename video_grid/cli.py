"""
Command-Line Interface (CLI) setup for Video Grid.

This module uses Python's `argparse` to define and parse the command-line
arguments that control the application's behavior.
"""
import argparse
from pathlib import Path
from typing import List, Optional

from .config.grid import (
    DEFAULT_MAX_DURATION,
    DEFAULT_OUTPUT_HEIGHT,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_OUTPUT_WIDTH,
    DEFAULT_PROBE_WORKERS,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="video-grid",
        description="Compose four videos into a single 2x2 grid video using ffmpeg.",
    )

    inputs = parser.add_argument_group("input")
    inputs.add_argument(
        "--in1", type=Path, required=True,
        help="The first video file. This will be the top-left video in the output grid.",
    )
    inputs.add_argument(
        "--in2", type=Path, required=True,
        help="The second video file. This will be the top-right video in the output grid.",
    )
    inputs.add_argument(
        "--in3", type=Path, required=True,
        help="The third video file. This will be the bottom-left video in the output grid.",
    )
    inputs.add_argument(
        "--in4", type=Path, required=True,
        help="The fourth video file. This will be the bottom-right video in the output grid.",
    )

    parser.add_argument(
        "--width", type=int, default=DEFAULT_OUTPUT_WIDTH, help="The width of the output video."
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT_OUTPUT_HEIGHT, help="The height of the output video."
    )
    parser.add_argument(
        "--duration", type=int, default=DEFAULT_MAX_DURATION,
        help="The maximum length of the output video in seconds. Longer videos are truncated.",
    )
    parser.add_argument(
        "--max-framerate", type=float, default=None,
        help="Cap for the output frame rate. Defaults to the fastest input's frame rate.",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "-o", "--output-path", type=Path, default=Path(DEFAULT_OUTPUT_PATH),
        help="The path to which to write the output video.",
    )
    output.add_argument(
        "--open", action="store_true",
        help="Open the output video in the default viewer when finished.",
    )

    parser.add_argument(
        "--probe-workers", type=int, default=DEFAULT_PROBE_WORKERS,
        help="Number of threads used to probe the inputs (1 probes them one by one).",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level.",
    )
    parser.add_argument(
        "--error-log-dir", type=Path, default=None,
        help="Directory for error.txt (failed commands) and cmd.txt (executed ffmpeg command).",
    )
    parser.add_argument(
        "--success-log-dir", type=Path, default=None,
        help="Directory for a YAML log of successful runs.",
    )
    return parser


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for Video Grid.

    Args:
        argv: Arguments to parse; defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: An object containing the parsed command-line
                            arguments as attributes.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error(f"--width and --height must be positive, got {args.width}x{args.height}")
    if args.duration < 0:
        parser.error(f"--duration must not be negative, got {args.duration}")
    if args.max_framerate is not None and not args.max_framerate > 0:
        parser.error(f"--max-framerate must be positive, got {args.max_framerate}")
    if args.probe_workers < 1:
        parser.error(f"--probe-workers must be at least 1, got {args.probe_workers}")

    return args
