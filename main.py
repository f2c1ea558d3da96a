"""
Main entry point for the Video Grid application.

This script configures logging, checks the external FFmpeg tools, parses the
command-line arguments and runs the grid pipeline. Any pipeline error is
reported and turned into a non-zero exit code.
"""

import sys
from typing import List, Optional

from loguru import logger

from video_grid.cli import get_args
from video_grid.config.common import LOGGER_FORMAT
from video_grid.domain.exceptions import VideoGridException
from video_grid.pipeline.grid_pipeline import GridPipeline
from video_grid.utils.module_updater import Modules
from video_grid.utils.viewer import open_in_default_viewer


# Configure the logger for initial setup.
# The level is overridden once the command-line arguments are parsed.
logger.remove()
logger.add(sys.stderr, level="INFO", format=LOGGER_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs one grid job.

    1. Parses command-line arguments and re-configures the logger.
    2. Verifies that ffmpeg and ffprobe can be executed.
    3. Runs the probe/plan/encode pipeline.
    4. Opens the result in the default viewer if requested.

    Returns:
        The process exit code: 0 on success, 1 if any stage failed.
    """
    args = get_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level, format=LOGGER_FORMAT)
    logger.debug(f"Parsed arguments: {args}")

    if not Modules.run_all():
        logger.warning("FFmpeg tools could not be verified; continuing anyway.")

    try:
        output_path = GridPipeline(args).run()
        if args.open:
            open_in_default_viewer(output_path)
    except VideoGridException as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    logger.success("Video grid finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
