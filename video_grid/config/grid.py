"""
Configuration settings related to the 2x2 grid composition.

This module defines the CLI defaults, the grid cell positions and stream labels
used by the filter graph, and the fixed arguments passed to ffprobe and ffmpeg.
"""

# --- CLI Defaults ---
DEFAULT_OUTPUT_WIDTH = 1920
DEFAULT_OUTPUT_HEIGHT = 1080
DEFAULT_MAX_DURATION = 15  # seconds
DEFAULT_OUTPUT_PATH = "output.mp4"
DEFAULT_PROBE_WORKERS = 1

# --- Grid Layout ---
# Cell positions in input order. The position name doubles as the filter graph
# label of the cell's processed stream.
GRID_POSITIONS = ("top_left", "top_right", "bottom_left", "bottom_right")
GRID_CELL_COUNT = len(GRID_POSITIONS)

# Intermediate and final stream labels of the stacking stages.
TOP_ROW_LABEL = "top"
BOTTOM_ROW_LABEL = "bottom"
OUTPUT_LABEL = "final"

# --- Filter Settings ---
# Each cell is scaled to fit inside the cell and padded to the exact cell size,
# centered.
SCALE_ASPECT_MODE = "decrease"
PAD_POSITION = "(ow-iw)/2:(oh-ih)/2"
RESET_PTS_EXPR = "PTS-STARTPTS"

# --- ffprobe Settings ---
PROBE_VERBOSITY = ["-v", "error"]
PROBE_VIDEO_STREAM = ["-select_streams", "v:0"]
PROBE_FRAME_RATE_ENTRY = "stream=r_frame_rate"
PROBE_DURATION_ENTRY = "format=duration"
PROBE_OUTPUT_FORMAT = ["-of", "default=noprint_wrappers=1:nokey=1"]

# --- ffmpeg Settings ---
# Variable frame rate sync: duplicate/drop frames to reconcile the inputs with
# the fixed output rate.
FRAME_SYNC_ARGS = ["-vsync", "2"]
OVERWRITE_ARGS = ["-y"]
