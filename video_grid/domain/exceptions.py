"""
Defines custom exception types for the Video Grid application.

These exceptions allow for more specific and expressive error handling throughout
the grid pipeline. Each stage (probing, planning, encoding) raises its own
exception type, so the entry point can report which stage failed while still
catching everything through the base `VideoGridException`.
"""


class VideoGridException(Exception):
    """Base class for all custom exceptions in the Video Grid application."""

    pass


# --- Probe Specific Exceptions ---
class ProbeError(VideoGridException):
    """
    Raised when an input's frame rate or duration cannot be determined.

    This covers ffprobe not being found, ffprobe exiting with a non-zero status,
    and output that is empty or cannot be parsed as a number or an "N/D" rational.
    """

    pass


# --- Planning Specific Exceptions ---
class PlanError(VideoGridException):
    """
    Raised when the grid cannot be planned from the probed values.

    This happens for output dimensions too small to give every cell at least one
    pixel, a non-positive or non-finite effective frame rate, or a number of
    inputs other than four.
    """

    pass


class FilterGraphError(PlanError):
    """
    Raised when a filter graph would reference its stream labels inconsistently.

    Every intermediate label must be written by exactly one segment and read by
    exactly one later segment.
    """

    pass


# --- Encoding Specific Exceptions ---
class EncodeError(VideoGridException):
    """
    Raised when the ffmpeg encode cannot be started or exits with a non-zero status.

    Attributes:
        tool (str): The executable that failed.
        returncode (int | None): Its exit status, or None if it never started.
    """

    def __init__(self, message: str, tool: str = "ffmpeg", returncode: int | None = None):
        super().__init__(message)
        self.tool = tool
        self.returncode = returncode


class ViewerError(VideoGridException):
    """Raised when the finished output cannot be opened in the OS default viewer."""

    pass
