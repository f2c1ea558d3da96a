import math
from pathlib import Path

from .exceptions import ProbeError


def parse_frame_rate(frame_rate_str: str) -> float:
    """
    Parses an ffprobe frame rate token into frames per second.

    ffprobe reports `r_frame_rate` as a rational such as "30000/1001" or "25/1".
    A bare number ("29.97") is accepted as well.

    Args:
        frame_rate_str: The token printed by ffprobe.

    Returns:
        The frame rate as a float, e.g. 29.97002997... for "30000/1001".

    Raises:
        ProbeError: If the token is empty, malformed, has a zero denominator, or
                    does not describe a positive, finite rate.
    """
    text = frame_rate_str.strip()
    if not text:
        raise ProbeError("Empty frame rate")

    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            raise ProbeError(f"Invalid frame rate format: {text}")
        try:
            numerator = float(parts[0])
            denominator = float(parts[1])
        except ValueError as e:
            raise ProbeError(f"Invalid frame rate format: {text}") from e
        if denominator == 0:
            raise ProbeError(f"Invalid frame rate denominator: {text}")
        fps = numerator / denominator
    else:
        try:
            fps = float(text)
        except ValueError as e:
            raise ProbeError(f"Invalid frame rate: {text}") from e

    if not math.isfinite(fps) or fps <= 0:
        raise ProbeError(f"Frame rate must be positive and finite: {text}")
    return fps


def parse_duration(duration_str: str) -> int:
    """
    Parses an ffprobe `format=duration` token into whole seconds.

    The fractional part is dropped (floor), so "14.98" becomes 14.

    Raises:
        ProbeError: If the token is not a finite, non-negative number ("N/A" included).
    """
    text = duration_str.strip()
    try:
        seconds = float(text)
    except ValueError as e:
        raise ProbeError(f"Invalid duration: {text!r}") from e
    if not math.isfinite(seconds) or seconds < 0:
        raise ProbeError(f"Duration must be a non-negative number: {text}")
    return math.floor(seconds)


class VideoInput:
    """
    One of the four grid inputs together with its probed metadata.

    Attributes:
        path (Path): The input video file.
        position (str): Grid cell the input fills (e.g. "top_left").
        frame_rate (float): The first video stream's frame rate in frames per second.
        duration (int): The container duration in whole seconds.
    """

    def __init__(self, path: Path, position: str, frame_rate: float, duration: int):
        self.path = path
        self.position = position
        self.frame_rate = frame_rate
        self.duration = duration

    def __repr__(self) -> str:
        return (
            f"VideoInput(path={str(self.path)!r}, position={self.position!r}, "
            f"frame_rate={self.frame_rate}, duration={self.duration})"
        )

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "position": self.position,
            "frame_rate": self.frame_rate,
            "duration": self.duration,
        }
