"""
Grid planning: turns the four probed inputs and the user's limits into the
values the filter graph and the encoder work from.
"""
import math
from typing import Optional, Sequence

from ..config.grid import GRID_CELL_COUNT
from .exceptions import PlanError


class GridPlan:
    """
    The derived values used to build and encode the grid.

    Attributes:
        frame_rate (float): Effective output frame rate.
        duration (int): Effective output duration in seconds.
        cell_width (int): Width of one grid cell (output width // 2).
        cell_height (int): Height of one grid cell (output height // 2).
        output_width (int): Requested output width.
        output_height (int): Requested output height.
    """

    def __init__(
        self,
        frame_rate: float,
        duration: int,
        cell_width: int,
        cell_height: int,
        output_width: int,
        output_height: int,
    ):
        if cell_width <= 0 or cell_height <= 0:
            raise PlanError(
                f"Output {output_width}x{output_height} gives a {cell_width}x{cell_height} cell; "
                "both dimensions must be at least 2 pixels."
            )
        if not math.isfinite(frame_rate) or frame_rate <= 0:
            raise PlanError(f"Effective frame rate must be positive and finite, got {frame_rate}")
        if duration < 0:
            raise PlanError(f"Effective duration must not be negative, got {duration}")

        self.frame_rate = frame_rate
        self.duration = duration
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.output_width = output_width
        self.output_height = output_height

    def __repr__(self) -> str:
        return (
            f"GridPlan(frame_rate={self.frame_rate}, duration={self.duration}, "
            f"cell={self.cell_width}x{self.cell_height}, "
            f"output={self.output_width}x{self.output_height})"
        )

    def to_dict(self) -> dict:
        return {
            "frame_rate": self.frame_rate,
            "duration": self.duration,
            "cell_width": self.cell_width,
            "cell_height": self.cell_height,
            "output_width": self.output_width,
            "output_height": self.output_height,
        }


def plan(
    rates: Sequence[float],
    durations: Sequence[int],
    max_rate_cap: Optional[float],
    requested_duration: int,
    output_width: int,
    output_height: int,
) -> GridPlan:
    """
    Computes the effective frame rate, duration and cell size of the grid.

    - Frame rate: the fastest input, capped at `max_rate_cap` (None means uncapped).
    - Duration: the requested duration, but never longer than the longest input.
      Shorter inputs are not looped or padded.
    - Cell size: half the output size, using truncating division. Odd dimensions
      are not rejected; 1921x1080 yields 960x540 cells.

    Raises:
        PlanError: If there are not exactly four rates/durations, or the resulting
                   plan would have an empty cell or an invalid frame rate.
    """
    if len(rates) != GRID_CELL_COUNT or len(durations) != GRID_CELL_COUNT:
        raise PlanError(
            f"A grid needs exactly {GRID_CELL_COUNT} inputs, got {len(rates)} rates and {len(durations)} durations"
        )

    frame_rate = max(rates)
    if max_rate_cap is not None and frame_rate > max_rate_cap:
        frame_rate = max_rate_cap

    duration = min(requested_duration, max(durations))

    return GridPlan(
        frame_rate=frame_rate,
        duration=duration,
        cell_width=output_width // 2,
        cell_height=output_height // 2,
        output_width=output_width,
        output_height=output_height,
    )
