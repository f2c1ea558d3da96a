"""
Builds the ffmpeg `-filter_complex` expression for the 2x2 grid.

The graph is kept as an ordered list of `FilterSegment` records and only
rendered to text when handed to ffmpeg. `FilterGraph` tracks which stream
labels have been written and read, so a segment that reuses or dangles a
label fails at construction time instead of producing a broken command.
"""
import re
from typing import List, Sequence

from ..config.grid import (
    BOTTOM_ROW_LABEL,
    GRID_POSITIONS,
    OUTPUT_LABEL,
    PAD_POSITION,
    RESET_PTS_EXPR,
    SCALE_ASPECT_MODE,
    TOP_ROW_LABEL,
)
from .exceptions import FilterGraphError
from .plan import GridPlan

# Demuxer stream specifiers such as "0:v" are graph inputs, not produced by a segment.
_INPUT_STREAM_RE = re.compile(r"^\d+:v$")


def is_input_stream(label: str) -> bool:
    return bool(_INPUT_STREAM_RE.match(label))


def format_frame_rate(frame_rate: float) -> str:
    """Renders a frame rate for the fps filter without losing precision ("30", "29.97002997002997")."""
    if float(frame_rate).is_integer():
        return str(int(frame_rate))
    return repr(float(frame_rate))


class FilterSegment:
    """
    One filter chain of the graph: `[in...]filter,filter[out...]`.

    Attributes:
        inputs (tuple): Stream labels consumed by the chain, in order.
        filters (tuple): Filter expressions applied in sequence.
        outputs (tuple): Stream labels produced by the chain.
    """

    def __init__(self, inputs: Sequence[str], filters: Sequence[str], outputs: Sequence[str]):
        if not filters:
            raise FilterGraphError("A filter segment needs at least one filter")
        self.inputs = tuple(inputs)
        self.filters = tuple(filters)
        self.outputs = tuple(outputs)

    @property
    def kind(self) -> str:
        """Name of the last filter in the chain (e.g. "fifo", "hstack")."""
        return self.filters[-1].split("=", 1)[0]

    def render(self) -> str:
        ins = "".join(f"[{label}]" for label in self.inputs)
        outs = "".join(f"[{label}]" for label in self.outputs)
        return f"{ins}{','.join(self.filters)}{outs}"

    def __repr__(self) -> str:
        return f"FilterSegment({self.render()!r})"


class FilterGraph:
    """
    An ordered, label-checked list of filter segments.

    Each non-input label must be written once before it is read, and read at most
    once. `validate()` additionally requires every written label except the
    graph's output label to be consumed.
    """

    def __init__(self, output_label: str = OUTPUT_LABEL):
        self.output_label = output_label
        self.segments: List[FilterSegment] = []
        self._written: set = set()
        self._read: set = set()

    def add(self, segment: FilterSegment) -> FilterSegment:
        for label in segment.inputs:
            if label in self._read:
                raise FilterGraphError(f"Stream label [{label}] is read more than once")
            if not is_input_stream(label) and label not in self._written:
                raise FilterGraphError(f"Stream label [{label}] is read before it is written")
        for label in segment.outputs:
            if label in self._written or is_input_stream(label):
                raise FilterGraphError(f"Stream label [{label}] is written more than once")

        self._read.update(segment.inputs)
        self._written.update(segment.outputs)
        self.segments.append(segment)
        return segment

    def validate(self):
        if self.output_label not in self._written:
            raise FilterGraphError(f"Output label [{self.output_label}] is never written")
        if self.output_label in self._read:
            raise FilterGraphError(f"Output label [{self.output_label}] is consumed inside the graph")
        dangling = sorted(self._written - self._read - {self.output_label})
        if dangling:
            raise FilterGraphError(f"Stream labels never consumed: {', '.join(dangling)}")

    def segments_of_kind(self, kind: str) -> List[FilterSegment]:
        return [segment for segment in self.segments if segment.kind == kind]

    def render(self) -> str:
        self.validate()
        return "; ".join(segment.render() for segment in self.segments)


def cell_filters(plan: GridPlan) -> List[str]:
    """
    The per-cell chain: fit into the cell, pad to exact size, restart timestamps,
    resample to the grid frame rate and buffer.
    """
    w, h = plan.cell_width, plan.cell_height
    return [
        f"scale={w}:{h}:force_original_aspect_ratio={SCALE_ASPECT_MODE}",
        f"pad={w}:{h}:{PAD_POSITION}",
        f"setpts={RESET_PTS_EXPR}",
        f"fps=fps={format_frame_rate(plan.frame_rate)}",
        "fifo",
    ]


def build_filter_graph(plan: GridPlan) -> FilterGraph:
    """
    Builds the complete grid graph for four inputs.

    Produces four cell segments (`[i:v]...[<position>]`), one hstack for each row
    and a final vstack writing the `final` label.
    """
    graph = FilterGraph(output_label=OUTPUT_LABEL)
    filters = cell_filters(plan)
    for index, position in enumerate(GRID_POSITIONS):
        graph.add(FilterSegment([f"{index}:v"], filters, [position]))

    top_left, top_right, bottom_left, bottom_right = GRID_POSITIONS
    graph.add(FilterSegment([top_left, top_right], ["hstack=inputs=2"], [TOP_ROW_LABEL]))
    graph.add(FilterSegment([bottom_left, bottom_right], ["hstack=inputs=2"], [BOTTOM_ROW_LABEL]))
    graph.add(FilterSegment([TOP_ROW_LABEL, BOTTOM_ROW_LABEL], ["vstack=inputs=2"], [OUTPUT_LABEL]))

    graph.validate()
    return graph
