"""
Unit tests for the filter graph builder.
"""
import re

import pytest

from video_grid.domain.exceptions import FilterGraphError
from video_grid.domain.filter_graph import (
    FilterGraph,
    FilterSegment,
    build_filter_graph,
    format_frame_rate,
)
from video_grid.domain.plan import GridPlan

EXPECTED_HD_EXPRESSION = (
    "[0:v]scale=960:540:force_original_aspect_ratio=decrease,pad=960:540:(ow-iw)/2:(oh-ih)/2,"
    "setpts=PTS-STARTPTS,fps=fps=30,fifo[top_left]; "
    "[1:v]scale=960:540:force_original_aspect_ratio=decrease,pad=960:540:(ow-iw)/2:(oh-ih)/2,"
    "setpts=PTS-STARTPTS,fps=fps=30,fifo[top_right]; "
    "[2:v]scale=960:540:force_original_aspect_ratio=decrease,pad=960:540:(ow-iw)/2:(oh-ih)/2,"
    "setpts=PTS-STARTPTS,fps=fps=30,fifo[bottom_left]; "
    "[3:v]scale=960:540:force_original_aspect_ratio=decrease,pad=960:540:(ow-iw)/2:(oh-ih)/2,"
    "setpts=PTS-STARTPTS,fps=fps=30,fifo[bottom_right]; "
    "[top_left][top_right]hstack=inputs=2[top]; "
    "[bottom_left][bottom_right]hstack=inputs=2[bottom]; "
    "[top][bottom]vstack=inputs=2[final]"
)


def test_hd_expression(hd_plan):
    assert build_filter_graph(hd_plan).render() == EXPECTED_HD_EXPRESSION


def test_segment_counts(hd_plan):
    graph = build_filter_graph(hd_plan)

    assert len(graph.segments) == 7
    assert len(graph.segments_of_kind("fifo")) == 4
    assert len(graph.segments_of_kind("hstack")) == 2
    assert len(graph.segments_of_kind("vstack")) == 1


def test_final_written_exactly_once(hd_plan):
    expression = build_filter_graph(hd_plan).render()

    # A label is written when it closes a segment.
    written = re.findall(r"\[(\w+)\](?:;|$)", expression)
    assert written.count("final") == 1
    assert len(written) == len(set(written))


def test_every_cell_label_read_once(hd_plan):
    graph = build_filter_graph(hd_plan)
    reads = [label for segment in graph.segments for label in segment.inputs]

    for label in ("top_left", "top_right", "bottom_left", "bottom_right", "top", "bottom"):
        assert reads.count(label) == 1
    assert "final" not in reads


def test_fractional_rate_kept_exact():
    plan = GridPlan(30000 / 1001, 10, 640, 360, 1280, 720)
    expression = build_filter_graph(plan).render()

    assert f"fps=fps={30000 / 1001!r}" in expression
    assert "scale=640:360" in expression


@pytest.mark.parametrize("rate,expected", [(30.0, "30"), (25, "25"), (12.5, "12.5")])
def test_format_frame_rate(rate, expected):
    assert format_frame_rate(rate) == expected


class TestFilterGraphLabels:
    def test_duplicate_write_rejected(self):
        graph = FilterGraph()
        graph.add(FilterSegment(["0:v"], ["fifo"], ["a"]))

        with pytest.raises(FilterGraphError, match="written more than once"):
            graph.add(FilterSegment(["1:v"], ["fifo"], ["a"]))

    def test_read_before_write_rejected(self):
        graph = FilterGraph()

        with pytest.raises(FilterGraphError, match="read before it is written"):
            graph.add(FilterSegment(["a", "b"], ["hstack=inputs=2"], ["top"]))

    def test_double_read_rejected(self):
        graph = FilterGraph()
        graph.add(FilterSegment(["0:v"], ["fifo"], ["a"]))
        graph.add(FilterSegment(["1:v"], ["fifo"], ["b"]))
        graph.add(FilterSegment(["a", "b"], ["hstack=inputs=2"], ["top"]))

        with pytest.raises(FilterGraphError, match="read more than once"):
            graph.add(FilterSegment(["a"], ["fifo"], ["c"]))

    def test_unconsumed_label_rejected_on_render(self):
        graph = FilterGraph()
        graph.add(FilterSegment(["0:v"], ["fifo"], ["a"]))
        graph.add(FilterSegment(["1:v"], ["fifo"], ["final"]))

        with pytest.raises(FilterGraphError, match="never consumed: a"):
            graph.render()

    def test_missing_output_rejected(self):
        graph = FilterGraph()
        graph.add(FilterSegment(["0:v"], ["fifo"], ["a"]))

        with pytest.raises(FilterGraphError, match="never written"):
            graph.validate()

    def test_segment_without_filters_rejected(self):
        with pytest.raises(FilterGraphError):
            FilterSegment(["0:v"], [], ["a"])
