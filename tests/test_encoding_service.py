"""
Unit tests for the ffmpeg grid encoder.
"""
from unittest.mock import patch

import pytest

from video_grid.domain.exceptions import EncodeError
from video_grid.domain.filter_graph import build_filter_graph
from video_grid.domain.plan import GridPlan
from video_grid.services.encoding_service import GridEncoder

RUN_CMD = "video_grid.services.encoding_service.run_cmd"


@pytest.fixture
def encoder(input_paths, hd_plan, tmp_path):
    return GridEncoder(input_paths, build_filter_graph(hd_plan), hd_plan, tmp_path / "grid.mp4")


def test_command_shape(encoder, input_paths, tmp_path):
    cmd = encoder.build_command()

    assert cmd[0] == "ffmpeg"
    assert cmd[1:9] == [
        "-i", str(input_paths[0]),
        "-i", str(input_paths[1]),
        "-i", str(input_paths[2]),
        "-i", str(input_paths[3]),
    ]
    assert cmd[9] == "-filter_complex"
    assert cmd[10] == encoder.graph.render()
    assert cmd[11:] == ["-map", "[final]", "-t", "15", "-vsync", "2", "-y", str(tmp_path / "grid.mp4")]


def test_encode_success(encoder, completed):
    with patch(RUN_CMD, return_value=completed()) as mock_run:
        encoder.encode()

    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] == encoder.encode_cmd_list
    assert mock_run.call_args.kwargs["cmd_log_file_path"] is None


def test_encode_non_zero_exit(encoder, completed):
    with patch(RUN_CMD, return_value=completed(returncode=187, stderr="Error initializing filter")):
        with pytest.raises(EncodeError) as exc_info:
            encoder.encode()

    assert exc_info.value.tool == "ffmpeg"
    assert exc_info.value.returncode == 187
    assert "ffmpeg" in str(exc_info.value)


def test_encode_missing_ffmpeg(encoder):
    with patch(RUN_CMD, return_value=None):
        with pytest.raises(EncodeError, match="could not be started") as exc_info:
            encoder.encode()

    assert exc_info.value.returncode is None


def test_zero_duration_still_encodes(input_paths, tmp_path, completed):
    plan = GridPlan(30.0, 0, 960, 540, 1920, 1080)
    encoder = GridEncoder(input_paths, build_filter_graph(plan), plan, tmp_path / "grid.mp4")

    with patch(RUN_CMD, return_value=completed()) as mock_run:
        encoder.encode()

    cmd = mock_run.call_args.args[0]
    assert cmd[cmd.index("-t") + 1] == "0"


def test_output_directory_created(input_paths, hd_plan, tmp_path, completed):
    output_path = tmp_path / "nested" / "dir" / "grid.mp4"
    encoder = GridEncoder(input_paths, build_filter_graph(hd_plan), hd_plan, output_path)

    with patch(RUN_CMD, return_value=completed()):
        encoder.encode()

    assert output_path.parent.is_dir()


def test_error_log_dir_records_command(input_paths, hd_plan, tmp_path, completed):
    log_dir = tmp_path / "logs"
    encoder = GridEncoder(
        input_paths, build_filter_graph(hd_plan), hd_plan, tmp_path / "grid.mp4", error_log_dir=log_dir
    )

    with patch(RUN_CMD, return_value=completed()) as mock_run:
        encoder.encode()

    assert mock_run.call_args.kwargs["cmd_log_file_path"] == log_dir / "cmd.txt"
    assert mock_run.call_args.kwargs["error_log_dir_for_run_cmd"] == log_dir


def test_requires_four_inputs(input_paths, hd_plan, tmp_path):
    with pytest.raises(EncodeError, match="exactly 4"):
        GridEncoder(input_paths[:2], build_filter_graph(hd_plan), hd_plan, tmp_path / "grid.mp4")


def test_output_parent_is_a_file(input_paths, hd_plan, tmp_path, completed):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    encoder = GridEncoder(input_paths, build_filter_graph(hd_plan), hd_plan, blocker / "grid.mp4")

    with patch(RUN_CMD, return_value=completed()) as mock_run:
        with pytest.raises(EncodeError, match="Cannot create output directory") as exc_info:
            encoder.encode()

    assert exc_info.value.tool == "ffmpeg"
    mock_run.assert_not_called()
