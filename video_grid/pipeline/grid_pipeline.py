import argparse
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..domain.filter_graph import FilterGraph, build_filter_graph
from ..domain.media import VideoInput
from ..domain.plan import GridPlan, plan
from ..services.encoding_service import GridEncoder
from ..services.logging_service import SuccessLog
from ..services.probe_service import probe_all
from ..utils.format_utils import format_elapsed, format_file_size


class GridPipeline:
    """
    Runs the grid job end to end: probe, plan, build the filter graph, encode.

    Every stage runs once, in order, on the calling thread (probing may fan out
    to a thread pool). The first exception from any stage propagates to the
    caller unchanged; nothing is retried and partial output is not removed.
    """

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.input_paths: List[Path] = [Path(args.in1), Path(args.in2), Path(args.in3), Path(args.in4)]
        self.output_path: Path = Path(args.output_path)
        self.error_log_dir: Optional[Path] = getattr(args, "error_log_dir", None)
        self.success_log_dir: Optional[Path] = getattr(args, "success_log_dir", None)

        self.inputs: List[VideoInput] = []
        self.plan: Optional[GridPlan] = None
        self.graph: Optional[FilterGraph] = None
        self.encoder: Optional[GridEncoder] = None

    def probe_inputs(self) -> List[VideoInput]:
        logger.info("Probing input videos...")
        self.inputs = probe_all(
            self.input_paths,
            workers=getattr(self.args, "probe_workers", 1),
            error_log_dir=self.error_log_dir,
        )
        for video_input in self.inputs:
            logger.info(
                f"  {video_input.position:<12} {video_input.path.name}: "
                f"{video_input.frame_rate:.3f} fps, {video_input.duration}s"
            )
        return self.inputs

    def plan_grid(self) -> GridPlan:
        self.plan = plan(
            rates=[v.frame_rate for v in self.inputs],
            durations=[v.duration for v in self.inputs],
            max_rate_cap=self.args.max_framerate,
            requested_duration=self.args.duration,
            output_width=self.args.width,
            output_height=self.args.height,
        )
        if self.args.width % 2 or self.args.height % 2:
            logger.warning(
                f"Output size {self.args.width}x{self.args.height} is odd; "
                f"the grid will be {self.plan.cell_width * 2}x{self.plan.cell_height * 2}."
            )
        logger.info(
            f"Grid plan: {self.plan.cell_width}x{self.plan.cell_height} cells, "
            f"{self.plan.frame_rate:.3f} fps, {self.plan.duration}s"
        )
        return self.plan

    def build_graph(self) -> FilterGraph:
        self.graph = build_filter_graph(self.plan)
        logger.debug(f"Filter graph: {self.graph.render()}")
        return self.graph

    def encode(self):
        self.encoder = GridEncoder(
            self.input_paths,
            self.graph,
            self.plan,
            self.output_path,
            error_log_dir=self.error_log_dir,
        )
        logger.info(f"Encoding grid to {self.output_path}...")
        self.encoder.encode()

    def run(self) -> Path:
        """
        Runs all stages and returns the output path.

        Raises:
            ProbeError, PlanError, EncodeError: From the stage that failed.
        """
        start_time = datetime.now()

        self.probe_inputs()
        self.plan_grid()
        self.build_graph()
        self.encode()

        elapsed = datetime.now() - start_time
        size = self.output_path.stat().st_size if self.output_path.exists() else 0
        logger.info(f"Wrote {self.output_path} ({format_file_size(size)}) in {format_elapsed(elapsed)}")

        if self.success_log_dir:
            self.write_success_log(elapsed, size)
        return self.output_path

    def write_success_log(self, elapsed, size: int):
        SuccessLog(self.success_log_dir).write(
            {
                "date": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                "output": str(self.output_path.resolve()),
                "output_size": format_file_size(size),
                "elapsed": format_elapsed(elapsed),
                "inputs": [v.to_dict() for v in self.inputs],
                "plan": self.plan.to_dict(),
                "ffmpeg_command": self.encoder.encode_cmd_list if self.encoder else [],
            }
        )
