"""
This module defines the GridEncoder, the service that runs ffmpeg to render
the 2x2 grid from four inputs and a prepared filter graph.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from ..config.common import COMMAND_TEXT
from ..config.grid import FRAME_SYNC_ARGS, GRID_CELL_COUNT, OVERWRITE_ARGS
from ..domain.exceptions import EncodeError
from ..domain.filter_graph import FilterGraph
from ..domain.plan import GridPlan
from ..utils.ffmpeg_utils import format_command, run_cmd
from ..utils.module_updater import Modules


class GridEncoder:
    """
    Encodes four inputs into one grid video.

    The command maps only the graph's output label, caps the length at the
    plan's duration, lets ffmpeg duplicate or drop frames to hold the grid frame
    rate, and overwrites any existing output file.

    Attributes:
        input_paths (list[Path]): The four inputs in grid order.
        graph (FilterGraph): The filter graph to pass as `-filter_complex`.
        plan (GridPlan): Supplies the output duration.
        output_path (Path): Where ffmpeg writes the grid.
        error_log_dir (Path | None): If set, failures and the executed command are recorded here.
    """

    def __init__(
        self,
        input_paths: Sequence[Path],
        graph: FilterGraph,
        plan: GridPlan,
        output_path: Path,
        error_log_dir: Optional[Path] = None,
    ):
        if len(input_paths) != GRID_CELL_COUNT:
            raise EncodeError(
                f"GridEncoder needs exactly {GRID_CELL_COUNT} inputs, got {len(input_paths)}",
                tool=Modules.ffmpeg(),
            )
        self.input_paths: List[Path] = [Path(p) for p in input_paths]
        self.graph = graph
        self.plan = plan
        self.output_path = Path(output_path)
        self.error_log_dir = error_log_dir
        self.encode_cmd_list: List[str] = []

    def build_command(self) -> List[str]:
        """
        Builds the ffmpeg argument list.

        Shape: `ffmpeg -i in1 -i in2 -i in3 -i in4 -filter_complex <graph>
        -map [final] -t <seconds> -vsync 2 -y <output>`.
        """
        cmd_list = [Modules.ffmpeg()]
        for input_path in self.input_paths:
            cmd_list.extend(["-i", str(input_path)])
        cmd_list.extend(["-filter_complex", self.graph.render()])
        cmd_list.extend(["-map", f"[{self.graph.output_label}]"])
        cmd_list.extend(["-t", str(self.plan.duration)])
        cmd_list.extend(FRAME_SYNC_ARGS)
        cmd_list.extend(OVERWRITE_ARGS)
        cmd_list.append(str(self.output_path))
        return cmd_list

    def encode(self):
        """
        Runs ffmpeg and checks its exit status.

        A zero duration is not special-cased; ffmpeg is still invoked. ffmpeg's
        diagnostics are not interpreted, only logged.

        Raises:
            EncodeError: If the output directory cannot be created, or ffmpeg cannot
                         be started or exits with a non-zero status.
        """
        self.encode_cmd_list = self.build_command()
        tool = self.encode_cmd_list[0]
        logger.debug(f"GridEncoder command: {format_command(self.encode_cmd_list)}")

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise EncodeError(
                f"Cannot create output directory {self.output_path.parent}: {e}", tool=tool
            ) from e

        cmd_log_file_path = self.error_log_dir / COMMAND_TEXT if self.error_log_dir else None
        res = run_cmd(
            self.encode_cmd_list,
            src_file_for_log=self.output_path,
            error_log_dir_for_run_cmd=self.error_log_dir,
            show_cmd=__debug__,
            cmd_log_file_path=cmd_log_file_path,
        )

        if res is None:
            raise EncodeError(f"{tool} could not be started", tool=tool)
        if res.returncode != 0:
            raise EncodeError(
                f"{tool} failed with return code {res.returncode} while writing {self.output_path}",
                tool=tool,
                returncode=res.returncode,
            )

        logger.info(f"{tool} finished writing {self.output_path}")
