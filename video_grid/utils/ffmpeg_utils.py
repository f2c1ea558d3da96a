"""
This module provides the function used to run the external FFmpeg tools.

`run_cmd` wraps `subprocess.run` with logging of the command and its output,
optional recording of the command line to a file, and an error log entry
when the executable cannot be started or exits with a non-zero status.
"""

import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from ..services.logging_service import ErrorLog


def format_command(cmd_list: Sequence[str]) -> str:
    """
    Returns a copy-pasteable, shell-quoted version of a command list.
    """
    if os.name == "nt":
        return subprocess.list2cmdline(list(cmd_list))
    return shlex.join(cmd_list)


def run_cmd(
    cmd_parts: Sequence[str],
    src_file_for_log: Path = Path(),
    error_log_dir_for_run_cmd: Optional[Path] = None,
    show_cmd: bool = False,
    cmd_log_file_path: Optional[Path] = None,
) -> Optional[subprocess.CompletedProcess]:
    """
    Executes an external command and captures its output.

    This is a wrapper around Python's `subprocess.run` that adds logging and
    error recording. The command is never passed through a shell.

    Args:
        cmd_parts: The command to execute as a list of arguments.
        src_file_for_log: The file being processed, used for logging context
                          in case of an error.
        error_log_dir_for_run_cmd: The directory where an error log should be written
                                   if the command fails.
        show_cmd: If True, the command will be logged at the DEBUG level before execution.
        cmd_log_file_path: If provided, the executed command string will be appended
                           to this file.

    Returns:
        A `subprocess.CompletedProcess` object containing the return code, stdout,
        and stderr. Returns `None` if the command could not be started (e.g.
        the executable is missing).
    """
    cmd_list: List[str] = [str(part) for part in cmd_parts]
    if not cmd_list:
        logger.error("run_cmd received an empty command list.")
        return None

    display_cmd_str = format_command(cmd_list)
    if show_cmd:
        logger.debug(f"Executing command: {display_cmd_str}")

    if cmd_log_file_path:
        try:
            cmd_log_file_path.parent.mkdir(parents=True, exist_ok=True)
            with cmd_log_file_path.open("a", encoding="utf-8") as cmd_f:
                cmd_f.write(display_cmd_str + "\n")
        except OSError as e:
            logger.error(f"Failed to write command to log file {cmd_log_file_path}: {e}")

    try:
        result = subprocess.run(
            cmd_list,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            shell=False,
        )
    except OSError as e:
        # Includes a configured tool that is not a runnable binary (ENOEXEC).
        logger.error(
            f"Error: Could not run '{cmd_list[0]}' ({type(e).__name__}). "
            "Ensure it's in your system's PATH or configured in 'config.user.yaml'."
        )
        if error_log_dir_for_run_cmd:
            ErrorLog(error_log_dir_for_run_cmd).write(
                f"Command execution error for: {src_file_for_log.name or 'N/A'}",
                f"Command: {display_cmd_str}",
                f"Error: {type(e).__name__} - {e}",
            )
        return None

    if result.stdout and len(result.stdout) > 500:
        logger.trace(f"Command stdout (truncated): {result.stdout[:500]}...")
    elif result.stdout:
        logger.trace(f"Command stdout: {result.stdout}")

    # ffmpeg writes progress to stderr, so only a failing exit code makes it an error.
    if result.stderr and result.returncode != 0:
        logger.debug(f"Command stderr (error, rc={result.returncode}): {result.stderr}")
    elif result.stderr:
        logger.trace(f"Command stderr (non-error, rc={result.returncode}): {result.stderr}")

    if result.returncode != 0 and error_log_dir_for_run_cmd:
        ErrorLog(error_log_dir_for_run_cmd).write(
            f"Command failed for: {src_file_for_log.name or 'N/A'} (rc={result.returncode})",
            f"Command: {display_cmd_str}",
            f"stderr:\n{result.stderr}",
        )

    return result
