"""
This module provides the Modules class to resolve and verify the external tools
required by the application: ffmpeg and ffprobe.
"""
import subprocess
import sys

from loguru import logger

# Import paths from the user configuration file.
from ..config.common import MODULE_PATH


class Modules:
    """
    A utility class to handle operations related to the external FFmpeg tools.

    It reads the tool directory from the user's `config.user.yaml` file and
    provides a fallback to the system's PATH if no specific path is configured.
    """

    @staticmethod
    def get_tool_path(tool_name: str) -> str:
        """
        Determines the executable path to use for an FFmpeg tool.

        It prioritizes the directory from the user configuration (`ffmpeg_dir`).
        If that is not set or does not contain the tool, it falls back to the bare
        tool name, which relies on the executable being in the system's PATH.
        Platform-specific executable names (".exe" on Windows) are handled.

        Args:
            tool_name: "ffmpeg" or "ffprobe".

        Returns:
            A string containing the command or absolute path to the executable.
        """
        exe_name = f"{tool_name}.exe" if sys.platform == "win32" else tool_name

        if MODULE_PATH and MODULE_PATH.is_dir():
            configured_path = MODULE_PATH / exe_name
            if configured_path.is_file():
                logger.trace(f"Using {tool_name} from configured path: '{configured_path}'")
                return str(configured_path)
            logger.warning(
                f"`ffmpeg_dir` is configured, but '{exe_name}' was not found there. Falling back to system PATH."
            )

        return tool_name

    @staticmethod
    def ffmpeg() -> str:
        return Modules.get_tool_path("ffmpeg")

    @staticmethod
    def ffprobe() -> str:
        return Modules.get_tool_path("ffprobe")

    @staticmethod
    def verify_tool(tool_name: str) -> bool:
        """
        Verifies that a tool is installed, accessible, and can be executed.

        This method runs `<tool> -version` and logs the first line of the output on
        success, or a detailed error message if the command fails. A failed check
        is not fatal here; the later probe or encode step reports the failure.

        Returns:
            True if the tool ran successfully, False otherwise.
        """
        tool_cmd = Modules.get_tool_path(tool_name)

        try:
            result = subprocess.run(
                [tool_cmd, "-version"],
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.CalledProcessError as e:
            logger.error(f"{tool_name} version command failed (return code {e.returncode}):\n{e.stderr}")
            return False
        except FileNotFoundError:
            logger.error(
                f"{tool_name} command not found. Please ensure FFmpeg is installed and accessible.\n"
                "You can either add it to your system's PATH or specify its location in the 'config.user.yaml' file."
            )
            return False

        version_output_lines = result.stdout.splitlines()
        first_line = version_output_lines[0] if version_output_lines else ""
        logger.debug(f"{tool_name} version check successful: {first_line}")
        return True

    @staticmethod
    def run_all() -> bool:
        """
        Runs all startup checks. This is typically called once when the application starts.
        """
        ffmpeg_ok = Modules.verify_tool("ffmpeg")
        ffprobe_ok = Modules.verify_tool("ffprobe")
        return ffmpeg_ok and ffprobe_ok
