"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants that are
used across the entire Video Grid application. It centralizes parameters for
logging and run-log files. It also handles the loading of user-specific
configurations from an external YAML file, allowing the locations of the
FFmpeg tools to be customized without modifying the source code.
"""
from pathlib import Path
import yaml
from loguru import logger

# --- User-Defined Path Configuration ---
# This block loads user-specific paths from a 'config.user.yaml' file located
# at the project root. This allows users to specify the location of the
# FFmpeg/ffprobe executables without hardcoding paths.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# The directory containing the ffmpeg and ffprobe executables. This is loaded from
# 'config.user.yaml'. If not provided or None, the application assumes the
# executables are available in the system's PATH.
MODULE_PATH: Path | None = None


def load_user_config(config_path: Path) -> Path | None:
    """
    Reads the `paths.ffmpeg_dir` entry from a user YAML config file.

    Args:
        config_path: Location of the YAML file.

    Returns:
        The configured tool directory, or None if the file is missing, empty,
        unreadable or does not set `ffmpeg_dir`.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Relying on system PATH for executables.")
        return None
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return None

    if not isinstance(user_config, dict):
        return None
    paths_config = user_config.get("paths") or {}
    ffmpeg_dir_str = paths_config.get("ffmpeg_dir")
    return Path(ffmpeg_dir_str) if ffmpeg_dir_str else None


MODULE_PATH = load_user_config(USER_CONFIG_PATH)


# --- Logging Configuration ---
# Settings related to application-wide logging.

# The format string for the Loguru logger. It defines the structure and appearance
# of log messages, including timestamp, level, module name, and the message itself.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# The filename for the YAML success log written into `--success-log-dir`.
DEFAULT_SUCCESS_LOG_YAML = "success_log.yaml"

# The filename for the plain text error log written into `--error-log-dir`.
ERROR_LOG_FILE_NAME = "error.txt"

# The filename for the text file that logs the exact FFmpeg command executed
# for a grid job. This is extremely useful for debugging filter graphs.
COMMAND_TEXT = "cmd.txt"
