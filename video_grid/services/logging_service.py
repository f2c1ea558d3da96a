"""
This module provides classes for writing file-based run logs.

It separates logging concerns into specific classes for handling errors (ErrorLog)
and successes (SuccessLog). Error logs are plain text for easy reading; success
logs are YAML lists, one entry per finished grid, so they can be processed by
other tools. Both are independent of the real-time console logging done with loguru.
"""

from pathlib import Path
from typing import Dict, List, Union

import yaml
from loguru import logger

from ..config.common import (
    DEFAULT_SUCCESS_LOG_YAML,
    ERROR_LOG_FILE_NAME,
)


class Log:
    """
    A base class for all file logging operations.

    It handles the setup of the log directory, creating it if necessary.
    """

    # A decorative separator line used in text-based logs for better readability.
    linesep_marker: str = "=" * 50

    def __init__(self, log_dir: Path):
        """
        Args:
            log_dir: The directory log files will be created in.
        """
        self.log_file_path: Path  # To be defined by the subclass.
        self.log_dir: Path = Path(log_dir).resolve()
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def write(self, log_content: Union[dict, list, str]):
        raise NotImplementedError("Subclasses must implement the write() method.")


class ErrorLog(Log):
    """
    Appends human-readable error records to a plain text file.

    Each call adds a block of lines followed by a separator, making the file a
    chronological record of failed commands.
    """

    def __init__(self, error_log_dir: Path, filename: str = ERROR_LOG_FILE_NAME):
        super().__init__(error_log_dir)
        self.log_file_path = self.log_dir / filename

    def write(self, *error_messages: str):
        """
        Writes one or more error messages to the log file.

        Args:
            *error_messages: Pieces of the error record, each written on its own line.
        """
        if not error_messages:
            return

        content_to_write = "\n".join(error_messages) + "\n" + self.linesep_marker + "\n"

        try:
            with self.log_file_path.open("a", encoding="utf-8") as f:
                f.write(content_to_write)
        except OSError as e:
            # Fall back to the console so the error message is not lost.
            logger.error(f"Failed to write to error log {self.log_file_path}: {e}")
            for msg in error_messages:
                logger.error(f"  - {msg}")


class SuccessLog(Log):
    """
    Records successful grid runs as a YAML list in `success_log.yaml`.
    """

    def __init__(self, success_log_dir: Path):
        super().__init__(success_log_dir)
        self.log_file_path = self.log_dir / DEFAULT_SUCCESS_LOG_YAML
        self.log_entries: List[Dict] = []

    def _load_entries(self) -> List[Dict]:
        if not self.log_file_path.is_file():
            return []
        try:
            with self.log_file_path.open("r", encoding="utf-8") as f:
                loaded_entries = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error reading/parsing success log {self.log_file_path}: {e}. Starting a new log.")
            return []

        if loaded_entries is None:
            return []
        if not isinstance(loaded_entries, list):
            logger.warning(f"Success log {self.log_file_path} contained unexpected data. Starting a new log.")
            return []
        return loaded_entries

    def write(self, new_log_entry: dict):
        """
        Appends a structured entry to the YAML file.

        The existing list is read back first so the file always holds one valid
        YAML list. Each entry gets an increasing `index`.
        """
        if not isinstance(new_log_entry, dict):
            logger.error("SuccessLog.write expects a dictionary as a log entry.")
            return

        self.log_entries = self._load_entries()
        current_max_index = max(
            (entry.get("index", 0) for entry in self.log_entries if isinstance(entry, dict)),
            default=0,
        )
        new_log_entry["index"] = current_max_index + 1
        self.log_entries.append(new_log_entry)

        try:
            with self.log_file_path.open("w", encoding="utf-8") as f:
                yaml.dump(
                    self.log_entries,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                    indent=4,
                    width=220,
                )
        except OSError as e:
            logger.error(f"Failed to write to success log {self.log_file_path}: {e}")
