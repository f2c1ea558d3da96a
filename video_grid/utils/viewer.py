"""
Opens a finished file with the operating system's default application.
"""
import os
import subprocess
import sys
from pathlib import Path

from loguru import logger

from ..domain.exceptions import ViewerError


def open_in_default_viewer(path: Path):
    """
    Opens `path` in the OS default viewer (`startfile` on Windows, `open` on
    macOS, `xdg-open` elsewhere). The viewer is launched and not waited on.

    Raises:
        ViewerError: If the file does not exist or the launcher cannot be started.
    """
    path = Path(path)
    if not path.exists():
        raise ViewerError(f"Cannot open {path}: file does not exist")

    logger.info(f"Opening {path} in the default viewer")
    try:
        if os.name == "nt":
            os.startfile(str(path))
        elif sys.platform == "darwin":
            subprocess.Popen(["open", str(path)])
        else:
            subprocess.Popen(["xdg-open", str(path)])
    except OSError as e:
        raise ViewerError(f"Cannot open {path}: {e}") from e
