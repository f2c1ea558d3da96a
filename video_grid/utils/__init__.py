"""
Utilities Package for Video Grid.

This package contains helper modules that support the pipeline without being
specific to grid composition.

Modules:
    - ffmpeg_utils.py: Runs external commands with logging and error recording.
    - format_utils.py: Formats elapsed times and file sizes for display.
    - module_updater.py: Resolves and verifies the ffmpeg/ffprobe executables.
    - viewer.py: Opens the finished output in the OS default viewer.
"""
