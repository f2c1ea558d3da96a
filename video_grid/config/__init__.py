"""
Configuration Package for Video Grid.

This package centralizes all the static configuration settings for the application.
By separating configuration from the application logic, it becomes easier to manage
and modify parameters without changing the core code.

This package includes settings for:
- Common application settings like the logging format and run-log filenames.
- User-overridable paths for the external FFmpeg tools.
- Grid layout defaults, stream labels, and fixed ffprobe/ffmpeg arguments.
"""
