"""
Video Grid: composes four videos into one 2x2 grid video with ffmpeg.

Sub-packages:
    config: Defaults, stream labels and user-configurable tool paths.
    domain: Probe parsing, grid planning and the filter graph builder.
    services: ffprobe/ffmpeg invocation and file-based run logs.
    pipeline: The end-to-end grid job.
    utils: Subprocess runner, tool resolution, formatting, viewer launcher.
"""
