"""
Services Package for Video Grid.

This package contains the "service layer" of the application: classes and
functions that run the external FFmpeg tools on behalf of the pipeline, and
the file-based run logs.

- **Probe Service (`probe_all`, `probe`):**
  Runs ffprobe for each input's frame rate and duration and returns
  `VideoInput` objects in grid order.

- **Encoding Service (`GridEncoder`):**
  Builds the ffmpeg command from the inputs, the filter graph and the plan,
  runs it and checks its exit status.

- **Logging Service (`SuccessLog`, `ErrorLog`):**
  Writes failed commands to a text log and successful runs to a YAML log,
  separate from the real-time console logging.
"""
