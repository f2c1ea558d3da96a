"""
Formatting for the end-of-run summary: how long the encode took and how big
the grid file came out.
"""

from datetime import timedelta

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def format_elapsed(elapsed: timedelta) -> str:
    """
    Renders a run duration.

    Runs shorter than a minute keep sub-second precision ("0.42s", "12.30s");
    longer runs use "HH:MM:SS".
    """
    total = max(elapsed.total_seconds(), 0.0)
    if total < 60:
        return f"{total:.2f}s"

    hours, rest = divmod(int(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def format_file_size(num_bytes: int) -> str:
    """
    Renders a byte count with a binary unit and one decimal, e.g. "1.5 MiB".
    Plain bytes are shown without a decimal.
    """
    value = float(max(num_bytes, 0))
    for unit in SIZE_UNITS[:-1]:
        if value < 1024:
            break
        value /= 1024
    else:
        unit = SIZE_UNITS[-1]

    if unit == "B":
        return f"{int(value)} B"
    return f"{value:.1f} {unit}"
