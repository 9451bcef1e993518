from __future__ import annotations

"""
Size formatting helpers.

- format_size: format a byte count using binary thresholds (KB, MB, GB, TB).

Units step at powers of 1024; anything under 1 KB is shown as a plain byte count.
"""


KB = 1024
MB = KB * 1024
GB = MB * 1024
TB = GB * 1024

_UNITS = (
    (TB, "TB"),
    (GB, "GB"),
    (MB, "MB"),
    (KB, "KB"),
)


def format_size(size: int) -> str:
    """
    Format a byte count with two decimals in the largest fitting unit.

    Examples:
        512 -> "512 bytes"
        1536 -> "1.50 KB"
        1099511627776 -> "1.00 TB"
    """
    for threshold, unit in _UNITS:
        if size >= threshold:
            return f"{size / threshold:.2f} {unit}"
    return f"{int(size)} bytes"
