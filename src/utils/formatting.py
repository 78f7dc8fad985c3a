from __future__ import annotations

from datetime import datetime
from typing import Optional

"""Human-readable rendering of sizes and timestamps."""

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
CONVERSION_VALUE = 1024
UNKNOWN = "unknown"


def normalize_size(size_bytes: int) -> tuple[float, str]:
    """Convert bytes to the largest unit keeping the value at least 1.

    Returns (value rounded to 2 decimals, unit).
    """
    power = 0
    while (
        power < len(SIZE_UNITS) - 1
        and size_bytes / CONVERSION_VALUE ** (power + 1) >= 1
    ):
        power += 1
    return round(size_bytes / CONVERSION_VALUE**power, 2), SIZE_UNITS[power]


def format_size(size_bytes: Optional[int]) -> str:
    # zero is a known size, only None is unknown
    if size_bytes is None or size_bytes < 0:
        return UNKNOWN
    value, unit = normalize_size(size_bytes)
    return f"{value:g} {unit} ({size_bytes} bytes)"


def format_time(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S")
