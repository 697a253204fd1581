"""
Utility functions for the asyncpath command line.
"""

from datetime import datetime


def format_size(size: int) -> str:
    """
    Format a byte count for humans.

    Args:
        size: Size in bytes

    Returns:
        Formatted string like "512 B", "1.5 KB" or "3.2 MB"
    """
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def format_mtime(timestamp: float) -> str:
    """
    Format a Unix timestamp as YYYY-MM-DD HH:MM.

    Args:
        timestamp: Unix timestamp (float)

    Returns:
        Formatted string, or "----------" if timestamp is 0
    """
    if timestamp == 0:
        return "----------"

    dt = datetime.fromtimestamp(timestamp)
    return dt.strftime("%Y-%m-%d %H:%M")
