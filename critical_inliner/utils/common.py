"""Common utilities for Critical Inliner."""

import os
from .error import FileOperationError

def ensure_directory(path: str) -> bool:
    """Ensure directory exists.

    Args:
        path: Directory path

    Returns:
        True if directory exists or was created

    Raises:
        FileOperationError: If directory creation fails
    """
    try:
        if path and not os.path.exists(path):
            os.makedirs(path)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}")

def format_size(size: int) -> str:
    """Format a byte count for log output.

    Args:
        size: Number of bytes

    Returns:
        Size as "512 B" or "1.2 kB"
    """
    if size < 1000:
        return f"{size} B"
    return f"{size / 1000:.1f} kB"

def percent_of(part: int, whole: int) -> int:
    """Return part as a whole-number percentage of whole (0 when whole is 0)."""
    if not whole:
        return 0
    return round(part / whole * 100)

# Exported functions
__all__ = [
    'ensure_directory',
    'format_size',
    'percent_of',
]
