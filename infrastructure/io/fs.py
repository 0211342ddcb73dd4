"""Filesystem utility functions."""

import errno
from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def describe_io_error(error: OSError, path: Path | None, *, writing: bool = False) -> tuple[str, str, str]:
    """
    Map an OS error raised while reading or writing a taxonomy file to user-facing text.

    Args:
        error: The exception raised by the filesystem call
        path: File involved, if known
        writing: True when the failure happened during a save

    Returns:
        Tuple of (title, message, details)
    """
    shown = str(path) if path is not None else "this file"

    if isinstance(error, FileNotFoundError):
        return (
            "File Not Found",
            "The file could not be found.",
            f"Path: {shown}\n\nPlease verify the file exists and you have permission to read it.",
        )
    if isinstance(error, PermissionError):
        verb = "write to" if writing else "read"
        return (
            "Permission Denied",
            "Permission denied.",
            f"You don't have permission to {verb} this file:\n{shown}",
        )
    if error.errno == errno.ENOSPC:
        return (
            "Disk Full",
            "Disk full.",
            "There is no space left on the device to save the file.",
        )

    if writing:
        return ("Error Saving File", "Failed to save taxonomy file.", str(error))
    return ("Error Loading File", "Failed to load taxonomy file.", str(error))
