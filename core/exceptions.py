"""
Custom exception classes for the unused-assets CLI.

Every failure the scan can hit is a filesystem failure: a root directory that
is missing, a file that cannot be read or decoded, or a report that cannot be
written. All of them derive from `FileIOError`, which carries the offending
path and diagnostic information about the underlying OS error so the CLI can
render a helpful message before aborting.
"""

import os
from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file I/O errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file or directory involved, if known.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing the exception type, details,
            and OS name.
    """

    default_message = "An error occurred while accessing the filesystem"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class MissingRootError(FileIOError):
    """
    Raised when the assets root or the project root does not exist or cannot
    be listed.
    """

    default_message = "Root directory does not exist or is not readable"


class FileReadError(FileIOError):
    """
    Raised when a file cannot be read, decoded as UTF-8 text, or stat'ed.
    """

    default_message = "Failed to read file"


class FileWriteError(FileIOError):
    """Raised when the report cannot be written."""

    default_message = "Failed to write file"


class InvalidFilePathError(FileIOError):
    """
    Raised when a destination path is unusable, e.g. its parent directory is
    missing or not writable.
    """

    default_message = "Invalid file path"
