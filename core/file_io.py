import os
from pathlib import Path
from typing import Protocol

from core.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidFilePathError,
)


class FileReader(Protocol):
    """
    Protocol defining the interface for file reading operations.

    This protocol specifies methods for reading files, allowing different
    implementations for production (filesystem) and testing (mocks).
    """

    def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file as UTF-8.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If the file cannot be opened or is not valid UTF-8.
        """

    def get_file_size(self, file_path: Path) -> int:
        """
        Return the size of a file in bytes.

        Args:
            file_path: The path to the file to stat.

        Raises:
            FileReadError: If the file cannot be stat'ed.
        """


class FileWriter(Protocol):
    """
    Protocol defining the interface for file writing operations.
    """

    def write_file(self, data: str) -> None:
        """
        Replace the content of the destination file with `data`.

        Raises:
            FileWriteError: If writing fails.
        """


class FilesystemFileReader:

    def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file as UTF-8.

        Decoding is strict: source trees are expected to be text, so a file
        that does not decode aborts the scan instead of being skipped.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If an I/O error occurs or the content is not valid UTF-8.
        """
        try:
            with file_path.open("r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise FileReadError(
                message=f"Failed to decode file as UTF-8 text: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e

    def get_file_size(self, file_path: Path) -> int:
        """
        Return the size of a file in bytes.

        Raises:
            FileReadError: If the file does not exist or cannot be stat'ed.
        """
        try:
            return file_path.stat().st_size
        except OSError as e:
            raise FileReadError(
                message=f"Failed to stat file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class FilesystemFileWriter:
    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path

    @classmethod
    def from_path(cls, file_path: Path) -> "FilesystemFileWriter":
        """
        Create a writer instance with an explicit file path.

        Args:
            file_path: The path to the file to manage.

        Returns:
            FilesystemFileWriter instance configured for the given path.

        Raises:
            InvalidFilePathError: If the parent directory doesn't exist or is
                not writable.
        """
        parent = file_path.parent
        if not parent.is_dir():
            raise InvalidFilePathError(
                message=f"Parent directory does not exist: {parent}",
                file_path=str(file_path),
            )
        if not os.access(parent, os.W_OK):
            raise InvalidFilePathError(
                message=f"Parent directory is not writable: {parent}",
                file_path=str(file_path),
            )

        return cls(file_path)

    def write_file(self, data: str) -> None:
        """
        Writes data to the output file, truncating any previous content.

        Args:
            data: String data to write

        Raises:
            InvalidFilePathError: If file path is not set.
            FileWriteError: If writing to the file fails.
        """
        if self.file_path is None:
            raise InvalidFilePathError("No file path set. Use a factory method first.")

        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to write to file: {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e


class MockFileReader:
    """
    Mock implementation of FileReader for testing.

    Serves file contents and sizes from in-memory mappings keyed by path
    (as a POSIX string), so tests can exercise the scan without touching
    the filesystem.
    """

    def __init__(
        self,
        contents: dict[str, str] | None = None,
        sizes: dict[str, int] | None = None,
    ):
        """
        Initialize MockFileReader.

        Args:
            contents: Mapping of path to text content. Paths that are missing
                from the mapping raise FileReadError, like a missing file would.
            sizes: Mapping of path to size in bytes.

        Attributes (for test inspection):
            read_file_calls: List of file paths passed to read_file()
            get_file_size_calls: List of file paths passed to get_file_size()
        """
        self.contents = contents or {}
        self.sizes = sizes or {}

        self.read_file_calls: list[Path] = []
        self.get_file_size_calls: list[Path] = []

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        try:
            return self.contents[file_path.as_posix()]
        except KeyError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e

    def get_file_size(self, file_path: Path) -> int:
        self.get_file_size_calls.append(file_path)
        try:
            return self.sizes[file_path.as_posix()]
        except KeyError as e:
            raise FileReadError(
                message=f"Failed to stat file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class MockFileWriter:
    """
    Mock implementation of FileWriter for testing.

    Records every write so tests can inspect what would have been written.

    Attributes (for test inspection):
        write_file_calls: List of data strings passed to write_file()
        written_data: Content of the last write, as the file would hold it
    """

    def __init__(self) -> None:
        self.write_file_calls: list[str] = []
        self.written_data: str = ""

    def write_file(self, data: str) -> None:
        self.write_file_calls.append(data)
        self.written_data = data
