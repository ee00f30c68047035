"""
Filesystem adapter for file discovery operations.

This module provides the directory-listing capability the scan is built on.
Listing is recursive and lazy: paths are produced by a generator, relative to
the root that was asked for, so callers can either stream them or collect them.

Directory detection uses `lstat` semantics. A symbolic link that points to a
directory is reported as a file instead of being followed, which keeps the walk
finite even when links form a cycle.
"""

import os
from pathlib import Path
from typing import Generator, Iterable, Iterator, Protocol

from core.exceptions import MissingRootError


class FileLister(Protocol):
    """
    Protocol for listing every file below a root directory.
    """

    def stream_file_paths(self, root: Path) -> Iterator[Path]:
        """
        Yield the path of every file below `root`, relative to `root`.

        Raises:
            MissingRootError: If `root` does not exist or is not a directory.
        """


def walk_files(directory: Path, base_dir: Path) -> Generator[Path, None, None]:
    """
    Recursively yield every non-directory entry under `directory`.

    Entries of each directory are visited in name order, and subdirectories are
    descended into as they are encountered.

    Args:
        directory: The directory currently being listed.
        base_dir: The directory yielded paths are made relative to.

    Yields:
        Path: The entry path relative to `base_dir`.

    Raises:
        MissingRootError: If a directory cannot be listed.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise MissingRootError(
            message=f"Failed to list directory: {directory}",
            file_path=str(directory),
            original_exception=e,
        ) from e

    for entry in entries:
        entry_path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from walk_files(entry_path, base_dir)
        else:
            yield entry_path.relative_to(base_dir)


class FilesystemLister:
    """
    Lists files on the local filesystem.
    """

    def stream_file_paths(self, root: Path) -> Iterator[Path]:
        """
        Lazily yield every file below `root`, relative to `root`.

        The root is validated eagerly so a missing directory fails at call
        time rather than on first iteration.

        Raises:
            MissingRootError: If `root` does not exist or is not a directory.
        """
        if not root.is_dir():
            raise MissingRootError(
                message=f"Directory does not exist: {root}",
                file_path=str(root),
            )
        return walk_files(root, root)


class MockFileLister:
    """
    Mock implementation of FileLister for testing.

    Serves a fixed list of relative paths for every root it knows about and
    raises MissingRootError for any other root.
    """

    def __init__(self, files_by_root: dict[str, Iterable[str]]):
        """
        Args:
            files_by_root: Mapping of root (as a POSIX string) to the relative
                file paths that should be listed under it.

        Attributes (for test inspection):
            stream_file_paths_calls: List of roots passed to stream_file_paths()
        """
        self.files_by_root = {
            root: [Path(p) for p in paths] for root, paths in files_by_root.items()
        }
        self.stream_file_paths_calls: list[Path] = []

    def stream_file_paths(self, root: Path) -> Iterator[Path]:
        self.stream_file_paths_calls.append(root)
        if root.as_posix() not in self.files_by_root:
            raise MissingRootError(
                message=f"Directory does not exist: {root}",
                file_path=str(root),
            )
        return iter(self.files_by_root[root.as_posix()])
