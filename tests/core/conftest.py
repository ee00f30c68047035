"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures: builders for on-disk project
trees, mock collaborators, and a silent progress display.
"""

from pathlib import Path

import pytest

from adapters.filesystem import MockFileLister
from core.file_io import MockFileReader
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def project_tree(tmp_path):
    """
    Factory that writes a project tree under tmp_path.

    Keys are paths relative to tmp_path; str values are written as UTF-8 text,
    bytes values as-is, and int values as a file of that many bytes.
    """

    def _factory(files: dict[str, str | bytes | int]) -> Path:
        for relative_path, content in files.items():
            file_path = tmp_path / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                file_path.write_text(content, encoding="utf-8")
            elif isinstance(content, bytes):
                file_path.write_bytes(content)
            else:
                file_path.write_bytes(b"a" * content)
        return tmp_path

    return _factory


@pytest.fixture
def mock_file_lister_factory():
    """Factory for creating MockFileLister instances."""

    def _factory(files_by_root: dict[str, list[str]]) -> MockFileLister:
        return MockFileLister(files_by_root)

    return _factory


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances keyed by POSIX path."""

    def _factory(
        contents: dict[str, str] | None = None, sizes: dict[str, int] | None = None
    ) -> MockFileReader:
        return MockFileReader(contents=contents, sizes=sizes)

    return _factory
