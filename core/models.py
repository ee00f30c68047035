"""
Core data models for the unused-assets scan.

This module defines the configuration that drives a scan and the immutable
result structures handed to the report writer.
"""

from dataclasses import dataclass
from pathlib import Path

from constants import (
    DEFAULT_ASSETS_SUBDIR,
    DEFAULT_CONSTANTS_FILE,
    DEFAULT_PROJECT_DIR,
    REPORT_FILE_NAME,
)


@dataclass(frozen=True)
class ScanConfig:
    """
    Paths that drive a single scan.

    Attributes:
        project_dir: Root of the source tree whose files form the reference corpus.
        assets_dir: Root of the media files to check. Reported paths are relative to it.
        constants_file: Indirection source that re-exports assets via `require(...)`.
            It is optional on disk; a missing file means no exported assets.
        report_path: Destination of the text report.
    """

    project_dir: Path
    assets_dir: Path
    constants_file: Path
    report_path: Path

    @classmethod
    def from_project(
        cls,
        project_dir: Path = DEFAULT_PROJECT_DIR,
        assets_dir: Path | None = None,
        constants_file: Path | None = None,
        report_path: Path | None = None,
    ) -> "ScanConfig":
        """
        Build a config, deriving any path that was not given from the project directory.

        Args:
            project_dir: Root of the source tree.
            assets_dir: Defaults to `<project_dir>/assets`.
            constants_file: Defaults to `<project_dir>/constants/images.js`.
            report_path: Defaults to `unused_assets.txt` next to the project directory.

        Returns:
            ScanConfig with every path populated.
        """
        return cls(
            project_dir=project_dir,
            assets_dir=(
                assets_dir if assets_dir is not None else project_dir / DEFAULT_ASSETS_SUBDIR
            ),
            constants_file=(
                constants_file
                if constants_file is not None
                else project_dir / DEFAULT_CONSTANTS_FILE
            ),
            report_path=(
                report_path
                if report_path is not None
                else project_dir.absolute().parent / REPORT_FILE_NAME
            ),
        )


@dataclass(frozen=True)
class UnusedAsset:
    """
    An asset that no project file references.

    Attributes:
        path: Path relative to the assets root, using forward slashes.
        size_in_mb: File size in megabytes, rounded to two decimals.
    """

    path: str
    size_in_mb: float


@dataclass(frozen=True)
class AssetReport:
    assets: tuple[UnusedAsset, ...]
    total_size_in_mb: float

    def __len__(self) -> int:
        return len(self.assets)
