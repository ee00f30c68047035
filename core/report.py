from pathlib import Path
from typing import Iterable

from constants import SIZE_CONVERSION_FACTOR
from core.file_io import FileReader, FileWriter, FilesystemFileReader
from core.models import AssetReport, UnusedAsset


def bytes_to_mb(size_in_bytes: int) -> float:
    """Convert a byte count to megabytes rounded to two decimals."""
    return round(size_in_bytes / SIZE_CONVERSION_FACTOR, 2)


def build_report(
    unused_assets: Iterable[str],
    assets_dir: Path,
    reader: FileReader | None = None,
) -> AssetReport:
    """
    Attach disk sizes to the unused assets and compute the grand total.

    Each asset's size is rounded to two decimals on its own; the total is the
    sum of those rounded sizes, rounded once more at the end.

    Args:
        unused_assets: Unused asset paths relative to `assets_dir`.
        assets_dir: Root of the assets tree.
        reader: Optional file reader used to stat the assets.

    Returns:
        AssetReport with one entry per unused asset, in the given order.

    Raises:
        FileReadError: If an asset cannot be stat'ed.
    """
    reader = reader if reader is not None else FilesystemFileReader()

    entries = tuple(
        UnusedAsset(asset, bytes_to_mb(reader.get_file_size(assets_dir / asset)))
        for asset in unused_assets
    )
    total = round(sum(entry.size_in_mb for entry in entries), 2)

    return AssetReport(assets=entries, total_size_in_mb=total)


def format_total(report: AssetReport) -> str:
    return f"Total size of unused assets: {report.total_size_in_mb:.2f} MB"


def format_report(report: AssetReport) -> str:
    """
    Render the report as text.

    One `<path> -- <size> MB` line per asset, then a blank line and the total.
    """
    lines = "\n".join(
        f"{asset.path} -- {asset.size_in_mb:.2f} MB" for asset in report.assets
    )
    return f"{lines}\n\n{format_total(report)}"


def write_report(report: AssetReport, writer: FileWriter) -> None:
    """
    Render the report and hand it to the writer, replacing any previous report.

    Raises:
        FileWriteError: If the writer cannot write the report.
    """
    writer.write_file(format_report(report))
