"""
Unused Assets CLI Entry Point.

This module implements the command-line interface that finds media assets
(images and videos) that no file of a project references, and writes a report
with their sizes so they can be cleaned up.

The scan runs in four stages:

1.  **Asset Inventory**: Lists every `png`, `jpg`, `jpeg`, `svg`, `gif` and `mp4`
    file under the assets directory.
2.  **Indirection**: Collects the paths re-exported by the constants module
    through `require("...")` calls, if that module exists.
3.  **Reference Corpus**: Reads every file of the project directory into one
    searchable text.
4.  **Matching & Sizing**: Flags assets whose name (with `@2x`/`@3x` stripped)
    is never mentioned, adds their unreferenced resolution variants, and sums
    their sizes.

Usage:
    $ python main.py --project-dir ./src --assets-dir ./src/assets

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, and progress visualization.
"""

from pathlib import Path
from typing import Annotated
import typer
from rich import print as pr
from constants import DEFAULT_PROJECT_DIR
from core.audit import audit_assets
from core.exceptions import FileIOError
from core.file_io import FilesystemFileWriter
from core.models import ScanConfig
from core.report import format_total, write_report

app = typer.Typer()


@app.command()
def main(
    project_dir: Annotated[
        Path,
        typer.Option(
            file_okay=False,
            help="Source directory whose files are searched for asset references",
        ),
    ] = DEFAULT_PROJECT_DIR,
    assets_dir: Annotated[
        Path | None,
        typer.Option(
            file_okay=False,
            help="Directory holding the media assets. Defaults to <project-dir>/assets. "
            "Every file under <project-dir> must be UTF-8 text, so binary assets "
            "kept inside it abort the scan: point this outside <project-dir> instead",
        ),
    ] = None,
    constants_file: Annotated[
        Path | None,
        typer.Option(
            dir_okay=False,
            help="Module re-exporting assets via require(). "
            "Defaults to <project-dir>/constants/images.js",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            dir_okay=False,
            help="Report destination. Defaults to unused_assets.txt next to <project-dir>",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print intermediate scan details."),
    ] = False,
):
    """
    Find media assets that are never referenced by the project and report their sizes.

    Args:
        project_dir (Path): Root of the source tree to search. Defaults to `./src`.
        assets_dir (Path | None): Root of the assets to check.
        constants_file (Path | None): Indirection source. Optional on disk.
        output (Path | None): Where the text report is written.
        verbose (bool): If True, prints asset, export and corpus counts.

    Raises:
        typer.Exit: With code 1 if a directory is missing, a file cannot be read,
            or the report cannot be written. No report is written in that case.
    """
    config = ScanConfig.from_project(project_dir, assets_dir, constants_file, output)

    pr("[bold green]Process Started[/bold green]")

    try:
        report = audit_assets(config, verbose=verbose)
        write_report(report, FilesystemFileWriter.from_path(config.report_path))
    except FileIOError as e:
        print_file_io_err(e)
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)

    pr(f"\nUnused assets have been written to [green]{config.report_path}[/green]")
    pr(f"[bold]{format_total(report)}[/bold] ({len(report)} assets)")


def print_file_io_err(e: FileIOError) -> None:
    """
    Displays a user-friendly error message for file I/O failures.

    Args:
        e (FileIOError): The exception that was raised, containing error details
            and file path information.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]File I/O Error[/bold red]")
    pr(f"The scan could not complete: {e.message}")
    if e.file_path:
        pr(f"File path: [yellow]{e.file_path}[/yellow]")

    pr(
        "\n[yellow]Quick Fix:[/yellow] Check that the project and assets directories exist, "
        "that every project file is UTF-8 text, and that the report location is writable."
    )
    if e.original_exception:
        pr(f"\nTechnical details: {e.original_exception}")

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while scanning for unused assets.")

    pr("\n--- PLEASE REPORT THIS ---")
    pr(f"Error Type: {type(e).__name__}")
    pr(f"Error Message: {e}")
    if e.__cause__:
        pr(f"Caused by: {e.__cause__}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
