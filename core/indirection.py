"""
Reading of the indirection source.

Some projects never mention an asset file name next to the code that renders
it. Instead, a constants module imports every image once and re-exports it
under a symbolic name:

    export const Logo = require("./img/logo.png");

The string literals passed to `require(...)` in that module are collected here
and later count as references to the assets they name.
"""

from pathlib import Path

from constants import REQUIRE_CALL_PATTERN
from core.file_io import FileReader, FilesystemFileReader


def extract_required_paths(content: str) -> set[str]:
    """
    Extract the quoted argument of every `require(...)` call in `content`.

    Both quote styles are accepted, and any number of calls may share a line.
    Literals are returned exactly as written.
    """
    return {match.group(1) for match in REQUIRE_CALL_PATTERN.finditer(content)}


def read_indirection_file(
    constants_file: Path, reader: FileReader | None = None
) -> set[str]:
    """
    Collect the asset paths re-exported by the indirection source.

    The source is optional: if it does not exist, no asset is exported.

    Args:
        constants_file: Path of the indirection source.
        reader: Optional file reader. Defaults to FilesystemFileReader.

    Returns:
        The set of string literals passed to `require(...)`.

    Raises:
        FileReadError: If the file exists but cannot be read.
    """
    if not constants_file.is_file():
        return set()

    reader = reader if reader is not None else FilesystemFileReader()
    return extract_required_paths(reader.read_file(constants_file))


def is_exported(asset_name: str, exported: set[str] | frozenset[str]) -> bool:
    """
    Check whether an asset path is re-exported through the indirection source.

    A `./` prefix on the exported literal is ignored, so `require("./img/a.png")`
    exports `img/a.png`.
    """
    return asset_name in exported or f"./{asset_name}" in exported
