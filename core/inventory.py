from pathlib import Path

from adapters.filesystem import FileLister, FilesystemLister
from constants import MEDIA_FILE_PATTERN


def is_media_file(file_name: str) -> bool:
    """Return True if the name ends with a recognized media extension (case-sensitive)."""
    return MEDIA_FILE_PATTERN.search(file_name) is not None


def get_assets(assets_dir: Path, lister: FileLister | None = None) -> list[str]:
    """
    Enumerate every media file below the assets root.

    Args:
        assets_dir: Root of the assets tree.
        lister: Optional file lister. Defaults to FilesystemLister.

    Returns:
        Paths relative to `assets_dir` with forward slashes, in listing order.

    Raises:
        MissingRootError: If `assets_dir` does not exist or cannot be listed.
    """
    lister = lister if lister is not None else FilesystemLister()

    return [
        file_path.as_posix()
        for file_path in lister.stream_file_paths(assets_dir)
        if is_media_file(file_path.name)
    ]
