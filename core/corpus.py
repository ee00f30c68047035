from pathlib import Path

from rich import print as pr

from adapters.filesystem import FileLister, FilesystemLister
from core.exceptions import FileReadError
from core.file_io import FileReader, FilesystemFileReader
from ui.progress_display import ProgressDisplay, RichProgressDisplay


def build_corpus(
    project_dir: Path,
    lister: FileLister | None = None,
    reader: FileReader | None = None,
    progress_display: ProgressDisplay | None = None,
) -> str:
    """
    Read every file under the project root into one searchable string.

    No file is filtered out by extension: styles, markup, JSON and comments all
    count as references. File contents are joined with a single space.

    Args:
        project_dir: Root of the source tree.
        lister: Optional file lister. Defaults to FilesystemLister.
        reader: Optional file reader. Defaults to FilesystemFileReader.
        progress_display: Optional progress display. Defaults to RichProgressDisplay.

    Returns:
        The concatenated text of every project file.

    Raises:
        MissingRootError: If `project_dir` does not exist or cannot be listed.
        FileReadError: If any file cannot be read as UTF-8 text.
    """
    lister = lister if lister is not None else FilesystemLister()
    reader = reader if reader is not None else FilesystemFileReader()
    display = progress_display if progress_display is not None else RichProgressDisplay()

    file_paths = list(lister.stream_file_paths(project_dir))

    pr("\n[bold magenta]📖 Reading project sources...[/bold magenta]")

    contents: list[str] = []
    with display as pd:
        pd.on_start(len(file_paths))

        for file_path in file_paths:
            try:
                contents.append(reader.read_file(project_dir / file_path))
            except FileReadError:
                pd.on_error(file_path)
                raise
            pd.on_file_read()

        pd.on_complete()

    return " ".join(contents)
