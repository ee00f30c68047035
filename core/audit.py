from rich import print as pr

from adapters.filesystem import FileLister, FilesystemLister
from core.corpus import build_corpus
from core.file_io import FileReader, FilesystemFileReader
from core.indirection import read_indirection_file
from core.inventory import get_assets
from core.matcher import find_unused_assets
from core.models import AssetReport, ScanConfig
from core.report import build_report
from ui.progress_display import ProgressDisplay
from utils import debug


def audit_assets(
    config: ScanConfig,
    lister: FileLister | None = None,
    reader: FileReader | None = None,
    progress_display: ProgressDisplay | None = None,
    verbose: bool = False,
) -> AssetReport:
    """
    Run the full scan and return the unused assets with their sizes.

    The asset inventory, the exported paths of the indirection source and the
    reference corpus are gathered first, then matched, then sized. Any error
    aborts the scan before a report exists.

    Args:
        config: Paths to scan.
        lister: Optional file lister. Defaults to FilesystemLister.
        reader: Optional file reader. Defaults to FilesystemFileReader.
        progress_display: Optional progress display for corpus reading.
        verbose: If True, prints intermediate counts.

    Returns:
        AssetReport for every unused asset.

    Raises:
        MissingRootError: If the assets or project root is missing.
        FileReadError: If a project file cannot be read or an asset cannot be stat'ed.
    """
    lister = lister if lister is not None else FilesystemLister()
    reader = reader if reader is not None else FilesystemFileReader()

    pr(f"[green]Collecting assets in: {config.assets_dir}...[/green]")
    assets = get_assets(config.assets_dir, lister)

    exported = read_indirection_file(config.constants_file, reader)

    corpus = build_corpus(config.project_dir, lister, reader, progress_display)

    if verbose:
        debug(f"{len(assets)} assets found")
        debug(f"{len(exported)} paths exported by {config.constants_file}")
        debug(f"{len(corpus)} characters in reference corpus")

    unused = find_unused_assets(assets, corpus, exported)

    return build_report(unused, config.assets_dir, reader)
