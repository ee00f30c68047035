"""
Integration tests for the audit pipeline against real directory trees.
"""

import pytest

from core.audit import audit_assets
from core.exceptions import FileReadError, MissingRootError
from core.models import ScanConfig, UnusedAsset

MB = 1024 * 1024


@pytest.mark.integration
def test_logo_and_variant_both_unused(project_tree, progress_display):
    root = project_tree(
        {
            "src/App.js": "export default function App() { return null; }",
            "src/assets/logo.png": MB,
            "src/assets/logo@2x.png": 2 * MB,
        }
    )
    config = ScanConfig.from_project(root / "src")

    report = audit_assets(config, progress_display=progress_display)

    assert report.assets == (
        UnusedAsset("logo.png", 1.0),
        UnusedAsset("logo@2x.png", 2.0),
    )
    assert report.total_size_in_mb == 3.0


@pytest.mark.integration
def test_referenced_asset_is_not_reported(project_tree, progress_display):
    root = project_tree(
        {
            "src/Header.jsx": "<img src={require('./assets/icon.svg')} />",
            "src/assets/icon.svg": "<svg></svg>",
        }
    )
    config = ScanConfig.from_project(root / "src")

    report = audit_assets(config, progress_display=progress_display)

    assert report.assets == ()
    assert report.total_size_in_mb == 0.0


@pytest.mark.integration
def test_asset_exported_through_constants_file(project_tree, progress_display):
    """The constants file lives outside the project so only the export can match."""
    root = project_tree(
        {
            "src/index.js": "console.log('hi');",
            "src/assets/img/bg.jpg": MB,
            "config/images.js": 'export const Bg = require("./img/bg.jpg");',
        }
    )
    config = ScanConfig.from_project(
        root / "src", constants_file=root / "config" / "images.js"
    )

    report = audit_assets(config, progress_display=progress_display)

    assert report.assets == ()


@pytest.mark.integration
def test_missing_constants_file_is_not_an_error(project_tree, progress_display):
    root = project_tree({"src/assets/a.gif": MB // 2})
    config = ScanConfig.from_project(root / "src")

    report = audit_assets(config, progress_display=progress_display)

    assert report.assets == (UnusedAsset("a.gif", 0.5),)


@pytest.mark.integration
def test_assets_outside_project_dir(project_tree, progress_display):
    root = project_tree(
        {
            "app/src/screens/Home.tsx": "source={images.hero}",
            "app/src/constants/images.js": "export const hero = require('../../media/hero.png');",
            "app/media/hero.png": MB,
            "app/media/unused/old.jpg": MB,
        }
    )
    config = ScanConfig.from_project(
        root / "app" / "src", assets_dir=root / "app" / "media"
    )

    report = audit_assets(config, progress_display=progress_display)

    assert [entry.path for entry in report.assets] == ["unused/old.jpg"]


@pytest.mark.integration
def test_audit_is_idempotent(project_tree, progress_display):
    root = project_tree(
        {
            "src/a.js": "b.png",
            "src/assets/a.png": MB,
            "src/assets/a@3x.png": MB,
            "src/assets/b.png": MB,
        }
    )
    config = ScanConfig.from_project(root / "src")

    first = audit_assets(config, progress_display=progress_display)
    second = audit_assets(config, progress_display=progress_display)

    assert first == second
    assert [entry.path for entry in first.assets] == ["a.png", "a@3x.png"]


@pytest.mark.integration
def test_missing_assets_root_is_fatal(project_tree, progress_display):
    root = project_tree({"src/a.js": ""})
    config = ScanConfig.from_project(root / "src")

    with pytest.raises(MissingRootError):
        audit_assets(config, progress_display=progress_display)


@pytest.mark.integration
def test_missing_project_root_is_fatal(project_tree, progress_display):
    root = project_tree({"assets/a.png": 1})
    config = ScanConfig.from_project(root / "src", assets_dir=root / "assets")

    with pytest.raises(MissingRootError):
        audit_assets(config, progress_display=progress_display)


@pytest.mark.integration
def test_binary_project_file_is_fatal(project_tree, progress_display):
    root = project_tree(
        {
            "src/a.js": "",
            "src/font.woff": b"\x00\xff\xfe",
            "assets/a.png": 1,
        }
    )
    config = ScanConfig.from_project(root / "src", assets_dir=root / "assets")

    with pytest.raises(FileReadError):
        audit_assets(config, progress_display=progress_display)


@pytest.mark.integration
@pytest.mark.mock
def test_verbose_prints_debug_details(project_tree, progress_display, mocker):
    mock_debug = mocker.patch("core.audit.debug")
    root = project_tree({"src/a.js": "x", "src/assets/a.png": 1})
    config = ScanConfig.from_project(root / "src")

    audit_assets(config, progress_display=progress_display, verbose=True)

    assert mock_debug.call_count == 3
