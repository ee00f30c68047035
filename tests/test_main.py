"""
Tests for the CLI entry point using Typer's CliRunner.
"""

import pytest
from typer.testing import CliRunner

from core.file_io import MockFileWriter
from main import app

MB = 1024 * 1024

runner = CliRunner()


@pytest.fixture
def sample_project(tmp_path):
    """A project with one referenced asset and an unused asset with a @2x variant."""
    src = tmp_path / "src"
    (src / "assets" / "img").mkdir(parents=True)
    (src / "constants").mkdir()
    (src / "App.js").write_text(
        "import { Bg } from './constants/images';\n<Image source={Bg} />\n",
        encoding="utf-8",
    )
    (src / "constants" / "images.js").write_text(
        "export const Bg = require('../assets/img/bg.jpg');\n", encoding="utf-8"
    )
    (src / "assets" / "img" / "bg.jpg").write_bytes(b"a" * MB)
    (src / "assets" / "logo.png").write_bytes(b"a" * MB)
    (src / "assets" / "logo@2x.png").write_bytes(b"a" * 2 * MB)
    return tmp_path


@pytest.mark.integration
def test_cli_writes_report_next_to_project(sample_project):
    result = runner.invoke(app, ["--project-dir", str(sample_project / "src")])

    assert result.exit_code == 0, result.output
    assert "Process Started" in result.output
    assert "Total size of unused assets: 3.00 MB" in result.output

    report = (sample_project / "unused_assets.txt").read_text(encoding="utf-8")
    assert report == (
        "logo.png -- 1.00 MB\n"
        "logo@2x.png -- 2.00 MB\n"
        "\n"
        "Total size of unused assets: 3.00 MB"
    )


@pytest.mark.integration
def test_cli_custom_output_path(sample_project):
    output = sample_project / "report.txt"

    result = runner.invoke(
        app, ["--project-dir", str(sample_project / "src"), "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert output.exists()
    assert not (sample_project / "unused_assets.txt").exists()


@pytest.mark.integration
def test_cli_missing_assets_dir_fails_without_report(sample_project):
    result = runner.invoke(
        app,
        [
            "--project-dir",
            str(sample_project / "src"),
            "--assets-dir",
            str(sample_project / "nope"),
        ],
    )

    assert result.exit_code == 1
    assert "File I/O Error" in result.output
    assert not (sample_project / "unused_assets.txt").exists()


@pytest.mark.integration
def test_cli_missing_project_dir_fails(tmp_path):
    result = runner.invoke(app, ["--project-dir", str(tmp_path / "src")])

    assert result.exit_code == 1
    assert not (tmp_path / "unused_assets.txt").exists()


@pytest.mark.integration
def test_cli_undecodable_source_fails_without_report(sample_project):
    (sample_project / "src" / "blob.dat").write_bytes(b"\xff\xfe\x00")

    result = runner.invoke(app, ["--project-dir", str(sample_project / "src")])

    assert result.exit_code == 1
    assert "File I/O Error" in result.output
    assert not (sample_project / "unused_assets.txt").exists()


@pytest.mark.integration
def test_cli_unwritable_report_location_fails(sample_project):
    result = runner.invoke(
        app,
        [
            "--project-dir",
            str(sample_project / "src"),
            "-o",
            str(sample_project / "missing" / "report.txt"),
        ],
    )

    assert result.exit_code == 1
    assert "File I/O Error" in result.output


@pytest.mark.integration
@pytest.mark.mock
def test_cli_unexpected_error_is_reported(sample_project, mocker):
    mocker.patch("main.audit_assets", side_effect=RuntimeError("kaboom"))

    result = runner.invoke(app, ["--project-dir", str(sample_project / "src")])

    assert result.exit_code == 1
    assert "Unexpected Error" in result.output
    assert "kaboom" in result.output


@pytest.mark.integration
def test_cli_verbose_prints_debug(sample_project):
    result = runner.invoke(
        app, ["--project-dir", str(sample_project / "src"), "--verbose"]
    )

    assert result.exit_code == 0, result.output
    assert "DEBUG: 3 assets found" in result.output


@pytest.mark.integration
@pytest.mark.mock
def test_cli_hands_report_to_writer(sample_project, mocker):
    writer = MockFileWriter()
    from_path = mocker.patch("main.FilesystemFileWriter.from_path", return_value=writer)

    result = runner.invoke(app, ["--project-dir", str(sample_project / "src")])

    assert result.exit_code == 0, result.output
    from_path.assert_called_once_with(sample_project / "unused_assets.txt")
    assert len(writer.write_file_calls) == 1
    assert writer.written_data.endswith("Total size of unused assets: 3.00 MB")
    assert not (sample_project / "unused_assets.txt").exists()


@pytest.mark.unit
def test_cli_help_warns_about_binary_assets_in_project_dir():
    result = runner.invoke(app, ["--help"], env={"COLUMNS": "200"})

    assert result.exit_code == 0
    assert "UTF-8" in result.output
    assert "--assets-dir" in result.output
