"""Integration tests for the cv command line - writes real PDFs."""

import shutil

import pytest
from typer.testing import CliRunner

from vitae.cli import app
from vitae.contexts.settings import load_settings

runner = CliRunner()


@pytest.fixture
def settings_args(tmp_path):
    return ["--config", str(tmp_path / "cv.yaml"), "--env-file", str(tmp_path / ".cvrc")]


@pytest.mark.integration
def test_cover_without_shrink_writes_pdf_and_remembers_name(settings_args, tmp_path):
    result = runner.invoke(
        app,
        settings_args
        + ["cover", str(tmp_path / "letter"), "-c", "Acme", "-p", "Engineer", "-n", "Ada", "--no-shrink"],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "letter.pdf").exists()
    assert "Cover letter written" in result.output
    assert load_settings(tmp_path / "cv.yaml", tmp_path / ".cvrc", environ={}).name == "Ada"


@pytest.mark.integration
def test_resume_without_shrink_uses_stored_resume(settings_args, tmp_path):
    (tmp_path / "cv.yaml").write_text(
        "name: Ada Lovelace\n"
        "resume:\n"
        "  skills:\n"
        "    - category: Languages\n"
        "      items: [Python]\n"
    )

    result = runner.invoke(
        app, settings_args + ["resume", str(tmp_path / "resume.pdf"), "-p", "Engineer", "--no-shrink"]
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "resume.pdf").exists()
    assert "Pages: 1" in result.output


@pytest.mark.integration
@pytest.mark.skipif(shutil.which("gs") is None, reason="gs not installed - install Ghostscript")
def test_cover_with_ghostscript(settings_args, tmp_path):
    result = runner.invoke(
        app, settings_args + ["cover", str(tmp_path / "letter.pdf"), "-c", "Acme", "-n", "Ada"]
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "letter.pdf").exists()
