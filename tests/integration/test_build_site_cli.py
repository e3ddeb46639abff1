"""
Integration tests for the build_site.py command line interface.
"""

import importlib.util
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "build_site.py"

runner = CliRunner()


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """The build_site.py module, logging into a temporary directory."""
    spec = importlib.util.spec_from_file_location("build_site", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    yield module

    # build points loguru at the runner's stdout; restore the default sink
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.integration
def test_no_command_shows_help(cli):
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert "render-resume" in result.output


@pytest.mark.integration
def test_build(cli, tmp_path):
    output_dir = tmp_path / "site"
    result = runner.invoke(cli.app, ["build", "--data", str(FIXTURES_PATH), "--output", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert "Site built" in result.output
    assert (output_dir / "resumes" / "john-smith" / "index.html").exists()


@pytest.mark.integration
def test_build_failure_exit_code(cli, tmp_path):
    result = runner.invoke(cli.app, ["build", "--data", str(tmp_path / "empty"), "--output", str(tmp_path / "site")])

    assert result.exit_code == 1


@pytest.mark.integration
def test_render_resume_to_file(cli, tmp_path):
    output = tmp_path / "jane.html"
    result = runner.invoke(
        cli.app, ["render-resume", "/resumes/jane-doe/", "--data", str(FIXTURES_PATH), "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Jane Doe - Senior Software Engineer Resume" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_render_missing_resume(cli):
    result = runner.invoke(cli.app, ["render-resume", "/resumes/nobody/", "--data", str(FIXTURES_PATH)])

    assert result.exit_code == 1
    assert "Resume Not Found" in result.output


@pytest.mark.integration
def test_render_listing_preview(cli):
    result = runner.invoke(
        cli.app, ["render-listing", "/preview/feature-x/", "--data", str(FIXTURES_PATH)]
    )

    assert result.exit_code == 0
    assert "feature-x" in result.output


@pytest.mark.integration
def test_check(cli):
    result = runner.invoke(cli.app, ["check", "--data", str(FIXTURES_PATH)])

    assert result.exit_code == 0, result.output
    assert "✓ jane-doe" in result.output
    assert "! john-smith" in result.output
    assert "Incomplete sections: contact" in result.output
