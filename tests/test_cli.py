"""Tests for the command line interface."""

from pathlib import Path

from typer.testing import CliRunner

from termedit import __version__
from termedit.cli.app import create_app

runner = CliRunner()


class TestCli:
    """Invoking termedit outside a terminal."""

    def test_version(self) -> None:
        result = runner.invoke(create_app(), ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self) -> None:
        result = runner.invoke(create_app(), ["--help"])
        assert result.exit_code == 0
        assert "path" in result.output.lower()
        assert "File to edit" in result.output

    def test_requires_a_terminal(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        result = runner.invoke(create_app(), [str(path)])
        assert result.exit_code == 1
        assert "interactive terminal" in result.output
        assert not path.exists()

    def test_too_many_arguments(self) -> None:
        result = runner.invoke(create_app(), ["a.txt", "b.txt"])
        assert result.exit_code != 0

    def test_logging_is_configured(self, isolated_config: Path) -> None:
        runner.invoke(create_app(), ["--log-level", "debug"])
        assert (isolated_config / "termedit.log").exists()
