"""Smoke tests for package metadata and the CLI entry point."""

from __future__ import annotations

from click.testing import CliRunner

from loxselect import __version__
from loxselect.cli.main import cli
from loxselect.discovery.product import LOXONE_CONFIG


def test_version():
    assert __version__ == "0.1.0"


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Loxone Config" in result.output


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_default_base_path(monkeypatch):
    monkeypatch.setenv("ProgramFiles(x86)", "/pf86")
    assert LOXONE_CONFIG.default_base_path().as_posix().endswith("/pf86/Loxone")
    monkeypatch.delenv("ProgramFiles(x86)")
    monkeypatch.setenv("ProgramFiles", "/pf")
    assert LOXONE_CONFIG.default_base_path().as_posix().endswith("/pf/Loxone")
